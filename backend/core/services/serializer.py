"""
Document Serializer

Turns either document shape into pretty-printed UTF-8 JSON.

Key order follows insertion order, so two parses of the same text give
byte-identical output. NaN and +/-Infinity are not valid JSON and are
written as null.
"""

import json
from typing import Any, Union

from ..domain.pose import FrameRecord, LabeledDocument, Point3D, PositionalDocument

JSON_INDENT = 2


def to_jsonable(value: Any) -> Any:
    """Recursively convert domain objects to plain dicts."""
    if isinstance(value, (Point3D, FrameRecord)):
        return value.to_dict()
    if isinstance(value, dict):
        return {key: to_jsonable(item) for key, item in value.items()}
    return value


def serialize(document: Union[LabeledDocument, PositionalDocument]) -> bytes:
    """
    Serialize a pose document to JSON bytes.

    Args:
        document: Output of either dialect parser

    Returns:
        UTF-8 encoded JSON, 2-space indented, non-ASCII kept verbatim
    """
    text = json.dumps(
        to_jsonable(document),
        indent=JSON_INDENT,
        ensure_ascii=False,
        allow_nan=False,
    )
    return text.encode("utf-8")
