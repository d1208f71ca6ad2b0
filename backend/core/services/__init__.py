"""
Services Layer

Parsing and conversion services for pose text files.
These services build domain documents and handle the cache side channel.
"""

from .base import PoseParser
from .labeled_parser import LabeledFrameParser, parse_labeled
from .positional_parser import PositionalTupleParser, parse_positional, clean_positional_text
from .serializer import serialize, to_jsonable
from .pose_cache import PoseCache
from .pose_converter import PoseConverter

__all__ = [
    "PoseParser",
    "LabeledFrameParser",
    "PositionalTupleParser",
    "parse_labeled",
    "parse_positional",
    "clean_positional_text",
    "serialize",
    "to_jsonable",
    "PoseCache",
    "PoseConverter",
]
