"""
Pose Domain Models

Data structures for the pose documents produced by the text parsers.

Two document shapes exist, one per input dialect:

    Labeled:    part -> frame id -> keypoint key -> Point3D
    Positional: frame_<n> -> FrameRecord(body, left_hand, right_hand, face)

Both share the same leaf type, Point3D. Plain dicts are used for the
mappings because insertion order is part of the output contract.
"""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class PoseDialect(Enum):
    """The two textual encodings of a pose file."""
    LABELED = "labeled"        # "# Frame: ... - <part>" headers + "key: x y z"
    POSITIONAL = "positional"  # one frame per line, flat numeric tuples


@dataclass(frozen=True)
class Point3D:
    """
    A single keypoint coordinate.

    Attributes:
        x: Horizontal component
        y: Vertical component
        z: Depth component

    Note:
        Components may be NaN when the source token was missing or
        not numeric. Parsing never rejects such values.
    """
    x: float
    y: float
    z: float

    @classmethod
    def origin(cls) -> "Point3D":
        """Zero point used to fill catalog slots with no backing data."""
        return cls(0.0, 0.0, 0.0)

    def has_nan(self) -> bool:
        """Check if any component failed to parse."""
        return math.isnan(self.x) or math.isnan(self.y) or math.isnan(self.z)

    def to_dict(self) -> dict[str, Optional[float]]:
        """
        Convert to a JSON-ready dict.

        Non-finite components (NaN, +/-Infinity) become None so the
        result is always valid JSON.
        """
        return {
            "x": _finite_or_none(self.x),
            "y": _finite_or_none(self.y),
            "z": _finite_or_none(self.z),
        }


def _finite_or_none(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


@dataclass
class FrameRecord:
    """
    All keypoints of one frame in the positional dialect.

    Each section maps keypoint name -> Point3D in catalog order.
    """
    body: dict[str, Point3D] = field(default_factory=dict)
    left_hand: dict[str, Point3D] = field(default_factory=dict)
    right_hand: dict[str, Point3D] = field(default_factory=dict)
    face: dict[str, Point3D] = field(default_factory=dict)

    def sections(self) -> dict[str, dict[str, Point3D]]:
        """Sections in output order."""
        return {
            "body": self.body,
            "left_hand": self.left_hand,
            "right_hand": self.right_hand,
            "face": self.face,
        }

    def to_dict(self) -> dict:
        return {
            section: {name: point.to_dict() for name, point in points.items()}
            for section, points in self.sections().items()
        }


# Type aliases for the two document shapes
LabeledDocument = dict[str, dict[str, dict[str, Point3D]]]
PositionalDocument = dict[str, FrameRecord]
