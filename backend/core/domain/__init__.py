"""
Domain Models

Pure data structures representing pose documents and keypoint catalogs.
No external dependencies - just Python dataclasses and tuples.
"""

from .pose import Point3D, FrameRecord, PoseDialect, LabeledDocument, PositionalDocument
from .keypoints import (
    BODY_KEYPOINTS,
    HAND_KEYPOINTS,
    LEFT_HAND_KEYPOINTS,
    RIGHT_HAND_KEYPOINTS,
    FACE_KEYPOINTS,
    FRAME_SECTIONS,
    TRIPLES_PER_FRAME,
    VALUES_PER_FRAME,
)

__all__ = [
    "Point3D",
    "FrameRecord",
    "PoseDialect",
    "LabeledDocument",
    "PositionalDocument",
    "BODY_KEYPOINTS",
    "HAND_KEYPOINTS",
    "LEFT_HAND_KEYPOINTS",
    "RIGHT_HAND_KEYPOINTS",
    "FACE_KEYPOINTS",
    "FRAME_SECTIONS",
    "TRIPLES_PER_FRAME",
    "VALUES_PER_FRAME",
]
