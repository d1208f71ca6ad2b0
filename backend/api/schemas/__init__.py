"""
API Schemas

Pydantic models for request/response validation.
"""

from .pose import (
    DialectEnum,
    Point3DSchema,
    FrameRecordSchema,
    PositionalDocumentSchema,
    LabeledDocumentSchema,
    HealthResponse,
)

__all__ = [
    "DialectEnum",
    "Point3DSchema",
    "FrameRecordSchema",
    "PositionalDocumentSchema",
    "LabeledDocumentSchema",
    "HealthResponse",
]
