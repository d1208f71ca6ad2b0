"""
Pose API Schemas

Pydantic models describing the JSON documents returned by the upload
endpoints. Responses are streamed as pre-serialized bytes, so these
models document the shape for the OpenAPI docs and let clients (and
tests) validate a response.
"""

from pydantic import BaseModel, Field, RootModel
from typing import Optional, List, Dict
from enum import Enum


class DialectEnum(str, Enum):
    """Pose file dialects for API."""
    LABELED = "labeled"
    POSITIONAL = "positional"


class Point3DSchema(BaseModel):
    """
    Single keypoint coordinate in API response.

    A component is null when the source token was missing or not numeric.
    """
    x: Optional[float] = Field(..., description="Horizontal component")
    y: Optional[float] = Field(..., description="Vertical component")
    z: Optional[float] = Field(..., description="Depth component")

    class Config:
        json_schema_extra = {
            "example": {"x": 0.45, "y": 0.32, "z": -0.15}
        }


class FrameRecordSchema(BaseModel):
    """
    All keypoints of one frame (positional dialect).

    Sections are keyed by catalog name: 25 body points, 21 points per hand
    (L/R prefixed) and 70 face points.
    """
    body: Dict[str, Point3DSchema] = Field(..., description="BODY_25 keypoints")
    left_hand: Dict[str, Point3DSchema] = Field(..., description="Left hand keypoints (LWrist, LThumb1, ...)")
    right_hand: Dict[str, Point3DSchema] = Field(..., description="Right hand keypoints (RWrist, RThumb1, ...)")
    face: Dict[str, Point3DSchema] = Field(..., description="Face keypoints (Face_0 .. Face_69)")


class PositionalDocumentSchema(RootModel[Dict[str, FrameRecordSchema]]):
    """frame_<n> -> frame record, in input line order."""


class LabeledDocumentSchema(RootModel[Dict[str, Dict[str, Dict[str, Point3DSchema]]]]):
    """Body part -> frame id -> keypoint key -> point."""


class HealthResponse(BaseModel):
    """
    Health check response.
    """
    status: str = Field("healthy", description="Service status")
    version: str = Field(..., description="API version")
    dialects: List[DialectEnum] = Field(..., description="Supported pose file dialects")
    cache_dir: str = Field(..., description="Upload cache directory")
