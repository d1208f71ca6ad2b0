"""
REST API Routes

FastAPI routes for pose file conversion.
Each upload route receives a multipart "pose" field and returns the
parsed document as JSON. The route decides which dialect is parsed.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, UploadFile, File
from fastapi.responses import Response

from .schemas import (
    DialectEnum,
    HealthResponse,
    LabeledDocumentSchema,
    PositionalDocumentSchema,
)
from config import Settings, get_settings
from core.domain.pose import PoseDialect
from core.services import PoseConverter

# Configure logging
logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

# Create router
router = APIRouter()

# =============================================================================
# Health Check
# =============================================================================

@router.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="Health check endpoint"
)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """
    Check if the API is running.

    Returns:
        Health status, version and supported dialects
    """
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        dialects=[DialectEnum(d.value) for d in PoseDialect],
        cache_dir=str(settings.cache_dir),
    )


# =============================================================================
# Pose Upload
# =============================================================================

@router.post(
    "/upload",
    tags=["Pose Upload"],
    summary="Convert a labeled '# Frame:' pose file to JSON",
    responses={
        200: {"model": LabeledDocumentSchema, "description": "Part -> frame -> keypoint document"},
        400: {"description": "No file uploaded"},
    },
)
async def upload_labeled(
    pose: Optional[UploadFile] = File(None, description="Labeled pose text file"),
    settings: Settings = Depends(get_settings),
) -> Response:
    """
    Parse a labeled-dialect pose file.

    The upload and its JSON result are kept in the cache directory
    unless POSE_KEEP_LABELED_CACHE is disabled.
    """
    return await _convert_upload(
        pose,
        PoseDialect.LABELED,
        settings,
        keep_files=settings.keep_labeled_cache,
    )


@router.post(
    "/upload/keypoints",
    tags=["Pose Upload"],
    summary="Convert a positional keypoint-tuple file to JSON",
    responses={
        200: {"model": PositionalDocumentSchema, "description": "frame_<n> -> frame record document"},
        400: {"description": "No file uploaded"},
    },
)
async def upload_positional(
    pose: Optional[UploadFile] = File(None, description="Positional keypoint file, one frame per line"),
    settings: Settings = Depends(get_settings),
) -> Response:
    """
    Parse a positional-dialect pose file.

    Cache files are always removed once the response body is ready.
    """
    return await _convert_upload(pose, PoseDialect.POSITIONAL, settings, keep_files=False)


# =============================================================================
# Helper Functions
# =============================================================================

async def _convert_upload(
    pose: Optional[UploadFile],
    dialect: PoseDialect,
    settings: Settings,
    keep_files: bool,
) -> Response:
    """Run an upload through the converter and wrap the JSON bytes."""
    if pose is None:
        raise HTTPException(status_code=400, detail="No file uploaded")

    content = await pose.read()
    logger.info(f"Received {dialect.value} upload '{pose.filename}' ({len(content)} bytes)")

    converter = PoseConverter(
        cache_dir=settings.cache_dir,
        frame_marker=settings.frame_marker,
        log=logger.debug,
    )

    try:
        body = converter.convert(content, dialect, keep_files=keep_files)
    except OSError as e:
        logger.error(f"Pose conversion failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return Response(content=body, media_type="application/json")
