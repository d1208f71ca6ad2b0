"""
PoseText Backend API

FastAPI application that converts pose keypoint text files to JSON.

Run with:
    uvicorn main:app --reload --host 0.0.0.0 --port 4000

API docs available at:
    http://localhost:4000/docs (Swagger UI)
    http://localhost:4000/redoc (ReDoc)
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import router as api_router, API_VERSION
from config import get_settings

# =============================================================================
# Logging Configuration
# =============================================================================

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan (startup/shutdown)
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Creates the upload cache directory before requests are accepted.
    """
    # Startup
    logger.info(" PoseText API starting up...")
    get_settings().cache_dir.mkdir(parents=True, exist_ok=True)
    logger.info(f" Cache directory: {get_settings().cache_dir}")
    logger.info(" API docs: /docs")

    yield  # App runs here

    # Shutdown
    logger.info(" PoseText API shutting down...")


# =============================================================================
# FastAPI App
# =============================================================================

app = FastAPI(
    title="PoseText API",
    description="""
    **Pose Keypoint Text to JSON Converter**

    Upload a pose text file as the multipart field `pose`.

    ## Endpoints

    - `GET /api/health` - Health check
    - `POST /api/upload` - Labeled dialect (`# Frame: ... - <part>` headers, `key: x y z` lines)
    - `POST /api/upload/keypoints` - Positional dialect (one frame of numbers per line)

    Coordinates that could not be parsed are returned as `null`.
    """,
    version=API_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# =============================================================================
# CORS Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


# =============================================================================
# Routes
# =============================================================================

app.include_router(api_router, prefix="/api")


# =============================================================================
# Root endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - API information.
    """
    return {
        "name": "PoseText API",
        "version": API_VERSION,
        "description": "Pose keypoint text to JSON converter",
        "docs": "/docs",
        "health": "/api/health",
        "upload": ["/api/upload", "/api/upload/keypoints"],
    }


# =============================================================================
# Run directly (for development)
# =============================================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level="info"
    )
