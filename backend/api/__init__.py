"""
PoseText API Module

FastAPI routes for converting pose text files to JSON.
"""

from .routes import router

__all__ = [
    "router",
]
