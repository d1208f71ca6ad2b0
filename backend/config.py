"""
Service Configuration

Settings are read from environment variables once and cached.
Routes receive them through the get_settings() dependency, which tests
override to point the cache at a temporary directory.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from core.services.labeled_parser import DEFAULT_FRAME_MARKER


@dataclass(frozen=True)
class Settings:
    # Directory for .pose uploads and their .json results
    cache_dir: Path = Path("tmp")
    # Literal prefix of 12-digit frame ids in the labeled dialect
    frame_marker: str = DEFAULT_FRAME_MARKER
    # Labeled uploads keep their cache files; positional uploads never do
    keep_labeled_cache: bool = True
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 4000


def _as_bool(v: Optional[str], default: bool) -> bool:
    if v is None:
        return default
    return v.strip().lower() in ("1", "true", "yes", "on")


def _as_int(v: Optional[str], default: int) -> int:
    try:
        return int(v)
    except (TypeError, ValueError):
        return default


def load_settings() -> Settings:
    """Build Settings from POSE_* environment variables."""
    defaults = Settings()
    return Settings(
        cache_dir=Path(os.getenv("POSE_CACHE_DIR", str(defaults.cache_dir))),
        frame_marker=os.getenv("POSE_FRAME_MARKER", defaults.frame_marker),
        keep_labeled_cache=_as_bool(os.getenv("POSE_KEEP_LABELED_CACHE"), defaults.keep_labeled_cache),
        log_level=os.getenv("POSE_LOG_LEVEL", defaults.log_level).upper(),
        host=os.getenv("POSE_HOST", defaults.host),
        port=_as_int(os.getenv("POSE_PORT"), defaults.port),
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
