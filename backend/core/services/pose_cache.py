"""
Pose Cache

On-disk side channel for uploads: the raw upload is written as
<name>.pose and the serialized document as <name>.json in the cache
directory. The response body is read back from the .json file.
"""

import logging
import time
import uuid
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


class PoseCache:
    """
    Cache directory holding .pose uploads and their .json results.

    Usage:
        cache = PoseCache("./tmp")

        entry = cache.new_entry()
        entry.write_upload(raw_bytes)
        entry.write_result(json_bytes)
        body = entry.read_result()
        entry.remove()  # optional
    """

    def __init__(self, cache_dir: Union[str, Path]):
        self.cache_dir = Path(cache_dir)

    def ensure_dir(self) -> Path:
        """Create the cache directory if it does not exist."""
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        return self.cache_dir

    def new_entry(self, timestamped: bool = False) -> "CacheEntry":
        """
        Allocate a unique entry name.

        Args:
            timestamped: Prefix the name with the current epoch milliseconds
        """
        name = uuid.uuid4().hex
        if timestamped:
            name = f"{int(time.time() * 1000)}-{name}"
        return CacheEntry(self, name)


class CacheEntry:
    """One upload's pair of cache files."""

    def __init__(self, cache: PoseCache, name: str):
        self.cache = cache
        self.name = name

    @property
    def pose_path(self) -> Path:
        return self.cache.cache_dir / f"{self.name}.pose"

    @property
    def json_path(self) -> Path:
        return self.cache.cache_dir / f"{self.name}.json"

    def write_upload(self, data: bytes) -> Path:
        self.cache.ensure_dir()
        self.pose_path.write_bytes(data)
        return self.pose_path

    def read_upload(self) -> bytes:
        return self.pose_path.read_bytes()

    def write_result(self, data: bytes) -> Path:
        self.cache.ensure_dir()
        self.json_path.write_bytes(data)
        return self.json_path

    def read_result(self) -> bytes:
        return self.json_path.read_bytes()

    def remove(self) -> None:
        """Delete both files; files that were never written are skipped."""
        for path in (self.pose_path, self.json_path):
            try:
                path.unlink(missing_ok=True)
            except OSError as e:
                logger.error(f"Failed to remove cache file {path}: {e}")
