"""
Pose Converter Service

High-level service that turns an uploaded pose file into JSON bytes.

This is the main entry point used by the upload routes:
    1. Store the raw upload in the cache directory
    2. Parse it with the parser for the requested dialect
    3. Serialize the document and store the .json next to the upload
    4. Read the .json back as the response body
    5. Optionally remove both cache files
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..domain.pose import PoseDialect
from .base import LogCallback, PoseParser
from .labeled_parser import DEFAULT_FRAME_MARKER, LabeledFrameParser
from .pose_cache import PoseCache
from .positional_parser import PositionalTupleParser
from .serializer import serialize

logger = logging.getLogger(__name__)


class PoseConverter:
    """
    Converts pose files of either dialect to JSON.

    Usage:
        converter = PoseConverter(cache_dir="./tmp")

        body = converter.convert(raw_bytes, PoseDialect.LABELED)
        body = converter.convert(raw_bytes, PoseDialect.POSITIONAL, keep_files=False)
    """

    def __init__(
        self,
        cache_dir: Union[str, Path],
        frame_marker: str = DEFAULT_FRAME_MARKER,
        log: Optional[LogCallback] = None,
    ):
        self.cache = PoseCache(cache_dir)
        self.parsers: dict[PoseDialect, PoseParser] = {
            PoseDialect.LABELED: LabeledFrameParser(frame_marker=frame_marker, log=log),
            PoseDialect.POSITIONAL: PositionalTupleParser(log=log),
        }

    def parser_for(self, dialect: PoseDialect) -> PoseParser:
        return self.parsers[dialect]

    def convert(
        self,
        data: bytes,
        dialect: PoseDialect,
        keep_files: bool = True,
    ) -> bytes:
        """
        Parse an uploaded pose file and return the JSON document.

        Args:
            data: Raw upload bytes (UTF-8 text)
            dialect: Which input encoding to parse
            keep_files: Leave the .pose/.json pair in the cache directory

        Returns:
            Serialized JSON document

        Raises:
            OSError: If the cache files cannot be written or read
        """
        entry = self.cache.new_entry(timestamped=not keep_files)
        try:
            entry.write_upload(data)

            parser = self.parser_for(dialect)
            document = parser.parse_bytes(entry.read_upload())
            logger.info(f"Parsed {parser.name} pose file: {len(document)} top-level entries")

            entry.write_result(serialize(document))
            return entry.read_result()
        finally:
            if not keep_files:
                entry.remove()
