"""Common interface for the pose text parsers."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

LogCallback = Callable[[str], None]


def _no_log(message: str) -> None:
    return None


class PoseParser(ABC):
    """
    Abstract base class for the dialect parsers.

    Each dialect turns raw text into its own document shape. Parsers are
    stateless between calls; everything a parse needs lives in its input
    text, so one instance can be reused across requests.

    Args:
        log: Optional debug callback receiving progress messages.
             Defaults to a no-op.
    """

    name: str = "base"

    def __init__(self, log: Optional[LogCallback] = None):
        self.log: LogCallback = log or _no_log

    @abstractmethod
    def parse(self, text: str) -> Any:
        """Parse the whole input text into a pose document."""

    def parse_bytes(self, data: bytes) -> Any:
        """Decode uploaded bytes as UTF-8 (leading BOM dropped) and parse them."""
        return self.parse(data.decode("utf-8-sig", errors="replace"))
