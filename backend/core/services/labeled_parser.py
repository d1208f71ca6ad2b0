"""
Labeled-Frame Parser

Parses the labeled dialect: header lines name a body part and a frame,
followed by "key: x y z" data lines.

Example input:
    # Frame: 12 - Torso
    # distância_000000000001
    Nose: 0.12 0.50 1.02
    Neck: 0.13 0.61 1.00

Produces:
    {"Torso": {"distância_000000000001": {"Nose": Point3D(...), ...}}}

The scan is a fold over lines carrying (part, frame, document). Lines
that cannot be attributed are dropped and bad numbers become NaN; the
parser never raises on content.
"""

import re
from dataclasses import dataclass, replace
from functools import reduce
from typing import Optional

from ..domain.pose import LabeledDocument, Point3D
from .base import LogCallback, PoseParser
from .numeric import NAN, parse_number

DEFAULT_FRAME_MARKER = "distância_"

_PART_HEADER = re.compile(r"# Frame: .*? - (.*)")


@dataclass(frozen=True)
class _ScanState:
    part: str
    frame: str
    document: LabeledDocument


class LabeledFrameParser(PoseParser):
    """
    Parser for the "# Frame:" labeled dialect.

    Args:
        frame_marker: Literal prefix of frame id tokens. A frame id is the
                      prefix followed by exactly 12 digits.
        log: Optional debug callback.
    """

    name = "labeled"

    def __init__(
        self,
        frame_marker: str = DEFAULT_FRAME_MARKER,
        log: Optional[LogCallback] = None,
    ):
        super().__init__(log=log)
        self.frame_marker = frame_marker
        self._frame_id = re.compile(re.escape(frame_marker) + r"[0-9]{12}")

    def parse(self, text: str) -> LabeledDocument:
        lines = text.split("\n")
        self.log(f"Labeled input: {len(lines)} lines")

        initial = _ScanState(part="", frame="", document={})
        final = reduce(self._step, lines, initial)
        return final.document

    # -------------------------------------------------------------------------
    # Fold step
    # -------------------------------------------------------------------------

    def _step(self, state: _ScanState, raw_line: str) -> _ScanState:
        line = raw_line.strip()

        if line.startswith("#"):
            return self._on_header(state, line)

        if not line:
            return state

        frame_match = self._frame_id.search(line) if ":" not in line else None
        if frame_match:
            # Bare frame id line, e.g. "distância_000000000001"; data lines keep their colon
            self.log(f"Frame updated: {frame_match.group(0)}")
            return replace(state, frame=frame_match.group(0))

        if state.part and state.frame:
            self._on_data(state, line)
        return state

    def _on_header(self, state: _ScanState, line: str) -> _ScanState:
        self.log(f"Header line: {line}")
        part, frame = state.part, state.frame

        part_match = _PART_HEADER.search(line)
        if part_match:
            part = part_match.group(1).strip()
            state.document.setdefault(part, {})

        frame_match = self._frame_id.search(line)
        if frame_match:
            frame = frame_match.group(0)
            self.log(f"Frame updated: {frame}")
        else:
            self.log(f"No frame id in line: {line}")

        return replace(state, part=part, frame=frame)

    def _on_data(self, state: _ScanState, line: str) -> None:
        key, sep, values = line.partition(":")
        if not sep or not values:
            return

        tokens = values.split()
        coords = [parse_number(tokens[i]) if i < len(tokens) else NAN for i in range(3)]

        frames = state.document.setdefault(state.part, {})
        keypoints = frames.setdefault(state.frame, {})
        keypoints[key.strip()] = Point3D(*coords)


def parse_labeled(text: str, frame_marker: str = DEFAULT_FRAME_MARKER) -> LabeledDocument:
    """Parse labeled-dialect text with a throwaway parser."""
    return LabeledFrameParser(frame_marker=frame_marker).parse(text)
