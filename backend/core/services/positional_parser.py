"""
Positional-Tuple Parser

Parses the positional dialect: one frame per line, each line a flat list
of floats. The lines are usually a Python repr dumped by the capture
script, e.g.

    {'body': [[np.float32(0.1), np.float32(0.2), ...]], 'left_hand': ...}

After cleaning, each line is just whitespace-separated numbers. Numbers
are grouped into (x, y, z) triples and assigned to keypoints purely by
position:

    triples [0, 25)    -> body        (BODY_25 order)
    triples [25, 46)   -> left_hand   (L-prefixed hand catalog)
    triples [46, 67)   -> right_hand  (R-prefixed hand catalog)
    triples [67, 137)  -> face        (Face_0 .. Face_69)

Slots with no triple are zero-filled; a trailing partial triple carries
NaN in its missing components.
"""

import re
from typing import Optional

from ..domain.keypoints import FRAME_SECTIONS, VALUES_PER_FRAME
from ..domain.pose import FrameRecord, Point3D, PositionalDocument
from .base import LogCallback, PoseParser
from .numeric import group_triples, parse_numbers

_NUMPY_FLOAT = re.compile(r"np\.float(?:32|64)\(([-+0-9.eE]+)\)")
_BRACKETS = re.compile(r"[\[\]]")
_SECTION_NAMES = re.compile(r"(body|left_hand|right_hand|face)")
_LEFTOVER_SYNTAX = re.compile(r"[\"{}:]")


def clean_positional_text(text: str) -> str:
    """
    Strip the list/dict/numpy decoration around the numbers.

    The steps run in a fixed order; section names are removed before
    quotes and colons so "'body':" collapses to nothing.
    """
    cleaned = text.replace("'", '"')
    cleaned = _NUMPY_FLOAT.sub(r"\1", cleaned)
    cleaned = _BRACKETS.sub("", cleaned)
    cleaned = cleaned.replace(",", "")
    cleaned = _SECTION_NAMES.sub("", cleaned)
    cleaned = _LEFTOVER_SYNTAX.sub("", cleaned)
    return cleaned.strip()


class PositionalTupleParser(PoseParser):
    """Parser for the positional numeric-tuple dialect."""

    name = "positional"

    def __init__(self, log: Optional[LogCallback] = None):
        super().__init__(log=log)

    def parse(self, text: str) -> PositionalDocument:
        lines = [line for line in clean_positional_text(text).split("\n") if line.strip()]
        self.log(f"Positional input: {len(lines)} frames")

        document: PositionalDocument = {}
        for index, line in enumerate(lines, start=1):
            document[f"frame_{index}"] = self.parse_frame(line)
        return document

    def parse_frame(self, line: str) -> FrameRecord:
        """Build one FrameRecord from a cleaned line of numbers."""
        values = parse_numbers(line.split())
        if len(values) != VALUES_PER_FRAME:
            self.log(f"Frame has {len(values)} values, expected {VALUES_PER_FRAME}")

        triples = group_triples(values)
        record = FrameRecord()
        sections = record.sections()

        offset = 0
        for section, catalog in FRAME_SECTIONS:
            target = sections[section]
            for i, name in enumerate(catalog):
                slot = offset + i
                target[name] = Point3D(*triples[slot]) if slot < len(triples) else Point3D.origin()
            offset += len(catalog)

        return record


def parse_positional(text: str) -> PositionalDocument:
    """Parse positional-dialect text with a throwaway parser."""
    return PositionalTupleParser().parse(text)
