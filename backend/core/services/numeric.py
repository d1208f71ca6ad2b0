"""
Numeric Helpers

Permissive number parsing shared by both dialect parsers.

Coordinates come from loosely formatted text, so a bad token never
raises: it becomes NaN and parsing carries on. This mirrors how the
upstream capture tools were consumed (JavaScript parseFloat), including
accepting a numeric prefix such as "1.5px" -> 1.5.
"""

import math
import re
from typing import Iterable, Sequence

NAN = math.nan

# Longest numeric prefix accepted by parseFloat (ASCII digits only)
_NUMBER_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)


def parse_number(token: str) -> float:
    """
    Parse a token as a float, or NaN if it has no numeric prefix.

    Examples:
        parse_number("1.25")    -> 1.25
        parse_number(" -3e2 ")  -> -300.0
        parse_number("4.5abc")  -> 4.5
        parse_number("abc")     -> nan
    """
    match = _NUMBER_PREFIX.match(token.lstrip())
    if match is None:
        return NAN
    return float(match.group(0))


def parse_numbers(tokens: Iterable[str]) -> list[float]:
    return [parse_number(token) for token in tokens]


def group_triples(values: Sequence[float]) -> list[tuple[float, float, float]]:
    """
    Group a flat sequence into consecutive (x, y, z) triples.

    A trailing incomplete group is padded with NaN.
    """
    triples = []
    for i in range(0, len(values), 3):
        chunk = list(values[i:i + 3])
        chunk += [NAN] * (3 - len(chunk))
        triples.append((chunk[0], chunk[1], chunk[2]))
    return triples
