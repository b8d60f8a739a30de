"""Decode Google-style encoded polylines into (lat, lon) points."""

from typing import List

import polyline

from .errors import DecodeError
from .geo import Point

# every encoded chunk is chr(value + 63) with value < 64
_MIN_CHAR, _MAX_CHAR = 63, 126


def decode_polyline(encoded: str, precision: int = 5) -> List[Point]:
    """Decode a polyline string. Raises DecodeError for bad characters or a truncated stream."""
    if not isinstance(encoded, str):
        raise DecodeError(f"Polyline must be a string, got {type(encoded).__name__}")
    for i, ch in enumerate(encoded):
        if not _MIN_CHAR <= ord(ch) <= _MAX_CHAR:
            raise DecodeError(f"Invalid polyline character {ch!r} at offset {i}")
    try:
        coords = polyline.decode(encoded, precision)
    except (IndexError, ValueError) as e:
        raise DecodeError(f"Truncated or malformed polyline ({len(encoded)} chars)") from e
    return [Point(lat, lon) for lat, lon in coords]
