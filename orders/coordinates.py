"""
Purpose: Coordinate validation and canonical formatting.
What it does:
- Checks that a [lat, lng] pair of strings is numeric and within bounds
- Produces the canonical "lat,lng" string used for persistence and routing
- Reads a canonical string back into floats for the routing client

Rule: pure functions, no I/O. Runs before any distance lookup or insert.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple

from .errors import ValidationError

LAT_BOUNDS = (-90.0, 90.0)
LNG_BOUNDS = (-180.0, 180.0)

INVALID_PAIR_MESSAGE = "origin and destination must be valid lat, lng pairs"

# ASCII decimal with optional exponent. float() alone also takes "1_0", "inf" and non-ASCII digits
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def _parse_number(value: Any) -> Optional[float]:
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not _DECIMAL_RE.fullmatch(text):
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    # "1e999" overflows to inf
    if not math.isfinite(number):
        return None
    return number


@dataclass(frozen=True)
class LatLng:
    """
    A validated latitude/longitude pair.
    Keeps the client's textual form so the canonical string preserves precision.
    """
    lat: str
    lng: str

    @classmethod
    def from_pair(cls, pair: Sequence[Any]) -> LatLng:
        if isinstance(pair, (str, bytes)) or not isinstance(pair, Sequence) or len(pair) != 2:
            raise ValidationError(INVALID_PAIR_MESSAGE)

        lat = _parse_number(pair[0])
        lng = _parse_number(pair[1])
        if lat is None or lng is None:
            raise ValidationError(INVALID_PAIR_MESSAGE)

        if not (LAT_BOUNDS[0] <= lat <= LAT_BOUNDS[1] and LNG_BOUNDS[0] <= lng <= LNG_BOUNDS[1]):
            raise ValidationError(INVALID_PAIR_MESSAGE)

        return cls(lat=pair[0].strip(), lng=pair[1].strip())

    @classmethod
    def parse(cls, canonical: str) -> LatLng:
        """Inverse of str(): reads a canonical "lat,lng" string."""
        if not isinstance(canonical, str):
            raise ValidationError(f"not a canonical coordinate string: {canonical!r}")
        parts = canonical.split(",")
        try:
            return cls.from_pair(parts)
        except ValidationError:
            raise ValidationError(f"not a canonical coordinate string: {canonical!r}") from None

    def as_floats(self) -> Tuple[float, float]:
        return float(self.lat), float(self.lng)

    def __str__(self) -> str:
        return f"{self.lat},{self.lng}"


def is_valid(pair: Sequence[Any]) -> bool:
    """True iff both parts parse as numbers and lie in [-90, 90] / [-180, 180]."""
    try:
        LatLng.from_pair(pair)
    except ValidationError:
        return False
    return True


def canonicalize(pair: Sequence[Any]) -> str:
    return str(LatLng.from_pair(pair))


def is_canonical(value: str) -> bool:
    try:
        return str(LatLng.parse(value)) == value
    except ValidationError:
        return False
