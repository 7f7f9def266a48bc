"""
Static lookup tables of the design guideline.

All tables are read-only; every lookup goes through the functions below so a
miss surfaces as a TableLookupError instead of a KeyError.
"""

from types import MappingProxyType
from typing import Optional, Tuple

from ..errors import TableLookupError

# (upper bound of |R| in m, design speed in km/h), ascending
RADIUS_SPEEDS: Tuple[Tuple[float, int], ...] = (
    (30, 40),
    (40, 45),
    (50, 50),
    (60, 55),
    (80, 60),
    (100, 65),
    (130, 70),
    (160, 75),
    (200, 80),
    (250, 85),
    (300, 90),
    (350, 95),
    (430, 100),
    (530, 110),
    (670, 120),
)
# |R| above the last breakpoint
OPEN_RADIUS_SPEED = 130

# speed bucket -> length breakpoints (m); index k raises Vp by 10*k
STRAIGHT_BREAKPOINTS = MappingProxyType({
    40: (30, 100, 180, 270, 380, 500),
    50: (35, 120, 210, 320, 440),
    60: (40, 140, 250, 370),
    70: (50, 160, 280),
    80: (60, 180),
    90: (70,),
})

# radius design speed -> minimum clothoid length (m)
CLOTHOID_MIN_LENGTHS = MappingProxyType({
    40: 15,
    45: 20,
    50: 20,
    55: 30,
    60: 30,
    65: 39,
    70: 39,
    75: 44,
    80: 44,
    85: 50,
    90: 50,
    95: 56,
    100: 56,
    110: 61,
    120: 67,
    130: 72,
})


def radius_to_speed(radius: float) -> int:
    """Uncapped design speed for a radius; the sign of the radius is ignored."""
    radius = abs(radius)
    for upper_bound, speed in RADIUS_SPEEDS:
        if radius <= upper_bound:
            return speed
    return OPEN_RADIUS_SPEED


def straight_breakpoints(bucket: int, element_id: Optional[int] = None) -> Tuple[float, ...]:
    try:
        return STRAIGHT_BREAKPOINTS[bucket]
    except KeyError:
        raise TableLookupError(
            f"No straight length breakpoints for speed bucket {bucket} km/h",
            element_id=element_id,
        ) from None


def clothoid_min_length(speed: int, element_id: Optional[int] = None) -> float:
    try:
        return float(CLOTHOID_MIN_LENGTHS[speed])
    except KeyError:
        raise TableLookupError(
            f"No minimum clothoid length for {speed} km/h",
            element_id=element_id,
        ) from None
