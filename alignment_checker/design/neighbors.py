"""Radius lookups around a position of the element sequence."""

from typing import List, Optional, Tuple

from ..errors import NoRadiusError
from .element import Element


def directed_next_radius(elements: List[Element], pos: int, direction: int) -> Tuple[Optional[Element], int]:
    """
    Walk from ``pos`` in ``direction`` (-1 or +1) and return the first radius
    element together with its step distance, or ``(None, 0)``.
    """
    distance = 0
    i = pos + direction
    while 0 <= i < len(elements):
        distance += 1
        if elements[i].is_radius:
            return elements[i], distance
        i += direction
    return None, 0


def previous_radius(elements: List[Element], pos: int) -> Optional[Element]:
    return directed_next_radius(elements, pos, -1)[0]


def next_radius(elements: List[Element], pos: int) -> Optional[Element]:
    return directed_next_radius(elements, pos, 1)[0]


def nearest_radius(elements: List[Element], pos: int) -> Element:
    """Closest radius on either side; on a tie the following one wins."""
    previous, previous_distance = directed_next_radius(elements, pos, -1)
    following, following_distance = directed_next_radius(elements, pos, 1)

    if previous is None and following is None:
        element = elements[pos]
        raise NoRadiusError("Could not find a radius element", element_id=element.id, row=element.row)
    if following is None:
        return previous
    if previous is None:
        return following
    if previous_distance < following_distance:
        return previous
    return following
