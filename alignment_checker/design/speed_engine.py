from typing import List
import math

from ..errors import NoRadiusError
from ..logger import NullLogger
from .design_parameters import DesignParameters
from .element import Element
from .neighbors import nearest_radius, next_radius, previous_radius
from .tables import clothoid_min_length, radius_to_speed, straight_breakpoints


class SpeedAssignmentEngine:
    """
    Assigns the design speed Vp of every element.

    Radius elements are done first, straights and clothoids only read the Vp
    of radius elements, so the three passes must run in this order.
    """

    def __init__(self, parameters: DesignParameters = None, logger=None):
        self.parameters = parameters or DesignParameters()
        self.logger = logger or NullLogger()

    def assign(self, elements: List[Element]) -> List[Element]:
        for e in elements:
            if e.is_radius:
                self._assign_radius(e)

        for i, e in enumerate(elements):
            if e.is_straight:
                self._assign_straight(elements, i)

        for i, e in enumerate(elements):
            if e.is_clothoid:
                e.vp = nearest_radius(elements, i).vp
                self.logger.log_verbose(f"  Clothoid {e.id}: Vp {e.vp} km/h")

        return elements

    def _assign_radius(self, e: Element) -> None:
        e.vp = min(self.parameters.max_vp, radius_to_speed(e.radius))

        # clothoid bounds, read later by the neighbouring clothoids
        l_cloth_min = clothoid_min_length(e.vp, element_id=e.id)
        e.a_min = math.sqrt(abs(e.radius) * l_cloth_min)
        e.a_max = math.sqrt(abs(e.radius) * l_cloth_min * self.parameters.clothoid_max_factor)

        self.logger.log_verbose(
            f"  Radius {e.id}: R={e.radius:.2f}m Vp {e.vp} km/h, "
            f"AMin {e.a_min:.2f}m AMax {e.a_max:.2f}m"
        )

    def _assign_straight(self, elements: List[Element], pos: int) -> None:
        e = elements[pos]
        previous = previous_radius(elements, pos)
        following = next_radius(elements, pos)
        if previous is None and following is None:
            raise NoRadiusError("Straight has no radius element on either side", element_id=e.id, row=e.row)

        radius_vp = 0
        if previous is not None:
            radius_vp = max(previous.vp, radius_vp)
        if following is not None:
            radius_vp = max(following.vp, radius_vp)

        e.vp = self.straight_vp(radius_vp, e.length, element_id=e.id)
        self.logger.log_verbose(
            f"  Straight {e.id}: neighbour Vp {radius_vp} km/h, "
            f"length {e.length:.2f}m -> Vp {e.vp} km/h"
        )

    def straight_vp(self, radius_vp: int, length: float, element_id=None) -> int:
        """
        Vp of a straight of ``length`` next to curves driven at ``radius_vp``.
        Each breakpoint the straight is longer than adds 10 km/h.
        """
        addition = radius_vp % 10
        bucket = radius_vp - addition
        for i, breakpoint in enumerate(straight_breakpoints(bucket, element_id=element_id)):
            if length <= breakpoint:
                return bucket + 10 * i + addition
        return self.parameters.max_straight_vp
