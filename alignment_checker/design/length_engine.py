from typing import List

from ..errors import AlignmentError
from ..logger import NullLogger
from .design_parameters import DesignParameters
from .element import Element, ElementKind
from .neighbors import nearest_radius, next_radius, previous_radius


class LengthConstraintEngine:
    """Derives the permissible length range of each element from its Vp."""

    def __init__(self, parameters: DesignParameters = None, logger=None):
        self.parameters = parameters or DesignParameters()
        self.logger = logger or NullLogger()

    def apply(self, elements: List[Element]) -> List[Element]:
        p = self.parameters
        for i, e in enumerate(elements):
            if e.kind is ElementKind.RADIUS:
                e.min_length = p.driving_length(e.vp, p.radius_seconds)
            elif e.kind is ElementKind.STRAIGHT:
                seconds = p.straight_seconds
                if self._between_same_direction_radii(elements, i):
                    seconds = p.same_direction_seconds
                e.min_length = p.driving_length(e.vp, seconds)
            elif e.kind is ElementKind.CLOTHOID:
                radius = nearest_radius(elements, i)
                e.min_length = radius.a_min
                e.max_length = radius.a_max
            else:
                raise AlignmentError(f"Unknown element type {e.kind!r}", element_id=e.id, row=e.row)

            if e.max_length:
                self.logger.log_verbose(
                    f"  {e.kind.value} {e.id}: length {e.length:.2f}m, "
                    f"allowed {e.min_length:.2f}..{e.max_length:.2f}m"
                )
            else:
                self.logger.log_verbose(
                    f"  {e.kind.value} {e.id}: length {e.length:.2f}m, min {e.min_length:.2f}m"
                )
        return elements

    def _between_same_direction_radii(self, elements: List[Element], pos: int) -> bool:
        previous = previous_radius(elements, pos)
        following = next_radius(elements, pos)
        if previous is None or following is None:
            return False
        if previous.radius < 0 and following.radius < 0:
            return True
        return previous.radius > 0 and following.radius > 0
