from dataclasses import dataclass

from ..config import DESIGN_LIMITS


@dataclass(frozen=True)
class DesignParameters:
    # speed caps
    max_vp: int = DESIGN_LIMITS["max_vp"]
    max_straight_vp: int = DESIGN_LIMITS["max_straight_vp"]

    # Vp continuity between neighbours
    vp_diff_tolerance: int = DESIGN_LIMITS["vp_diff_tolerance"]
    vp_ceiling: int = DESIGN_LIMITS["vp_ceiling"]

    # driving times for minimum lengths (s)
    radius_seconds: float = DESIGN_LIMITS["radius_seconds"]
    straight_seconds: float = DESIGN_LIMITS["straight_seconds"]
    same_direction_seconds: float = DESIGN_LIMITS["same_direction_seconds"]

    clothoid_max_factor: float = DESIGN_LIMITS["clothoid_max_factor"]

    def driving_length(self, vp: int, seconds: float) -> float:
        """Distance in m covered at ``vp`` km/h within ``seconds``."""
        return vp / 3.6 * seconds
