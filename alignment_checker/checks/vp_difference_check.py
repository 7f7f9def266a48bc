from alignment_checker.checks.base import ElementCheck
from alignment_checker.config import DESIGN_LIMITS
from alignment_checker.design.element import ErrorFlag


class VpDifferenceCheck(ElementCheck):
    def __init__(self, tolerance: int = DESIGN_LIMITS["vp_diff_tolerance"],
                 ceiling_vp: int = DESIGN_LIMITS["vp_ceiling"], logger=None, verbose: bool = False):
        super().__init__("VpDiff", f"Vp jump between neighbours above {tolerance} km/h")
        self.tolerance = tolerance
        self.ceiling_vp = ceiling_vp
        self.logger = logger
        self.verbose = verbose

    def run(self, elements):
        if self.verbose and self.logger:
            self.logger.log_verbose(f"\n=== Checking Vp differences of {len(elements)} elements ===")

        for e, n in zip(elements[:-1], elements[1:]):
            if self.is_invalid(e.vp, n.vp):
                self.error_count += 1
                e.flag(ErrorFlag.VP_DIFF)
                n.flag(ErrorFlag.VP_DIFF)

                if self.verbose and self.logger:
                    self.logger.log_verbose(
                        f"  *** ERROR: Vp {e.vp} -> {n.vp} km/h between elements {e.id} and {n.id} ***"
                    )

    def is_invalid(self, vp: int, next_vp: int) -> bool:
        # the ceiling speed is open ended, so reaching the tolerance already counts
        diff = abs(vp - next_vp)
        if vp == self.ceiling_vp or next_vp == self.ceiling_vp:
            return diff >= self.tolerance
        return diff > self.tolerance
