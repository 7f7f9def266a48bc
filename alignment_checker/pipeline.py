from typing import List, Optional

from alignment_checker import config
from alignment_checker.design.design_parameters import DesignParameters
from alignment_checker.design.element import Element
from alignment_checker.design.length_engine import LengthConstraintEngine
from alignment_checker.design.speed_engine import SpeedAssignmentEngine
from alignment_checker.design.validation_report import ValidationReport
from alignment_checker.logger import NullLogger
from alignment_checker.utils import load_checks


def run_pipeline(
    elements: List[Element],
    parameters: Optional[DesignParameters] = None,
    checks: Optional[list] = None,
    include_all: bool = False,
    logger=None,
) -> ValidationReport:
    """
    Run all stages over the element sequence, in place and in order:
    speed assignment, length bounds, then every check.
    Raises AlignmentError on the first fatal condition.
    """
    parameters = parameters or DesignParameters()
    logger = logger or NullLogger()
    if checks is None:
        checks = load_checks(
            config.DEFAULT_CHECKS,
            {'vp_tolerance': parameters.vp_diff_tolerance, 'vp_ceiling': parameters.vp_ceiling},
        )

    logger.log_verbose("=== Speed assignment ===")
    SpeedAssignmentEngine(parameters, logger).assign(elements)

    logger.log_verbose("\n=== Length constraints ===")
    LengthConstraintEngine(parameters, logger).apply(elements)

    for check in checks:
        logger.log(f"Running {check.__class__.__name__}...")
        check.run(elements)

    return ValidationReport(elements, checks=checks, include_all=include_all)
