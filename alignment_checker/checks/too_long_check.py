from alignment_checker.checks.base import ElementCheck
from alignment_checker.design.element import ErrorFlag


class TooLongElementCheck(ElementCheck):
    def __init__(self, logger=None, verbose: bool = False):
        super().__init__("MaxLength", "Element longer than its maximum length")
        self.logger = logger
        self.verbose = verbose

    def run(self, elements):
        for e in elements:
            # max_length is only set for clothoids
            if e.max_length and e.length > e.max_length:
                self.error_count += 1
                e.flag(ErrorFlag.MAX_LENGTH)

                if self.verbose and self.logger:
                    self.logger.log_verbose(
                        f"  *** ERROR: {e.kind.value} {e.id} exceeds {e.max_length:.2f}m: {e.length:.2f}m ***"
                    )
