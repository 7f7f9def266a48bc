from alignment_checker.checks.base import ElementCheck
from alignment_checker.design.element import ErrorFlag


class TooShortElementCheck(ElementCheck):
    def __init__(self, logger=None, verbose: bool = False):
        super().__init__("MinLength", "Element shorter than its minimum length")
        self.logger = logger
        self.verbose = verbose

    def run(self, elements):
        if self.verbose and self.logger:
            self.logger.log_verbose(f"\n=== Checking minimum lengths of {len(elements)} elements ===")

        short_elements_found = 0
        for e in elements:
            if e.length < e.min_length:
                short_elements_found += 1
                self.error_count += 1
                e.flag(ErrorFlag.MIN_LENGTH)

                if self.verbose and self.logger:
                    self.logger.log_verbose(
                        f"  *** ERROR: {e.kind.value} {e.id} is too short: "
                        f"{e.length:.2f}m < {e.min_length:.2f}m ***"
                    )

        if self.verbose and self.logger:
            self.logger.log_verbose(f"Total short elements found: {short_elements_found}")
