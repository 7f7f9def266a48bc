# alignment_checker/logger.py
import logging
import sys
from pathlib import Path
from datetime import datetime

LOGGER_NAME = "alignment_checker"


class CheckerLogger:
    """
    Run logger: INFO and above go to a timestamped log file and to stderr,
    per-element trace lines go to a verbose report when enabled.
    """

    def __init__(self, verbose=False, log_dir="logs", report_dir="reports", to_file=True):
        self.verbose = verbose
        self.log_dir = Path(log_dir)
        self.report_dir = Path(report_dir)
        self.to_file = to_file
        self.log_file = None
        self.verbose_file = None
        self.verbose_written = False
        self._logger = logging.getLogger(LOGGER_NAME)
        self._handlers = []
        self._setup_files()

    def _setup_files(self):
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self._logger.setLevel(logging.INFO)
        self._logger.propagate = False

        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        self._add_handler(console)

        if not self.to_file:
            return

        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.log_file = self.log_dir / f"log_{timestamp}.txt"
        file_handler = logging.FileHandler(self.log_file, mode="w", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        self._add_handler(file_handler)

        if self.verbose:
            self.report_dir.mkdir(parents=True, exist_ok=True)
            self.verbose_file = self.report_dir / f"verbose_{timestamp}.txt"
            with self.verbose_file.open("w", encoding="utf-8") as f:
                f.write(f"=== Verbose Report ({timestamp}) ===\n\n")

    def _add_handler(self, handler):
        self._logger.addHandler(handler)
        self._handlers.append(handler)

    def log(self, message, level="INFO"):
        self._logger.log(logging.getLevelName(level), message)

    def log_verbose(self, message):
        if self.verbose_file:
            with self.verbose_file.open("a", encoding="utf-8") as f:
                f.write(message + "\n")
            self.verbose_written = True

    def cleanup(self):
        for handler in self._handlers:
            self._logger.removeHandler(handler)
            handler.close()
        self._handlers = []

        # Remove verbose file if nothing was written
        if self.verbose and self.verbose_file and not self.verbose_written:
            try:
                self.verbose_file.unlink()
            except OSError as e:
                logging.getLogger(LOGGER_NAME).warning(f"Failed to delete unused verbose file: {e}")


class NullLogger:
    """Stand-in used when the engines run without a CLI (library use, tests)."""

    verbose = False

    def log(self, message, level="INFO"):
        logging.getLogger(LOGGER_NAME).log(logging.getLevelName(level), message)

    def log_verbose(self, message):
        pass

    def cleanup(self):
        pass
