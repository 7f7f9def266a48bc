"""
Alignment design checks – speed assignment and permissible element lengths
"""

from .element import Element, ElementKind, ErrorFlag
from .design_parameters import DesignParameters
from .csv_reader import CSVReader
from .speed_engine import SpeedAssignmentEngine
from .length_engine import LengthConstraintEngine
from .validation_report import ValidationReport

__all__ = [
    "Element",
    "ElementKind",
    "ErrorFlag",
    "DesignParameters",
    "CSVReader",
    "SpeedAssignmentEngine",
    "LengthConstraintEngine",
    "ValidationReport",
]
