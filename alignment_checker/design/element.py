from dataclasses import dataclass
from enum import Enum, Flag
from typing import List, Optional


class ElementKind(Enum):
    STRAIGHT = "Straight"
    CLOTHOID = "Clothoid"
    RADIUS = "Radius"


class ErrorFlag(Flag):
    NONE = 0
    VP_DIFF = 1
    MIN_LENGTH = 2
    MAX_LENGTH = 4


# output order and labels of the error flags
ERROR_LABELS = (
    (ErrorFlag.VP_DIFF, "VpDiff"),
    (ErrorFlag.MIN_LENGTH, "MinLength"),
    (ErrorFlag.MAX_LENGTH, "MaxLength"),
)


@dataclass
class Element:
    """
    One alignment element. Geometry fields come from the input file,
    the rest is filled in by the engines in stage order.
    """
    id: int
    kind: ElementKind
    length: float
    radius: float = 0.0
    vp: int = 0
    min_length: float = 0.0
    max_length: float = 0.0     # 0 means no upper bound
    a_min: float = 0.0
    a_max: float = 0.0
    errors: ErrorFlag = ErrorFlag.NONE
    row: Optional[int] = None   # line number in the source file

    @property
    def is_radius(self) -> bool:
        return self.kind is ElementKind.RADIUS

    @property
    def is_straight(self) -> bool:
        return self.kind is ElementKind.STRAIGHT

    @property
    def is_clothoid(self) -> bool:
        return self.kind is ElementKind.CLOTHOID

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def flag(self, error: ErrorFlag) -> None:
        self.errors |= error

    def error_labels(self) -> List[str]:
        return [label for error, label in ERROR_LABELS if error in self.errors]
