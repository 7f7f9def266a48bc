from .base import ElementCheck
from .vp_difference_check import VpDifferenceCheck
from .too_short_check import TooShortElementCheck
from .too_long_check import TooLongElementCheck

__all__ = [
    "ElementCheck",
    "VpDifferenceCheck",
    "TooShortElementCheck",
    "TooLongElementCheck",
]
