"""
Alignment Checker - design speed and element length checks for road and rail alignments
"""

__version__ = "1.0.0"

from .main import main
from .config import DESIGN_LIMITS, ERROR_LAYERS, ERROR_COLORS

__all__ = ["main", "DESIGN_LIMITS", "ERROR_LAYERS", "ERROR_COLORS"]
