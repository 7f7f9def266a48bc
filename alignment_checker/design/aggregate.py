from typing import Iterable, Optional

from .element import Element


def mean_vp(elements: Iterable[Element]) -> Optional[float]:
    """
    Length weighted mean design speed of the alignment in km/h.
    Returns None when the total length is zero.
    """
    total_length = 0.0
    vp_product = 0.0
    for e in elements:
        total_length += e.length
        vp_product += e.length * e.vp
    if total_length == 0:
        return None
    return vp_product / total_length


def format_mean_vp(value: Optional[float]) -> str:
    if value is None:
        return "mean vp: undefined (total length is 0)"
    return f"mean vp: {value:.2f} km/h"
