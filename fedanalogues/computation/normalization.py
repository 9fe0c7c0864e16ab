"""
Per-Window Min-Max Normalization using Numba JIT Compilation

Every compared window (the target and each candidate) is rescaled to [0, 1]
using its own min and max, never a global historical range. Indicators live
on incompatible native scales (a rate level in percent, a YoY percentage, a
spread in hundredths) and eras differ in absolute volatility; rescaling each
window on its own makes DTW distances comparable across both. The price is
that magnitude is discarded: two windows with the same shape at very
different levels score as similar.

A flat window (max == min) maps to 0.5 everywhere.
"""

import numpy as np
from numba import njit

FLAT_WINDOW_VALUE = 0.5


@njit(cache=True)
def normalize_window(values: np.ndarray) -> np.ndarray:
    """
    Min-max scale a window to [0, 1].

    Args:
        values: 1D array of raw indicator values (float64)

    Returns:
        1D array of the same length with values in [0, 1]; all 0.5 when the
        window is flat. NaN entries come out as NaN.

    Example:
        >>> normalize_window(np.array([2.0, 4.0, 3.0]))
        array([0. , 1. , 0.5])
    """
    n = len(values)
    out = np.empty(n, dtype=np.float64)
    if n == 0:
        return out

    lo = values[0]
    hi = values[0]
    for i in range(1, n):
        if values[i] < lo:
            lo = values[i]
        if values[i] > hi:
            hi = values[i]

    value_range = hi - lo
    if value_range == 0.0:
        for i in range(n):
            out[i] = FLAT_WINDOW_VALUE
        return out

    for i in range(n):
        out[i] = (values[i] - lo) / value_range
    return out


@njit(cache=True)
def has_missing(values: np.ndarray) -> bool:
    """True when any element of the window is NaN."""
    for i in range(len(values)):
        if np.isnan(values[i]):
            return True
    return False
