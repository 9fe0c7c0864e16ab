"""
Computation Module - Shape Distance Kernels

All kernels are Numba JIT-compiled.

Modules:
- normalization: Per-window min-max scaling
- dtw: Dynamic time warping, Euclidean distance, sliding-window scoring
"""

from fedanalogues.computation.normalization import (
    FLAT_WINDOW_VALUE,
    has_missing,
    normalize_window,
)

from fedanalogues.computation.dtw import (
    dtw_distance,
    euclidean_distance,
    sliding_window_distances,
)

__all__ = [
    # Normalization
    "FLAT_WINDOW_VALUE",
    "has_missing",
    "normalize_window",
    # Distances
    "dtw_distance",
    "euclidean_distance",
    "sliding_window_distances",
]
