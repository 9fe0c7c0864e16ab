"""
Elastic Distance Engine (Dynamic Time Warping) using Numba JIT Compilation

DTW measures shape distance between two sequences while letting one be
locally stretched or compressed in time against the other. A historical
episode resembling the target rarely lines up month-for-month, so a rigid
point-by-point distance would punish a cycle that simply ran a few months
faster.

Key Features:
- Full-matrix DTW, absolute-difference local cost, no band constraint
- Unequal sequence lengths supported
- Batched sliding-window scoring of one indicator series against a target

Complexity: O(n*m) per pair; the sliding kernel is O(W*L^2) per indicator.
"""

import numpy as np
from numba import njit, prange

from fedanalogues.computation.normalization import has_missing, normalize_window


@njit(cache=True)
def dtw_distance(series_a: np.ndarray, series_b: np.ndarray) -> float:
    """
    Dynamic time warping distance between two sequences.

    Recurrence:
        cost(0, 0) = 0, cost(i, 0) = cost(0, j) = inf for i, j > 0
        cost(i, j) = |a[i-1] - b[j-1]| + min(cost(i-1, j), cost(i, j-1), cost(i-1, j-1))

    With infinite outer borders the first real row and column accumulate the
    absolute differences along the boundary.

    Args:
        series_a: First sequence (float64), length n
        series_b: Second sequence (float64), length m

    Returns:
        cost(n, m): 0.0 for identical sequences, symmetric when n == m.
        Two empty sequences give 0.0; exactly one empty sequence gives inf.

    Example:
        >>> dtw_distance(np.array([1.0, 2.0, 3.0]), np.array([2.0, 3.0, 4.0]))
        2.0
    """
    n = len(series_a)
    m = len(series_b)
    cost = np.full((n + 1, m + 1), np.inf, dtype=np.float64)
    cost[0, 0] = 0.0

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            local = abs(series_a[i - 1] - series_b[j - 1])
            best = cost[i - 1, j]
            if cost[i, j - 1] < best:
                best = cost[i, j - 1]
            if cost[i - 1, j - 1] < best:
                best = cost[i - 1, j - 1]
            cost[i, j] = local + best

    return cost[n, m]


@njit(cache=True)
def euclidean_distance_kernel(vector_a: np.ndarray, vector_b: np.ndarray) -> float:
    total = 0.0
    for i in range(len(vector_a)):
        diff = vector_a[i] - vector_b[i]
        total += diff * diff
    return np.sqrt(total)


def euclidean_distance(vector_a, vector_b) -> float:
    """
    Euclidean distance between two equal-length vectors.

    Raises:
        ValueError: If the vectors differ in length
    """
    a = np.asarray(vector_a, dtype=np.float64)
    b = np.asarray(vector_b, dtype=np.float64)
    if len(a) != len(b):
        raise ValueError("Vectors must have the same length.")
    return float(euclidean_distance_kernel(a, b))


@njit(cache=True, parallel=True)
def sliding_window_distances(target: np.ndarray, series: np.ndarray, window: int) -> np.ndarray:
    """
    Normalized DTW distance of every sliding window of ``series`` to ``target``.

    The target and each candidate window are min-max normalized independently
    before DTW. Candidates are independent of one another, so they are scored
    in parallel.

    Args:
        target: Raw target window values (float64), no NaN
        series: Raw values of one indicator over the whole corpus (float64);
            NaN marks a date on which the indicator is absent
        window: Candidate window length

    Returns:
        Array of length ``len(series) - window + 1`` (empty when the series is
        shorter than the window). Entry ``s`` scores ``series[s:s + window]``
        and is NaN when that window holds a missing value.
    """
    n_windows = len(series) - window + 1
    if window <= 0 or n_windows <= 0:
        return np.empty(0, dtype=np.float64)

    normalized_target = normalize_window(target)
    distances = np.empty(n_windows, dtype=np.float64)

    for start in prange(n_windows):
        candidate = series[start:start + window]
        if has_missing(candidate):
            distances[start] = np.nan
        else:
            distances[start] = dtw_distance(normalized_target, normalize_window(candidate))

    return distances
