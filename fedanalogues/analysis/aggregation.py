"""
Weighted aggregation of per-indicator DTW distances.

For each requested indicator the target window and the candidate window are
normalized independently, compared with DTW, and the distance is multiplied
by the indicator weight. The weighted distances are summed.

Missing values: a candidate window in which any requested indicator is
absent (or not a finite number) on any date is rejected; its aggregate is
NaN and it never reaches ranking. A target window with a missing indicator
cannot be compared at all and produces no distances.
"""

import logging
from collections.abc import Sequence

import numpy as np

from fedanalogues.computation.dtw import sliding_window_distances
from fedanalogues.data.models import DataPoint, WeightedIndicator

logger = logging.getLogger(__name__)


def indicator_values(series: Sequence[DataPoint], indicator: str) -> np.ndarray:
    """Values of one indicator as float64, NaN where the point lacks it."""
    values = np.full(len(series), np.nan, dtype=np.float64)
    for i, point in enumerate(series):
        value = point.value(indicator)
        if value is not None:
            values[i] = value
    return values


def weighted_window_distances(
    target: Sequence[DataPoint],
    series: Sequence[DataPoint],
    indicators: Sequence[WeightedIndicator],
) -> np.ndarray:
    """
    Weighted distance of every sliding window of ``series`` to ``target``.

    Args:
        target: Target window; its length is the window size
        series: Filtered historical corpus
        indicators: Indicators and weights to aggregate

    Returns:
        Array with one entry per window start (``len(series) - len(target) + 1``
        entries), NaN for rejected windows. Empty when there is nothing to
        compare: no indicators, an empty target, a corpus shorter than the
        target, or a target missing one of the indicators.
    """
    window = len(target)
    n_windows = len(series) - window + 1
    if not indicators or window == 0 or n_windows <= 0:
        return np.empty(0, dtype=np.float64)

    totals = np.zeros(n_windows, dtype=np.float64)
    for indicator in indicators:
        target_values = indicator_values(target, indicator.id)
        if np.isnan(target_values).any():
            logger.warning(
                "Target window is missing indicator values; no analogues can be scored",
                extra={"indicator": indicator.id, "missing": int(np.isnan(target_values).sum())},
            )
            return np.empty(0, dtype=np.float64)

        distances = sliding_window_distances(target_values, indicator_values(series, indicator.id), window)
        totals += distances * indicator.weight

    rejected = int(np.isnan(totals).sum())
    if rejected:
        logger.debug(
            "Rejected candidate windows with missing indicator values",
            extra={"rejected_windows": rejected, "windows": n_windows},
        )
    return totals
