"""
pandas adapters.

The ingestion and persistence collaborators hand data around as date-indexed
DataFrames (one column per indicator, NaN where a series has no value). These
helpers convert between that shape and the engine's ``DataPoint`` lists, and
flatten results for presentation.
"""

import logging
from collections.abc import Iterable, Sequence

import numpy as np
import pandas as pd

from fedanalogues.data.models import Analogue, DataPoint

logger = logging.getLogger(__name__)


def data_points_from_frame(df: pd.DataFrame, date_column: str | None = None) -> list[DataPoint]:
    """
    Convert a DataFrame into chronologically sorted data points.

    Args:
        df: One column per indicator; indexed by date unless ``date_column``
            names the column holding the dates
        date_column: Optional column to use as the date instead of the index

    Returns:
        Data points sorted by date, with NaN cells left out of each point's
        indicator map. Duplicate dates keep the last row.
    """
    frame = df.set_index(date_column) if date_column else df
    frame = frame.copy()
    frame.index = pd.to_datetime(frame.index)
    frame = frame.sort_index()

    duplicated = frame.index.duplicated(keep="last")
    if duplicated.any():
        logger.warning("Dropping duplicate dates", extra={"duplicates": int(duplicated.sum())})
        frame = frame[~duplicated]

    numeric = frame.apply(pd.to_numeric, errors="coerce")
    points = []
    for timestamp, row in zip(numeric.index, numeric.to_numpy(dtype=np.float64)):
        values = {column: float(value) for column, value in zip(numeric.columns, row) if np.isfinite(value)}
        points.append(DataPoint(date=timestamp.date(), values=values))
    return points


def data_points_to_frame(points: Iterable[DataPoint]) -> pd.DataFrame:
    """Inverse of ``data_points_from_frame``: a date-indexed frame with NaN for absent values."""
    points = list(points)
    frame = pd.DataFrame(
        [dict(point.values) for point in points],
        index=pd.DatetimeIndex([pd.Timestamp(point.date) for point in points], name="date"),
    )
    return frame.astype(np.float64)


def analogues_to_frame(analogues: Sequence[Analogue]) -> pd.DataFrame:
    """One row per analogue: dates, score, era, reliability and a policy summary."""
    rows = []
    for rank, analogue in enumerate(analogues, start=1):
        quality = analogue.data_quality
        rows.append(
            {
                "rank": rank,
                "start_date": analogue.start_date,
                "end_date": analogue.end_date,
                "similarity_score": analogue.similarity_score,
                "era": analogue.era_name,
                "reliability": quality.reliability.value if quality else None,
                "warnings": "; ".join(quality.warnings) if quality else "",
                "policy_actions": ", ".join(
                    f"{action.action.value} {action.change_bps:+d}bps {action.date.isoformat()}"
                    for action in analogue.policy_actions
                ),
                "net_change_bps": sum(action.change_bps for action in analogue.policy_actions),
            }
        )
    return pd.DataFrame(rows)
