"""
Data reliability classification.

Fed Funds data before 1960 shows implausible day-to-day volatility, and the
1960-1989 record has known quality issues. Each date gets a rating that the
engine uses twice: to drop unreliable observations before matching (when the
scenario asks for it) and to annotate every selected analogue.
"""

import logging
from collections.abc import Sequence
from dataclasses import replace
from datetime import date

from fedanalogues.data.catalog import DATA_QUALITY
from fedanalogues.data.models import Analogue, DataPoint, DataQuality, Reliability

logger = logging.getLogger(__name__)

RELIABLE_DATA_START = DATA_QUALITY["reliable_fed_data_start"]
MODERN_DATA_START = DATA_QUALITY["quality_eras"]["MODERN_RELIABLE"]["start"]

PRE_1960_VOLATILITY_WARNING = "Pre-1960 data may contain unrealistic Fed policy volatility"
PRE_1960_COVERAGE_WARNING = "Period predates reliable Fed Funds Rate data (1960+)"
EARLY_DATA_WARNING = "Early Fed data (1960s-1980s) may have some quality issues"


def assess_data_quality(day: date) -> DataQuality:
    """
    Rate the reliability of data observed on ``day``.

    - before 1960-01-01: LOW, two warnings, marked for exclusion
    - 1960-01-01 to 1989-12-31: MEDIUM, one warning
    - from 1990-01-01: HIGH, no warnings
    """
    if day < RELIABLE_DATA_START:
        return DataQuality(
            reliability=Reliability.LOW,
            warnings=(PRE_1960_VOLATILITY_WARNING, PRE_1960_COVERAGE_WARNING),
            should_exclude=True,
        )
    if day < MODERN_DATA_START:
        return DataQuality(reliability=Reliability.MEDIUM, warnings=(EARLY_DATA_WARNING,))
    return DataQuality(reliability=Reliability.HIGH)


def filter_data_quality(series: Sequence[DataPoint], exclude_unreliable: bool = True) -> list[DataPoint]:
    """Drop points rated for exclusion when ``exclude_unreliable`` is set; order is kept."""
    if not exclude_unreliable:
        return list(series)

    kept = [point for point in series if not assess_data_quality(point.date).should_exclude]
    if len(kept) < len(series):
        logger.debug(
            "Excluded unreliable observations",
            extra={"removed": len(series) - len(kept), "reliable_start": RELIABLE_DATA_START},
        )
    return kept


def annotate_analogue(analogue: Analogue) -> Analogue:
    """Attach the reliability rating of the analogue's start date."""
    return replace(analogue, data_quality=assess_data_quality(analogue.start_date))
