"""
Target window selection helpers.

A search compares against either the most recent N points of the corpus or a
named historical period such as ``"2008-01 to 2009-12"``.
"""

import calendar
import re
from collections.abc import Sequence
from datetime import date

from fedanalogues.core.config import get_settings
from fedanalogues.data.models import DataPoint, ScenarioParams

_PERIOD_PATTERN = re.compile(r"^(\d{4})-(\d{2})\s+to\s+(\d{4})-(\d{2})$")


def recent_target_window(series: Sequence[DataPoint], months: int | None = None) -> list[DataPoint]:
    """The last ``months`` points of the series (all of it when shorter); settings default when None."""
    if months is None:
        months = get_settings().default_window_months
    if months <= 0:
        return []
    return list(series[-months:])


def scenario_target_window(series: Sequence[DataPoint], params: ScenarioParams) -> list[DataPoint]:
    """Recent target window sized by the scenario's ``window_months``."""
    return recent_target_window(series, params.window_months)


def target_window_for_period(series: Sequence[DataPoint], start: date, end: date) -> list[DataPoint]:
    """Points dated inside the inclusive ``[start, end]`` range."""
    return [point for point in series if start <= point.date <= end]


def parse_target_period(period: str) -> tuple[date, date]:
    """
    Parse ``"YYYY-MM to YYYY-MM"`` into (first day of start month, last day of end month).

    Raises:
        ValueError: On a malformed period, an invalid month, or start >= end
    """
    match = _PERIOD_PATTERN.match(period.strip())
    if not match:
        raise ValueError('Target period must be in format "YYYY-MM to YYYY-MM" (e.g., "2008-01 to 2009-12")')

    start_year, start_month, end_year, end_month = (int(part) for part in match.groups())
    if not (1 <= start_month <= 12 and 1 <= end_month <= 12):
        raise ValueError(f"Invalid month in target period: {period}")
    if (start_year, start_month) >= (end_year, end_month):
        raise ValueError("Target period start date must be before end date")

    last_day = calendar.monthrange(end_year, end_month)[1]
    return date(start_year, start_month, 1), date(end_year, end_month, last_day)
