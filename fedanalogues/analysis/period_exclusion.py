"""
Period exclusion filter.

Narrows the historical corpus before any window is scored. Stages run in a
fixed order over the already reliability-filtered series:

1. recent-years cutoff
2. era focus, or else era exclusion (focus always wins)
3. explicit inclusive date ranges

Every stage keeps the input order.
"""

import logging
from collections.abc import Sequence
from datetime import date

from fedanalogues.data.eras import DEFAULT_ERA_CATALOG, EraCatalog
from fedanalogues.data.models import DataPoint, DateRange, ScenarioParams

logger = logging.getLogger(__name__)


def recent_years_cutoff(years: int, as_of: date | None = None) -> date:
    """First date treated as "recent": January 1 of ``as_of.year - years``."""
    as_of = as_of or date.today()
    return date(as_of.year - years, 1, 1)


def _warn_unresolved(names: Sequence[str], catalog: EraCatalog, role: str) -> None:
    unresolved = [name for name in names if catalog.resolve(name) is None]
    if unresolved:
        logger.warning("Unknown era names ignored", extra={"role": role, "era_names": unresolved})


def exclude_recent_years(
    series: Sequence[DataPoint], years: int | None, as_of: date | None = None
) -> list[DataPoint]:
    if not years or years <= 0:
        return list(series)
    cutoff = recent_years_cutoff(years, as_of)
    return [point for point in series if point.date < cutoff]


def filter_eras(
    series: Sequence[DataPoint],
    focus_eras: Sequence[str] = (),
    exclude_eras: Sequence[str] = (),
    catalog: EraCatalog = DEFAULT_ERA_CATALOG,
) -> list[DataPoint]:
    """
    Keep only focus eras when any are requested, otherwise drop excluded eras.

    Unknown focus names match nothing (so an all-unknown focus list empties
    the series); unknown exclude names are no-ops.
    """
    if focus_eras:
        _warn_unresolved(focus_eras, catalog, "focus")
        eras = catalog.resolve_all(focus_eras)
        return [point for point in series if any(era.contains(point.date) for era in eras)]

    if exclude_eras:
        _warn_unresolved(exclude_eras, catalog, "exclude")
        eras = catalog.resolve_all(exclude_eras)
        return [point for point in series if not any(era.contains(point.date) for era in eras)]

    return list(series)


def exclude_date_ranges(series: Sequence[DataPoint], ranges: Sequence[DateRange]) -> list[DataPoint]:
    if not ranges:
        return list(series)
    return [point for point in series if not any(span.contains(point.date) for span in ranges)]


def apply_period_exclusions(
    series: Sequence[DataPoint],
    params: ScenarioParams,
    catalog: EraCatalog = DEFAULT_ERA_CATALOG,
    as_of: date | None = None,
) -> list[DataPoint]:
    """
    Apply the scenario's recent-years, era and date-range exclusions.

    Args:
        series: Chronologically ordered data points
        params: Scenario whose exclusion fields are applied
        catalog: Era table used to resolve focus/exclude names
        as_of: Reference "today" for the recent-years cutoff

    Returns:
        The surviving points, in input order
    """
    filtered = exclude_recent_years(series, params.exclude_recent_years, as_of)
    after_recent = len(filtered)

    filtered = filter_eras(filtered, params.focus_eras, params.exclude_eras, catalog)
    after_eras = len(filtered)

    filtered = exclude_date_ranges(filtered, params.exclude_date_ranges)

    logger.debug(
        "Applied period exclusions",
        extra={
            "input_points": len(series),
            "removed_recent": len(series) - after_recent,
            "removed_eras": after_recent - after_eras,
            "removed_ranges": after_eras - len(filtered),
            "remaining": len(filtered),
        },
    )
    return filtered
