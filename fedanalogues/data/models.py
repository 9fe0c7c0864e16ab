"""
Core data types for the analogue engine.

A ``DataPoint`` carries a date plus a sparse indicator map: any subset of the
known indicators may be present on a given date. Indicator identifiers are
plain strings (FRED series ids such as ``"UNRATE"``) so the set stays open.
"""

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from types import MappingProxyType


@dataclass(frozen=True)
class DataPoint:
    """One observation date and the indicator values known on it."""

    date: date
    values: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        # Freeze the mapping so a point can be shared between analogues
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def value(self, indicator: str) -> float | None:
        """Return the indicator value, or None when absent or not a finite number."""
        raw = self.values.get(indicator)
        if raw is None:
            return None
        try:
            number = float(raw)
        except (TypeError, ValueError):
            return None
        return number if math.isfinite(number) else None


@dataclass(frozen=True)
class WeightedIndicator:
    """An indicator id and the weight of its distance in the aggregate score."""

    id: str
    weight: float


@dataclass(frozen=True)
class DateRange:
    """Inclusive date range used for explicit period exclusion."""

    start: date
    end: date
    description: str = ""

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


@dataclass
class ScenarioParams:
    """
    Parameters of one analogue search.

    Attributes:
        indicators: Indicators to compare and their weights
        window_months: Length of the target window in points (one point per
            month for monthly data); settings default when None
        min_time_gap_months: Minimum gap between selected analogue windows;
            settings default (6) when None
        exclude_unreliable: Drop pre-1960 observations before matching;
            settings default (True) when None
        exclude_recent_years: Drop the last N calendar years (None/0 = keep)
        focus_eras: Keep only these eras (names or aliases)
        exclude_eras: Drop these eras; ignored when focus_eras is non-empty
        exclude_date_ranges: Explicit inclusive ranges to drop
    """

    indicators: list[WeightedIndicator]
    window_months: int | None = None
    min_time_gap_months: float | None = None
    exclude_unreliable: bool | None = None
    exclude_recent_years: int | None = None
    focus_eras: list[str] = field(default_factory=list)
    exclude_eras: list[str] = field(default_factory=list)
    exclude_date_ranges: list[DateRange] = field(default_factory=list)


class PolicyActionKind(str, Enum):
    """Discrete policy decision recovered from a rate series."""

    HIKE = "HIKE"
    CUT = "CUT"
    HOLD = "HOLD"


@dataclass(frozen=True)
class PolicyAction:
    date: date
    action: PolicyActionKind
    change_bps: int = 0


class Reliability(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class DataQuality:
    """Reliability rating for a date, with human-readable warnings."""

    reliability: Reliability
    warnings: tuple[str, ...] = ()
    should_exclude: bool = False


@dataclass(frozen=True)
class Analogue:
    """
    A historical window selected as similar to the target window.

    ``similarity_score`` is the weighted DTW distance scaled by the temporal
    diversity multiplier; lower means more similar.
    """

    start_date: date
    end_date: date
    similarity_score: float
    data: tuple[DataPoint, ...]
    policy_actions: tuple[PolicyAction, ...] = ()
    data_quality: DataQuality | None = None
    era_name: str = ""


def validate_series(series: Sequence[DataPoint]) -> None:
    """
    Check that dates are strictly increasing (and therefore unique).

    Raises:
        ValueError: On the first out-of-order or duplicate date
    """
    for previous, current in zip(series, series[1:]):
        if current.date <= previous.date:
            raise ValueError(
                f"Series dates must be strictly increasing: {previous.date} followed by {current.date}"
            )
