"""
Temporal diversity scoring.

The raw weighted DTW distance is scaled by a multiplier built from two
hand-tuned parts:

- the era bonus from the era catalog (below 1.0 for rare, older eras)
- a tiered recency penalty for windows starting in the last 2, 5 or 10 years

The product is clamped to [0.5, 2.0]. Lower final scores remain better.
These thresholds encode domain judgement, not a fitted model; change them
only deliberately.
"""

from datetime import date

from fedanalogues.data.eras import DEFAULT_ERA_CATALOG, EraCatalog

MIN_DIVERSITY_MULTIPLIER = 0.5
MAX_DIVERSITY_MULTIPLIER = 2.0

# (years ago strictly below, penalty), checked in order
RECENCY_PENALTY_TIERS = (
    (2, 1.3),
    (5, 1.2),
    (10, 1.1),
)

UNKNOWN_ERA_NAME = "Unknown Era"


def era_bonus(start_date: date, catalog: EraCatalog = DEFAULT_ERA_CATALOG) -> float:
    era = catalog.era_for(start_date)
    return era.bonus if era is not None else 1.0


def recency_penalty(start_date: date, as_of: date | None = None) -> float:
    as_of = as_of or date.today()
    years_ago = as_of.year - start_date.year
    for threshold, penalty in RECENCY_PENALTY_TIERS:
        if years_ago < threshold:
            return penalty
    return 1.0


def temporal_diversity_multiplier(
    start_date: date,
    catalog: EraCatalog = DEFAULT_ERA_CATALOG,
    as_of: date | None = None,
    min_multiplier: float = MIN_DIVERSITY_MULTIPLIER,
    max_multiplier: float = MAX_DIVERSITY_MULTIPLIER,
) -> float:
    """
    Era bonus times recency penalty, clamped to [min_multiplier, max_multiplier].

    Example:
        >>> temporal_diversity_multiplier(date(1975, 1, 1), as_of=date(2026, 1, 1))
        0.75
    """
    score = era_bonus(start_date, catalog) * recency_penalty(start_date, as_of)
    return max(min_multiplier, min(max_multiplier, score))


def describe_era(start_date: date, catalog: EraCatalog = DEFAULT_ERA_CATALOG) -> tuple[str, str]:
    """Return ``(era name, "start-end")``, or ``("Unknown Era", "<year>")``."""
    era = catalog.era_for(start_date)
    if era is None:
        return UNKNOWN_ERA_NAME, str(start_date.year)
    return era.name, era.timeframe
