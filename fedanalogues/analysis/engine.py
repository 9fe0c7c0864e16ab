"""
Historical Analogue Engine

Finds the historical windows whose indicator shapes most resemble a target
window.

Pipeline:
    1. Reliability filter and period exclusions, once over the corpus
    2. For every sliding window: per-window normalization, DTW per
       indicator, weighted sum, temporal diversity multiplier
    3. Rank and pick a temporally diverse top-N
    4. For each pick: extract policy actions, annotate data quality

The engine performs no I/O and does not raise on bad input; it returns an
empty or shorter list instead.
"""

import logging
import math
from collections.abc import Sequence
from datetime import date

from fedanalogues.analysis.aggregation import weighted_window_distances
from fedanalogues.analysis.diversity import describe_era, temporal_diversity_multiplier
from fedanalogues.analysis.period_exclusion import apply_period_exclusions
from fedanalogues.analysis.policy_actions import extract_policy_actions
from fedanalogues.analysis.reliability import annotate_analogue, filter_data_quality
from fedanalogues.analysis.selection import Candidate, select_diverse
from fedanalogues.core.config import Settings, get_settings
from fedanalogues.data.eras import DEFAULT_ERA_CATALOG, EraCatalog
from fedanalogues.data.models import Analogue, DataPoint, ScenarioParams

logger = logging.getLogger(__name__)


def filter_corpus(
    all_data: Sequence[DataPoint],
    params: ScenarioParams,
    catalog: EraCatalog = DEFAULT_ERA_CATALOG,
    as_of: date | None = None,
    settings: Settings | None = None,
) -> list[DataPoint]:
    """Reliability filter followed by the scenario's period exclusions."""
    exclude_unreliable = params.exclude_unreliable
    if exclude_unreliable is None:
        exclude_unreliable = (settings or get_settings()).exclude_unreliable
    reliable = filter_data_quality(all_data, exclude_unreliable)
    return apply_period_exclusions(reliable, params, catalog, as_of)


def score_candidates(
    corpus: Sequence[DataPoint],
    target: Sequence[DataPoint],
    params: ScenarioParams,
    catalog: EraCatalog = DEFAULT_ERA_CATALOG,
    as_of: date | None = None,
    settings: Settings | None = None,
) -> list[Candidate]:
    """
    Score every sliding window of ``corpus`` against ``target``.

    Windows starting on the target's start date are skipped (self-match), as
    are windows rejected for missing indicator values.
    """
    settings = settings or get_settings()
    window = len(target)
    distances = weighted_window_distances(target, corpus, params.indicators)
    target_start = target[0].date if target else None

    candidates = []
    for start, distance in enumerate(distances):
        if math.isnan(distance):
            continue
        start_date = corpus[start].date
        if start_date == target_start:
            continue
        multiplier = temporal_diversity_multiplier(
            start_date,
            catalog,
            as_of,
            settings.diversity_min_multiplier,
            settings.diversity_max_multiplier,
        )
        candidates.append(
            Candidate(
                start_index=start,
                start_date=start_date,
                end_date=corpus[start + window - 1].date,
                score=float(distance) * multiplier,
            )
        )
    return candidates


def build_analogue(
    corpus: Sequence[DataPoint],
    candidate: Candidate,
    window: int,
    catalog: EraCatalog = DEFAULT_ERA_CATALOG,
    settings: Settings | None = None,
    rate_indicator: str | None = None,
) -> Analogue:
    """Materialize a selected candidate with its policy actions and data quality."""
    settings = settings or get_settings()
    data = tuple(corpus[candidate.start_index:candidate.start_index + window])
    actions = extract_policy_actions(
        data,
        rate_indicator or settings.rate_indicator,
        settings.min_significant_change_bps,
        settings.max_grouping_days,
    )
    era_name, _ = describe_era(candidate.start_date, catalog)
    analogue = Analogue(
        start_date=candidate.start_date,
        end_date=candidate.end_date,
        similarity_score=candidate.score,
        data=data,
        policy_actions=tuple(actions),
        era_name=era_name,
    )
    return annotate_analogue(analogue)


def find_analogues(
    all_data: Sequence[DataPoint],
    target: Sequence[DataPoint],
    params: ScenarioParams,
    top_n: int | None = None,
    *,
    catalog: EraCatalog = DEFAULT_ERA_CATALOG,
    as_of: date | None = None,
    rate_indicator: str | None = None,
    settings: Settings | None = None,
) -> list[Analogue]:
    """
    Find the historical windows most similar to ``target``.

    Args:
        all_data: Historical corpus, dates strictly increasing
        target: Contiguous target window; its length is the window size
        params: Indicators, weights and exclusions of the scenario
        top_n: Number of analogues to return (settings default when None)
        catalog: Era table used for exclusion and diversity scoring
        as_of: Reference "today" for recency rules (defaults to today)
        rate_indicator: Policy-rate indicator (settings default when None)
        settings: Engine settings (cached environment settings when None)

    Returns:
        Analogues ordered best (lowest score) first
    """
    settings = settings or get_settings()
    top_n = settings.default_top_n if top_n is None else top_n

    if not target or not params.indicators:
        logger.info(
            "Nothing to compare",
            extra={"target_points": len(target), "indicators": len(params.indicators)},
        )
        return []

    corpus = filter_corpus(all_data, params, catalog, as_of, settings)
    candidates = score_candidates(corpus, target, params, catalog, as_of, settings)
    min_gap = params.min_time_gap_months
    if min_gap is None:
        min_gap = settings.min_time_gap_months
    selected = select_diverse(candidates, top_n, min_gap)

    analogues = [
        build_analogue(corpus, candidate, len(target), catalog, settings, rate_indicator)
        for candidate in selected
    ]

    logger.info(
        "Analogue search complete",
        extra={
            "corpus_points": len(corpus),
            "candidates": len(candidates),
            "selected": len(analogues),
            "window": len(target),
        },
    )
    return analogues
