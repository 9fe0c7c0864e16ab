"""
Ranking and temporally diverse top-N selection.

Adjacent sliding-window positions of one historical episode score almost the
same, so a plain top-N would return the same episode N times. Candidates are
walked best-first and accepted only when they sit at least
``min_time_gap_months`` away from every window already accepted.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

logger = logging.getLogger(__name__)

AVERAGE_DAYS_PER_MONTH = 30.44
DEFAULT_MIN_TIME_GAP_MONTHS = 6.0


@dataclass(frozen=True)
class Candidate:
    """A scored window, identified by its position in the filtered corpus."""

    start_index: int
    start_date: date
    end_date: date
    score: float


def gap_in_months(a: Candidate, b: Candidate) -> float:
    """Distance between the nearest edges of two windows, in average months; 0 when they overlap."""
    if a.start_date <= b.end_date and b.start_date <= a.end_date:
        return 0.0
    gap_from_end = abs((a.start_date - b.end_date).days)
    gap_from_start = abs((b.start_date - a.end_date).days)
    return min(gap_from_end, gap_from_start) / AVERAGE_DAYS_PER_MONTH


def rank_candidates(candidates: Iterable[Candidate]) -> list[Candidate]:
    """Sort ascending by score; ties keep chronological (input) order."""
    return sorted(candidates, key=lambda candidate: candidate.score)


def select_diverse(
    candidates: Iterable[Candidate],
    top_n: int,
    min_time_gap_months: float = DEFAULT_MIN_TIME_GAP_MONTHS,
) -> list[Candidate]:
    """
    Greedily pick up to ``top_n`` candidates, best score first.

    Args:
        candidates: Scored windows in any order
        top_n: Maximum number of windows to return
        min_time_gap_months: Required gap to every accepted window

    Returns:
        Accepted candidates, best first
    """
    selected: list[Candidate] = []
    if top_n <= 0:
        return selected

    rejected = 0
    for candidate in rank_candidates(candidates):
        if any(gap_in_months(candidate, chosen) < min_time_gap_months for chosen in selected):
            rejected += 1
            continue
        selected.append(candidate)
        if len(selected) >= top_n:
            break

    logger.debug(
        "Selected diverse analogues",
        extra={"selected": len(selected), "rejected_for_gap": rejected, "min_gap_months": min_time_gap_months},
    )
    return selected
