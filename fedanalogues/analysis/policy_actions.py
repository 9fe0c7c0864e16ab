"""
Policy Action Extractor

Turns a noisy policy-rate series into discrete HIKE / CUT / HOLD decisions.
Fine-grained rate data contains non-decision movement (revisions, rounding,
daily drift around the target), so small moves are dropped and clustered
same-direction moves are merged into one decision.

Algorithm:
    1. Point-to-point changes in basis points; keep |change| >= 10 bps
    2. Merge runs of consecutive changes with the same sign as the run's
       first change and within 30 days of it; sum the bps, date the action
       at the last change of the run
    3. Keep merged actions with |sum| >= 10 bps (HIKE if > 0, CUT if < 0)
    4. No action survives: one HOLD at the window's middle point, 0 bps
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from fedanalogues.data.models import DataPoint, PolicyAction, PolicyActionKind

DEFAULT_RATE_INDICATOR = "DFF"
MIN_SIGNIFICANT_CHANGE_BPS = 10
MAX_GROUPING_DAYS = 30


@dataclass(frozen=True)
class RateChange:
    date: date
    change_bps: int


def to_basis_points(change_pct: float) -> int:
    # Halves round toward +inf: +0.125% is 13 bps, -0.125% is -12 bps
    return math.floor(change_pct * 100 + 0.5)


def significant_rate_changes(
    window: Sequence[DataPoint],
    rate_indicator: str = DEFAULT_RATE_INDICATOR,
    min_change_bps: int = MIN_SIGNIFICANT_CHANGE_BPS,
) -> list[RateChange]:
    """Point-to-point rate changes of at least ``min_change_bps``; pairs with a missing rate are skipped."""
    changes = []
    for previous, current in zip(window, window[1:]):
        prev_rate = previous.value(rate_indicator)
        curr_rate = current.value(rate_indicator)
        if prev_rate is None or curr_rate is None:
            continue
        change_bps = to_basis_points(curr_rate - prev_rate)
        if abs(change_bps) >= min_change_bps:
            changes.append(RateChange(current.date, change_bps))
    return changes


def group_rate_changes(
    changes: Sequence[RateChange],
    max_grouping_days: int = MAX_GROUPING_DAYS,
) -> list[RateChange]:
    """
    Merge consecutive changes into the run started by the first unmerged change.

    A later change joins the run while it has the same direction as the run's
    first change and lies at most ``max_grouping_days`` after it; the merged
    change is dated at the last change that joined.
    """
    grouped: list[RateChange] = []
    i = 0
    while i < len(changes):
        anchor = changes[i]
        total = anchor.change_bps
        end_date = anchor.date
        j = i + 1
        while j < len(changes):
            nxt = changes[j]
            same_direction = (nxt.change_bps > 0) == (anchor.change_bps > 0)
            if not same_direction or (nxt.date - anchor.date).days > max_grouping_days:
                break
            total += nxt.change_bps
            end_date = nxt.date
            j += 1
        grouped.append(RateChange(end_date, total))
        i = j
    return grouped


def extract_policy_actions(
    window: Sequence[DataPoint],
    rate_indicator: str = DEFAULT_RATE_INDICATOR,
    min_change_bps: int = MIN_SIGNIFICANT_CHANGE_BPS,
    max_grouping_days: int = MAX_GROUPING_DAYS,
) -> list[PolicyAction]:
    """
    Extract discrete policy decisions from the raw (non-normalized) window.

    Args:
        window: Chronological data points of one analogue
        rate_indicator: Indicator holding the policy rate in percent
        min_change_bps: Noise threshold for raw and grouped changes
        max_grouping_days: Maximum spacing of changes merged into one action

    Returns:
        HIKE/CUT actions in date order, or a single HOLD at the middle point.
        Windows with fewer than two points have no actions.

    Example:
        rates 1.00, 1.25, 1.50, 1.75 on consecutive days -> [HIKE +75 bps on day 4]
    """
    if len(window) < 2:
        return []

    actions = []
    raw_changes = significant_rate_changes(window, rate_indicator, min_change_bps)
    for group in group_rate_changes(raw_changes, max_grouping_days):
        if abs(group.change_bps) < min_change_bps:
            continue
        kind = PolicyActionKind.HIKE if group.change_bps > 0 else PolicyActionKind.CUT
        actions.append(PolicyAction(date=group.date, action=kind, change_bps=group.change_bps))

    if not actions:
        midpoint = window[len(window) // 2]
        actions.append(PolicyAction(date=midpoint.date, action=PolicyActionKind.HOLD, change_bps=0))

    return actions
