"""
Analysis Module - Historical Analogue Pipeline

Modules:
- reliability: Per-date data quality rating, filtering and annotation
- period_exclusion: Recent-years, era and date-range exclusions
- aggregation: Weighted per-indicator DTW distances over sliding windows
- diversity: Era bonus and recency penalty multiplier
- selection: Ranking and temporally diverse top-N selection
- policy_actions: HIKE/CUT/HOLD extraction from a policy-rate series
- targets: Target window helpers
- engine: End-to-end orchestration
"""

from fedanalogues.analysis.engine import find_analogues
from fedanalogues.analysis.period_exclusion import apply_period_exclusions
from fedanalogues.analysis.policy_actions import extract_policy_actions
from fedanalogues.analysis.reliability import (
    annotate_analogue,
    assess_data_quality,
    filter_data_quality,
)
from fedanalogues.analysis.diversity import describe_era, temporal_diversity_multiplier
from fedanalogues.analysis.selection import select_diverse
from fedanalogues.analysis.targets import (
    parse_target_period,
    recent_target_window,
    scenario_target_window,
    target_window_for_period,
)

__all__ = [
    "find_analogues",
    "apply_period_exclusions",
    "extract_policy_actions",
    "annotate_analogue",
    "assess_data_quality",
    "filter_data_quality",
    "describe_era",
    "temporal_diversity_multiplier",
    "select_diverse",
    "parse_target_period",
    "recent_target_window",
    "scenario_target_window",
    "target_window_for_period",
]
