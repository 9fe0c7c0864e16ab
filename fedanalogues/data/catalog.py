"""
Reference catalogs: known indicators, data-quality thresholds, exclusion
presets and named scenario templates.

Templates bundle an indicator weighting with sensible default exclusions so a
caller can ask for "stagflation-hunt" instead of spelling out weights.
"""

import copy
from dataclasses import dataclass, field, replace
from datetime import date

from fedanalogues.data.models import DateRange, ScenarioParams, WeightedIndicator

# ============================================================================
# Indicators
# ============================================================================

# FRED series ids and the unit transform the ingestion layer applies
FRED_SERIES = {
    "UNRATE": {"name": "Unemployment Rate", "type": "level"},
    "CPIAUCSL": {"name": "CPI (Inflation)", "type": "yoy"},
    "DFF": {"name": "Federal Funds Rate", "type": "level"},
    "PCEPI": {"name": "PCE (Core Inflation)", "type": "yoy"},
    "GDPC1": {"name": "Real GDP", "type": "yoy_quarterly"},
    "T10Y2Y": {"name": "10-2 Year Treasury Spread", "type": "level"},
    "ICSA": {"name": "Initial Claims", "type": "level"},
}

WEIGHT_SUM_TOLERANCE = 0.001

# ============================================================================
# Data Quality
# ============================================================================

DATA_QUALITY = {
    # Pre-1960 Fed Funds data shows unrealistic volatility
    "reliable_fed_data_start": date(1960, 1, 1),
    "quality_eras": {
        "MODERN_RELIABLE": {"start": date(1990, 1, 1), "end": date(2030, 12, 31), "reliability": "high"},
        "EARLY_RELIABLE": {"start": date(1960, 1, 1), "end": date(1989, 12, 31), "reliability": "medium"},
        "UNRELIABLE": {"start": date(1948, 1, 1), "end": date(1959, 12, 31), "reliability": "low"},
    },
}

# ============================================================================
# Exclusion Presets
# ============================================================================

EXCLUSION_PRESETS = {
    "recent-5-years": {
        "exclude_recent_years": 5,
        "description": "Exclude last 5 years",
    },
    "recent-10-years": {
        "exclude_recent_years": 10,
        "description": "Exclude last 10 years",
    },
    "post-2000": {
        "exclude_date_ranges": [DateRange(date(2000, 1, 1), date(2030, 12, 31), "Post-2000 period")],
        "description": "Focus on pre-2000 historical periods",
    },
    "pre-1980": {
        "exclude_date_ranges": [DateRange(date(1980, 1, 1), date(2030, 12, 31), "Modern era")],
        "description": "Focus on pre-1980 historical periods",
    },
}


def apply_exclusion_preset(params: ScenarioParams, preset: str) -> ScenarioParams:
    """
    Return a copy of ``params`` with an exclusion preset layered on top.

    Date ranges are appended to any the scenario already has; a recent-years
    preset replaces the scenario's value.

    Raises:
        KeyError: If the preset name is unknown
    """
    if preset not in EXCLUSION_PRESETS:
        raise KeyError(f"Unknown exclusion preset: {preset}. Available: {', '.join(EXCLUSION_PRESETS)}")

    preset_values = EXCLUSION_PRESETS[preset]
    updated = replace(params, exclude_date_ranges=list(params.exclude_date_ranges))
    if "exclude_recent_years" in preset_values:
        updated.exclude_recent_years = preset_values["exclude_recent_years"]
    updated.exclude_date_ranges.extend(preset_values.get("exclude_date_ranges", []))
    return updated


# ============================================================================
# Scenario Templates
# ============================================================================

TEMPLATE_CATEGORIES = ("crisis", "policy", "inflation", "recession", "general")


@dataclass(frozen=True)
class EconomicTemplate:
    id: str
    name: str
    description: str
    category: str
    indicators: tuple[WeightedIndicator, ...]
    economic_rationale: str
    default_params: dict = field(default_factory=dict)
    focus_eras: tuple[str, ...] = ()
    exclude_eras: tuple[str, ...] = ()
    examples: tuple[str, ...] = ()


def _weights(**weights: float) -> tuple[WeightedIndicator, ...]:
    return tuple(WeightedIndicator(indicator, weight) for indicator, weight in weights.items())


ECONOMIC_TEMPLATES = {
    template.id: template
    for template in (
        EconomicTemplate(
            id="stagflation-hunt",
            name="Stagflation Hunt",
            description="Looks for periods where rising unemployment coincides with persistent inflation.",
            category="inflation",
            indicators=_weights(UNRATE=0.4, CPIAUCSL=0.4, DFF=0.2),
            economic_rationale=(
                "Stagflation is defined by the joint behaviour of slack and prices, so unemployment "
                "and CPI carry most of the weight while the policy rate shows how the Fed responded."
            ),
            default_params={"window_months": 18, "exclude_recent_years": 15},
            focus_eras=("stagflation", "volcker"),
            examples=("1973-1975 oil shock", "1979-1981 second oil shock and Volcker tightening"),
        ),
        EconomicTemplate(
            id="financial-crisis",
            name="Financial Crisis",
            description="Finds episodes of labour market stress with curve and claims signals of a credit event.",
            category="crisis",
            indicators=_weights(UNRATE=0.3, T10Y2Y=0.3, ICSA=0.25, DFF=0.15),
            economic_rationale=(
                "Credit crises show up first in claims and the yield curve before unemployment "
                "catches up; the policy rate captures the emergency easing response."
            ),
            default_params={"window_months": 12},
            examples=("2007-2009 global financial crisis", "1990-1991 savings and loan crisis"),
        ),
        EconomicTemplate(
            id="policy-tightening",
            name="Policy Tightening Cycle",
            description="Matches the shape of a Fed hiking cycle against inflation and labour conditions.",
            category="policy",
            indicators=_weights(DFF=0.4, CPIAUCSL=0.3, UNRATE=0.3),
            economic_rationale=(
                "A tightening cycle is first of all a path for the policy rate; inflation and "
                "unemployment describe the conditions the Fed was reacting to."
            ),
            default_params={"window_months": 12},
            examples=("1994 bond market massacre hikes", "2004-2006 measured-pace tightening"),
        ),
        EconomicTemplate(
            id="recession-early-warning",
            name="Recession Early Warning",
            description="Short-window search on the leading signals that historically precede recessions.",
            category="recession",
            indicators=_weights(T10Y2Y=0.35, ICSA=0.35, UNRATE=0.3),
            economic_rationale=(
                "Curve inversion and rising initial claims lead recessions by months; a short window "
                "keeps the match focused on the turn rather than the whole downturn."
            ),
            default_params={"window_months": 6},
            examples=("2000 curve inversion before the dot-com bust", "2006-2007 inversion before 2008"),
        ),
        EconomicTemplate(
            id="inflation-surge",
            name="Inflation Surge",
            description="Looks for sharp accelerations in consumer prices and the policy reaction to them.",
            category="inflation",
            indicators=_weights(CPIAUCSL=0.4, PCEPI=0.3, DFF=0.3),
            economic_rationale=(
                "Headline CPI and PCE together describe the breadth of the price surge, while the "
                "policy rate shows whether the Fed was ahead of or behind the curve."
            ),
            default_params={"window_months": 12},
            examples=("1973-1974 food and energy surge", "2021-2022 post-pandemic inflation"),
        ),
        EconomicTemplate(
            id="growth-slowdown",
            name="Growth Slowdown",
            description="Matches decelerating real output alongside a softening labour market.",
            category="recession",
            indicators=_weights(GDPC1=0.5, UNRATE=0.3, ICSA=0.2),
            economic_rationale=(
                "Real GDP growth is the broadest activity measure; unemployment and claims confirm "
                "whether a slowdown is spreading into the labour market."
            ),
            default_params={"window_months": 12},
            exclude_eras=("modern",),
            examples=("2001 mild recession", "1990-1991 recession"),
        ),
        EconomicTemplate(
            id="balanced-economic",
            name="Balanced Economic Snapshot",
            description="Equal weighting of the five core macro indicators for a general-purpose comparison.",
            category="general",
            indicators=_weights(UNRATE=0.2, CPIAUCSL=0.2, DFF=0.2, GDPC1=0.2, T10Y2Y=0.2),
            economic_rationale=(
                "With no prior about which dimension matters most, equal weights let the overall "
                "macro shape decide which historical periods are closest."
            ),
            default_params={"window_months": 12},
        ),
    )
}


def params_from_template(template_id: str, **overrides) -> ScenarioParams:
    """
    Build ScenarioParams from a template, applying keyword overrides last.

    Raises:
        KeyError: If the template id is unknown
    """
    if template_id not in ECONOMIC_TEMPLATES:
        raise KeyError(f"Unknown template: {template_id}. Available: {', '.join(ECONOMIC_TEMPLATES)}")

    template = ECONOMIC_TEMPLATES[template_id]
    values = {
        "indicators": list(template.indicators),
        "focus_eras": list(template.focus_eras),
        "exclude_eras": list(template.exclude_eras),
    }
    values.update(copy.deepcopy(template.default_params))
    values.update(overrides)
    return ScenarioParams(**values)


def parse_indicator_weights(entries: list[str], require_unit_sum: bool = True) -> list[WeightedIndicator]:
    """
    Parse ``"ID:weight"`` strings into weighted indicators.

    Args:
        entries: Strings such as ``["UNRATE:0.5", "CPIAUCSL:0.5"]``
        require_unit_sum: Reject weights that do not sum to 1.0 (within 0.001)

    Raises:
        ValueError: On malformed entries, unknown ids or a bad weight sum
    """
    indicators = []
    for entry in entries:
        indicator_id, _, weight_str = entry.partition(":")
        indicator_id = indicator_id.strip()
        if not indicator_id or not weight_str or indicator_id not in FRED_SERIES:
            raise ValueError(f"Invalid indicator format or ID: {entry}. Use format like UNRATE:0.5")
        try:
            weight = float(weight_str)
        except ValueError:
            raise ValueError(f"Invalid weight in {entry!r}") from None
        indicators.append(WeightedIndicator(indicator_id, weight))

    if require_unit_sum:
        total = sum(indicator.weight for indicator in indicators)
        if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
            raise ValueError(f"Indicator weights must sum to 1.0. Current sum: {total}")

    return indicators
