"""
Unit tests for the indicator, preset and template catalogs.
"""

from datetime import date

import pytest

from fedanalogues.data.catalog import (
    ECONOMIC_TEMPLATES,
    EXCLUSION_PRESETS,
    FRED_SERIES,
    TEMPLATE_CATEGORIES,
    apply_exclusion_preset,
    params_from_template,
    parse_indicator_weights,
)
from fedanalogues.data.eras import DEFAULT_ERA_CATALOG
from fedanalogues.data.models import DateRange, ScenarioParams, WeightedIndicator


class TestEconomicTemplates:
    @pytest.mark.parametrize("template_id", list(ECONOMIC_TEMPLATES))
    def test_weights_sum_to_one(self, template_id):
        template = ECONOMIC_TEMPLATES[template_id]
        assert sum(indicator.weight for indicator in template.indicators) == pytest.approx(1.0)

    @pytest.mark.parametrize("template_id", list(ECONOMIC_TEMPLATES))
    def test_known_indicators_and_category(self, template_id):
        template = ECONOMIC_TEMPLATES[template_id]
        assert all(indicator.id in FRED_SERIES for indicator in template.indicators)
        assert template.category in TEMPLATE_CATEGORIES
        assert template.id == template_id

    @pytest.mark.parametrize("template_id", list(ECONOMIC_TEMPLATES))
    def test_era_names_resolve(self, template_id):
        template = ECONOMIC_TEMPLATES[template_id]
        for name in template.focus_eras + template.exclude_eras:
            assert DEFAULT_ERA_CATALOG.resolve(name) is not None

    def test_every_indicator_is_used(self):
        used = {indicator.id for template in ECONOMIC_TEMPLATES.values() for indicator in template.indicators}
        assert used == set(FRED_SERIES)


class TestParamsFromTemplate:
    def test_stagflation_hunt(self):
        params = params_from_template("stagflation-hunt")
        assert params.window_months == 18
        assert params.exclude_recent_years == 15
        assert params.focus_eras == ["stagflation", "volcker"]
        assert WeightedIndicator("UNRATE", 0.4) in params.indicators

    def test_overrides_win(self):
        params = params_from_template("policy-tightening", window_months=24, exclude_unreliable=False)
        assert params.window_months == 24
        assert params.exclude_unreliable is False

    def test_params_are_independent_copies(self):
        first = params_from_template("growth-slowdown")
        first.exclude_eras.append("volcker")
        assert params_from_template("growth-slowdown").exclude_eras == ["modern"]

    def test_unknown_template(self):
        with pytest.raises(KeyError, match="Unknown template"):
            params_from_template("nope")


class TestExclusionPresets:
    def make_params(self):
        return ScenarioParams(
            indicators=[WeightedIndicator("DFF", 1.0)],
            exclude_date_ranges=[DateRange(date(1990, 1, 1), date(1991, 1, 1))],
        )

    def test_recent_years_preset(self):
        updated = apply_exclusion_preset(self.make_params(), "recent-10-years")
        assert updated.exclude_recent_years == 10

    def test_range_preset_appends(self):
        original = self.make_params()
        updated = apply_exclusion_preset(original, "post-2000")
        assert len(updated.exclude_date_ranges) == 2
        assert updated.exclude_date_ranges[-1].start == date(2000, 1, 1)
        assert len(original.exclude_date_ranges) == 1

    def test_all_presets_have_descriptions(self):
        assert all(preset["description"] for preset in EXCLUSION_PRESETS.values())

    def test_unknown_preset(self):
        with pytest.raises(KeyError, match="Unknown exclusion preset"):
            apply_exclusion_preset(self.make_params(), "post-1700")


class TestParseIndicatorWeights:
    def test_valid(self):
        indicators = parse_indicator_weights(["UNRATE:0.5", "CPIAUCSL:0.5"])
        assert indicators == [WeightedIndicator("UNRATE", 0.5), WeightedIndicator("CPIAUCSL", 0.5)]

    def test_within_tolerance(self):
        assert len(parse_indicator_weights(["UNRATE:0.3333", "DFF:0.3333", "ICSA:0.3334"])) == 3

    def test_bad_sum(self):
        with pytest.raises(ValueError, match="must sum to 1.0"):
            parse_indicator_weights(["UNRATE:0.5", "DFF:0.4"])

    def test_sum_check_optional(self):
        assert len(parse_indicator_weights(["UNRATE:0.5"], require_unit_sum=False)) == 1

    @pytest.mark.parametrize("entry", ["UNRATE", "BOGUS:1.0", ":1.0", "UNRATE:abc"])
    def test_malformed(self, entry):
        with pytest.raises(ValueError):
            parse_indicator_weights([entry])
