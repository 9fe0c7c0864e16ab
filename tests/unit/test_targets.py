"""
Unit tests for target window helpers.
"""

from datetime import date

import pytest

from fedanalogues.analysis.targets import (
    parse_target_period,
    recent_target_window,
    scenario_target_window,
    target_window_for_period,
)
from fedanalogues.core.config import get_settings
from fedanalogues.data.catalog import params_from_template
from fedanalogues.data.models import DataPoint, ScenarioParams, WeightedIndicator


@pytest.fixture
def monthly_series():
    return [DataPoint(date(2020 + m // 12, m % 12 + 1, 1), {"UNRATE": float(m)}) for m in range(36)]


class TestRecentTargetWindow:
    def test_last_n_points(self, monthly_series):
        window = recent_target_window(monthly_series, 6)
        assert len(window) == 6
        assert window[-1] is monthly_series[-1]
        assert window[0].date == date(2022, 7, 1)

    def test_default_from_settings(self, monthly_series):
        assert len(recent_target_window(monthly_series)) == get_settings().default_window_months

    def test_shorter_series_returns_all(self, monthly_series):
        assert len(recent_target_window(monthly_series[:4], 12)) == 4

    def test_non_positive_months(self, monthly_series):
        assert recent_target_window(monthly_series, 0) == []


class TestScenarioTargetWindow:
    def test_uses_scenario_window(self, monthly_series):
        params = ScenarioParams(indicators=[WeightedIndicator("UNRATE", 1.0)], window_months=18)
        assert len(scenario_target_window(monthly_series, params)) == 18

    def test_template_window(self, monthly_series):
        params = params_from_template("recession-early-warning")
        assert len(scenario_target_window(monthly_series, params)) == 6

    def test_unset_window_uses_settings(self, monthly_series):
        params = ScenarioParams(indicators=[WeightedIndicator("UNRATE", 1.0)])
        assert len(scenario_target_window(monthly_series, params)) == get_settings().default_window_months


class TestTargetWindowForPeriod:
    def test_inclusive_range(self, monthly_series):
        window = target_window_for_period(monthly_series, date(2021, 1, 1), date(2021, 6, 30))
        assert [point.date.month for point in window] == [1, 2, 3, 4, 5, 6]
        assert all(point.date.year == 2021 for point in window)


class TestParseTargetPeriod:
    def test_valid_period(self):
        assert parse_target_period("2008-01 to 2009-12") == (date(2008, 1, 1), date(2009, 12, 31))

    def test_leap_february(self):
        assert parse_target_period("2023-06 to 2024-02")[1] == date(2024, 2, 29)

    @pytest.mark.parametrize("period", ["2008-01-2009-12", "2008/01 to 2009/12", "", "08-01 to 09-12"])
    def test_bad_format(self, period):
        with pytest.raises(ValueError, match="YYYY-MM to YYYY-MM"):
            parse_target_period(period)

    def test_invalid_month(self):
        with pytest.raises(ValueError, match="Invalid month"):
            parse_target_period("2008-13 to 2009-12")

    @pytest.mark.parametrize("period", ["2009-12 to 2008-01", "2008-05 to 2008-05"])
    def test_start_must_precede_end(self, period):
        with pytest.raises(ValueError, match="before end"):
            parse_target_period(period)
