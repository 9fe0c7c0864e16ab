"""
Unit tests for the pandas adapters.
"""

from datetime import date

import numpy as np
import pandas as pd
import pytest

from fedanalogues.data.frames import analogues_to_frame, data_points_from_frame, data_points_to_frame
from fedanalogues.data.models import (
    Analogue,
    DataPoint,
    DataQuality,
    PolicyAction,
    PolicyActionKind,
    Reliability,
)


@pytest.fixture
def indicator_frame():
    return pd.DataFrame(
        {"UNRATE": [4.0, np.nan, 4.2], "DFF": [1.0, 1.25, 1.5]},
        index=pd.to_datetime(["2020-03-01", "2020-01-01", "2020-02-01"]),
    )


class TestDataPointsFromFrame:
    def test_sorted_by_date(self, indicator_frame):
        points = data_points_from_frame(indicator_frame)
        assert [point.date for point in points] == [date(2020, 1, 1), date(2020, 2, 1), date(2020, 3, 1)]

    def test_nan_cells_left_out(self, indicator_frame):
        points = data_points_from_frame(indicator_frame)
        assert "UNRATE" not in points[0].values
        assert points[0].value("DFF") == 1.25
        assert points[1].value("UNRATE") == 4.2

    def test_date_column(self):
        df = pd.DataFrame({"date": ["2021-01-01", "2021-02-01"], "ICSA": [210000, 225000]})
        points = data_points_from_frame(df, date_column="date")
        assert points[1].date == date(2021, 2, 1)
        assert points[1].value("ICSA") == 225000.0

    def test_duplicate_dates_keep_last(self):
        df = pd.DataFrame({"DFF": [1.0, 2.0]}, index=pd.to_datetime(["2021-01-01", "2021-01-01"]))
        points = data_points_from_frame(df)
        assert len(points) == 1
        assert points[0].value("DFF") == 2.0

    def test_non_numeric_values_dropped(self):
        df = pd.DataFrame({"DFF": ["1.5", "."]}, index=pd.to_datetime(["2021-01-01", "2021-02-01"]))
        points = data_points_from_frame(df)
        assert points[0].value("DFF") == 1.5
        assert points[1].values == {}


class TestDataPointsToFrame:
    def test_round_trip_shape(self, indicator_frame):
        frame = data_points_to_frame(data_points_from_frame(indicator_frame))
        assert list(frame.index) == sorted(indicator_frame.index)
        assert frame.index.name == "date"
        assert np.isnan(frame.loc["2020-01-01", "UNRATE"])
        assert frame.loc["2020-03-01", "UNRATE"] == 4.0


class TestAnaloguesToFrame:
    def test_summary_row(self):
        analogue = Analogue(
            start_date=date(2004, 6, 1),
            end_date=date(2005, 5, 1),
            similarity_score=0.42,
            data=(DataPoint(date(2004, 6, 1), {"DFF": 1.0}),),
            policy_actions=(
                PolicyAction(date(2004, 8, 1), PolicyActionKind.HIKE, 50),
                PolicyAction(date(2005, 2, 1), PolicyActionKind.HIKE, 25),
            ),
            data_quality=DataQuality(Reliability.HIGH),
            era_name="Dot-Com Era",
        )

        frame = analogues_to_frame([analogue])

        row = frame.iloc[0]
        assert row["rank"] == 1
        assert row["era"] == "Dot-Com Era"
        assert row["reliability"] == "high"
        assert row["net_change_bps"] == 75
        assert row["policy_actions"] == "HIKE +50bps 2004-08-01, HIKE +25bps 2005-02-01"

    def test_empty(self):
        assert analogues_to_frame([]).empty
