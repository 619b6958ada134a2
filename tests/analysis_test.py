import pandas as pd
import pytest

from bikeshare.services.analysis import (
    compass_sector,
    direction_histogram,
    duration_summary,
    rider_share,
    share_by,
    summarize,
    top_stations,
)


def trips():
    return pd.DataFrame(
        {
            "ride_id": list("ABCDEF"),
            "member_casual": ["member", "member", "member", "casual", "casual", "casual"],
            "rideable_type": ["classic_bike"] * 3 + ["electric_bike", "docked_bike", "electric_bike"],
            "day_type": ["Middle Weekday", "Middle Weekday", "Weekend", "Weekend", "Weekend", "Shoulder Weekday"],
            "trip_type": ["One Way"] * 5 + ["Round Trip"],
            "hour_start": [8, 8, 17, 13, 14, 15],
            "month_start": [6, 6, 7, 7, 7, 8],
            "start_station_name": ["S1", "S1", "S2", "S3", "S3", "S3"],
            "duration_mins": [10.0, 12.0, 8.0, 25.0, 30.0, 40.0],
            "distance_miles": [1.0, 1.5, 0.8, 2.0, 2.5, None],
            "direction": pd.array([0, 90, 350, 180, 225, None], dtype="Int64"),
        }
    )


def test_rider_share():
    out = rider_share(trips()).set_index("member_casual")
    assert out.loc["member", "trips"] == 3
    assert out["share"].sum() == pytest.approx(1.0)


def test_share_by_sums_to_one_within_group():
    out = share_by(trips(), "day_type")
    sums = out.groupby("member_casual")["share"].sum()
    assert sums.tolist() == pytest.approx([1.0, 1.0])

    weekend_casual = out[(out["member_casual"] == "casual") & (out["day_type"] == "Weekend")]
    assert weekend_casual["share"].item() == pytest.approx(2 / 3)


def test_duration_summary_medians():
    out = duration_summary(trips()).set_index("member_casual")
    assert out.loc["member", "median"] == 10.0
    assert out.loc["casual", "median"] == 30.0
    assert out.loc["casual", "trips"] == 3


def test_compass_sector_boundaries():
    sectors = compass_sector(pd.Series([0, 22, 23, 90, 337, 338, 359]))
    assert sectors.astype(str).tolist() == ["N", "N", "NE", "E", "NW", "N", "N"]


def test_direction_histogram_skips_round_trips():
    out = direction_histogram(trips())
    assert out["trips"].sum() == 5


def test_top_stations_per_group():
    out = top_stations(trips(), n=1)
    assert out.set_index("member_casual")["start_station_name"].to_dict() == {
        "casual": "S3",
        "member": "S1",
    }


def test_summarize_contains_all_tables():
    tables = summarize(trips())
    assert {
        "rider_share",
        "share_by_rideable_type",
        "share_by_day_type",
        "share_by_trip_type",
        "share_by_hour_start",
        "share_by_month_start",
        "duration_summary",
        "distance_summary",
        "direction_histogram",
        "top_start_stations",
    } <= set(tables)
