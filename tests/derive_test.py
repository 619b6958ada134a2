import pandas as pd
import pytest

from bikeshare.models.trip import DAY_TYPES
from bikeshare.services.derive import (
    add_trip_type,
    classify_day_type,
    derive_fields,
)


def test_day_type_is_total_with_three_buckets():
    buckets = [classify_day_type(d) for d in range(7)]

    assert set(buckets) == set(DAY_TYPES)
    assert buckets.count("Weekend") == 2
    assert buckets.count("Shoulder Weekday") == 2
    assert buckets.count("Middle Weekday") == 3


@pytest.mark.parametrize(
    "weekday, expected",
    [(0, "Shoulder Weekday"), (4, "Shoulder Weekday"), (2, "Middle Weekday"), (6, "Weekend")],
)
def test_day_type_by_weekday(weekday, expected):
    assert classify_day_type(weekday) == expected


def test_day_type_rejects_out_of_range():
    with pytest.raises(ValueError):
        classify_day_type(7)


def coords(start, end):
    return pd.DataFrame(
        {
            "start_lat": [start[0]],
            "start_lng": [start[1]],
            "end_lat": [end[0]],
            "end_lng": [end[1]],
        }
    )


def test_round_trip_iff_coordinates_equal():
    same = add_trip_type(coords((41.9, -87.63), (41.9, -87.63)))
    moved = add_trip_type(coords((41.9, -87.63), (41.9, -87.63001)))
    swapped = add_trip_type(coords((41.9, -87.63), (-87.63, 41.9)))

    assert same.loc[0, "trip_type"] == "Round Trip"
    assert moved.loc[0, "trip_type"] == "One Way"
    assert swapped.loc[0, "trip_type"] == "One Way"


def test_derive_fields_adds_all_columns():
    trips = pd.DataFrame(
        {
            "time_start": pd.to_datetime(
                ["2023-06-03 09:15:00", "2023-06-05 17:40:00", "2023-06-07 23:05:00"]
            ),
            "start_lat": [41.9, 41.9, 41.8],
            "start_lng": [-87.6, -87.6, -87.7],
            "end_lat": [41.9, 41.95, 41.8],
            "end_lng": [-87.6, -87.6, -87.7],
        }
    )
    out = derive_fields(trips)

    assert out["day_type"].tolist() == ["Weekend", "Shoulder Weekday", "Middle Weekday"]
    assert out["trip_type"].tolist() == ["Round Trip", "One Way", "Round Trip"]
    assert out["hour_start"].tolist() == [9, 17, 23]
    assert out["month_start"].tolist() == [6, 6, 6]
    assert "day_type" not in trips.columns


def test_missing_start_coordinates_count_as_one_way():
    trips = add_trip_type(coords((float("nan"), float("nan")), (41.9, -87.63)))
    assert trips.loc[0, "trip_type"] == "One Way"
