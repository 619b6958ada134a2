from __future__ import annotations

import pandas as pd

from bikeshare.models.trip import (
    DAY_TYPE,
    DAY_TYPES,
    HOUR_START,
    MIDDLE_WEEKDAY,
    MONTH_START,
    ONE_WAY,
    ROUND_TRIP,
    SHOULDER_WEEKDAY,
    TRIP_TYPE,
    TRIP_TYPES,
    WEEKEND,
)

# Monday=0 … Sunday=6
DAY_TYPE_BY_WEEKDAY = {
    0: SHOULDER_WEEKDAY,
    1: MIDDLE_WEEKDAY,
    2: MIDDLE_WEEKDAY,
    3: MIDDLE_WEEKDAY,
    4: SHOULDER_WEEKDAY,
    5: WEEKEND,
    6: WEEKEND,
}


def classify_day_type(weekday: int) -> str:
    try:
        return DAY_TYPE_BY_WEEKDAY[int(weekday)]
    except KeyError:
        raise ValueError(f"weekday must be 0..6, got {weekday}") from None


def add_day_type(trips: pd.DataFrame) -> pd.DataFrame:
    trips[DAY_TYPE] = pd.Categorical(
        trips["time_start"].dt.weekday.map(classify_day_type),
        categories=DAY_TYPES,
    )
    return trips


def add_trip_type(trips: pd.DataFrame) -> pd.DataFrame:
    """Round trip when both coordinate pairs render to the same text."""
    start = trips["start_lat"].astype(str) + "," + trips["start_lng"].astype(str)
    end = trips["end_lat"].astype(str) + "," + trips["end_lng"].astype(str)
    trips[TRIP_TYPE] = pd.Categorical(
        (start == end).map({True: ROUND_TRIP, False: ONE_WAY}),
        categories=TRIP_TYPES,
    )
    return trips


def add_time_parts(trips: pd.DataFrame) -> pd.DataFrame:
    trips[HOUR_START] = trips["time_start"].dt.hour.astype(int)
    trips[MONTH_START] = trips["time_start"].dt.month.astype(int)
    return trips


def derive_fields(trips: pd.DataFrame) -> pd.DataFrame:
    trips = trips.copy()
    trips = add_day_type(trips)
    trips = add_trip_type(trips)
    trips = add_time_parts(trips)
    return trips
