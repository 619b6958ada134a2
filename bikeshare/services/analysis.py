"""Member vs. casual summary tables."""
from __future__ import annotations

import numpy as np
import pandas as pd

from bikeshare.models.trip import DIRECTION, DISTANCE, DURATION

GROUP = "member_casual"
COMPASS = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]


def rider_share(trips: pd.DataFrame) -> pd.DataFrame:
    counts = trips.groupby(GROUP, observed=True).size().rename("trips")
    out = counts.to_frame()
    out["share"] = out["trips"] / out["trips"].sum()
    return out.reset_index()


def share_by(trips: pd.DataFrame, column: str) -> pd.DataFrame:
    """
    Trip counts per membership and *column* value, with the share each
    value takes within its membership group.
    """
    counts = (
        trips.groupby([GROUP, column], observed=True)
        .size()
        .rename("trips")
        .reset_index()
    )
    totals = counts.groupby(GROUP, observed=True)["trips"].transform("sum")
    counts["share"] = counts["trips"] / totals
    return counts


def _describe(trips: pd.DataFrame, column: str) -> pd.DataFrame:
    values = trips.dropna(subset=[column])
    return (
        values.groupby(GROUP, observed=True)[column]
        .agg(
            trips="count",
            mean="mean",
            q25=lambda s: s.quantile(0.25),
            median="median",
            q75=lambda s: s.quantile(0.75),
        )
        .reset_index()
    )


def duration_summary(trips: pd.DataFrame) -> pd.DataFrame:
    return _describe(trips, DURATION)


def distance_summary(trips: pd.DataFrame) -> pd.DataFrame:
    return _describe(trips, DISTANCE)


def compass_sector(direction: pd.Series) -> pd.Series:
    # sectors are 45° wide and centred on the compass points
    idx = (np.floor((direction.astype(float) + 22.5) / 45) % 8).astype(int)
    return pd.Series(pd.Categorical.from_codes(idx.to_numpy(), categories=COMPASS), index=direction.index)


def direction_histogram(trips: pd.DataFrame) -> pd.DataFrame:
    one_way = trips.dropna(subset=[DIRECTION]).copy()
    one_way["sector"] = compass_sector(one_way[DIRECTION])
    return share_by(one_way, "sector")


def top_stations(trips: pd.DataFrame, n: int = 10) -> pd.DataFrame:
    counts = (
        trips.groupby([GROUP, "start_station_name"], observed=True)
        .size()
        .rename("trips")
        .reset_index()
        .sort_values([GROUP, "trips"], ascending=[True, False])
    )
    return counts.groupby(GROUP, observed=True).head(n).reset_index(drop=True)


SHARE_COLUMNS = ["rideable_type", "day_type", "trip_type", "hour_start", "month_start"]


def summarize(trips: pd.DataFrame) -> dict[str, pd.DataFrame]:
    tables = {"rider_share": rider_share(trips)}
    for column in SHARE_COLUMNS:
        tables[f"share_by_{column}"] = share_by(trips, column)
    tables["duration_summary"] = duration_summary(trips)
    if DISTANCE in trips.columns:
        tables["distance_summary"] = distance_summary(trips)
        tables["direction_histogram"] = direction_histogram(trips)
    tables["top_start_stations"] = top_stations(trips)
    return tables
