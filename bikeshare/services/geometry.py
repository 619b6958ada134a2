from __future__ import annotations
import logging
from pathlib import Path

import numpy as np
import pandas as pd

from bikeshare.divvy.constants import METERS_PER_MILE
from bikeshare.models.trip import (
    COORD_COLUMNS,
    DIRECTION,
    DISTANCE,
    GEOMETRY_COLUMNS,
    ONE_WAY,
    TRIP_TYPE,
)
from core.exceptions import GeometryInputError
from domain.distance import calc_distance_and_bearing


def compute_trip_geometry(trips: pd.DataFrame) -> pd.DataFrame:
    """
    Distance (miles) and initial bearing (integer degrees) for one-way trips.

    Returns one row per one-way ``ride_id``; round trips and trips missing a
    coordinate are left out.
    """
    located = trips[COORD_COLUMNS].notna().all(axis=1)
    one_way = trips.loc[(trips[TRIP_TYPE] == ONE_WAY) & located]
    if one_way.empty:
        return pd.DataFrame(
            {
                "ride_id": pd.Series(dtype=object),
                DISTANCE: pd.Series(dtype=float),
                DIRECTION: pd.Series(dtype="Int64"),
            }
        )

    meters, bearing = calc_distance_and_bearing(
        one_way["start_lng"], one_way["start_lat"],
        one_way["end_lng"], one_way["end_lat"],
    )
    finite = np.isfinite(bearing)
    direction = np.where(finite, np.mod(np.rint(np.where(finite, bearing, 0)), 360), np.nan)

    geometry = pd.DataFrame(
        {
            "ride_id": one_way["ride_id"].to_numpy(),
            DISTANCE: meters / METERS_PER_MILE,
            DIRECTION: pd.array(direction, dtype="Int64"),
        }
    )
    logging.info("Computed geometry for %s one-way trips", len(geometry))
    return geometry


def load_trip_geometry(path: Path) -> pd.DataFrame:
    """Read a geometry table computed elsewhere (ride_id, distance_miles, direction)."""
    geometry = pd.read_csv(path, dtype={"ride_id": str})
    missing = [c for c in GEOMETRY_COLUMNS if c not in geometry.columns]
    if missing:
        raise GeometryInputError(f"{Path(path).name}: missing columns {missing}")
    if geometry["ride_id"].duplicated().any():
        raise GeometryInputError(f"{Path(path).name}: duplicated ride_id values")

    geometry = geometry[GEOMETRY_COLUMNS].copy()
    geometry[DIRECTION] = pd.to_numeric(geometry[DIRECTION]).round().astype("Int64")
    logging.info("Loaded geometry for %s trips from %s", len(geometry), Path(path).name)
    return geometry


def augment_with_geometry(sample: pd.DataFrame, geometry: pd.DataFrame) -> pd.DataFrame:
    """Attach geometry by ``ride_id``; every sampled row is kept, round trips get nulls."""
    sample = sample.drop(columns=[DISTANCE, DIRECTION], errors="ignore")
    out = sample.merge(geometry[GEOMETRY_COLUMNS], on="ride_id", how="left", validate="one_to_one")
    logging.info(
        "Geometry attached to %s of %s sampled trips",
        int(out[DISTANCE].notna().sum()), len(out),
    )
    return out
