from __future__ import annotations
import logging
from dataclasses import dataclass, field

import pandas as pd

from bikeshare.divvy.constants import MAX_DURATION_MINS, TEST_MARKER
from bikeshare.divvy.helpers import pct
from bikeshare.models.trip import (
    COORD_COLUMNS,
    DURATION,
    ENDPOINTS,
    RENAMES,
    STATION_COLUMNS,
)
from core.exceptions import DuplicateRideIdError

__all__ = ["CleaningStep", "CleaningReport", "TripCleaner", "compute_duration_mins"]


@dataclass
class CleaningStep:
    name: str
    rows_affected: int
    rows_before: int

    @property
    def pct(self) -> float:
        return pct(self.rows_affected, self.rows_before)


@dataclass
class CleaningReport:
    rows_in: int = 0
    rows_out: int = 0
    steps: list[CleaningStep] = field(default_factory=list)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [
                {"step": s.name, "rows_affected": s.rows_affected, "pct": s.pct}
                for s in self.steps
            ],
            columns=["step", "rows_affected", "pct"],
        )


def compute_duration_mins(trips: pd.DataFrame) -> pd.Series:
    return (trips["time_end"] - trips["time_start"]).dt.total_seconds() / 60


def _is_blank(col: pd.Series) -> pd.Series:
    blank = col.astype("string").str.strip().eq("").fillna(False)
    return (col.isna() | blank).astype(bool)


class TripCleaner:
    """
    Fixed sequence of filters and repairs over the yearly trip table.

    Every step reports how many rows it touches before touching them; the
    numbers end up in ``self.report``. Filters drop, repairs overwrite, and
    a duplicated ``ride_id`` aborts with ``DuplicateRideIdError``.
    """

    def __init__(self):
        self.report = CleaningReport()

    def clean(self, trips: pd.DataFrame) -> pd.DataFrame:
        self.report = CleaningReport(rows_in=len(trips))
        trips = trips.copy()

        trips = self._rename_time_columns(trips)
        trips = self._drop_missing_end_coords(trips)
        trips = self._drop_zero_coords(trips)
        trips = self._drop_test_stations(trips)
        self._assert_unique_ride_ids(trips)
        trips = self._fill_station_ids(trips)
        trips = self._fill_station_names(trips)
        trips[DURATION] = compute_duration_mins(trips)
        trips = self._drop_duration_outliers(trips)

        trips = trips.reset_index(drop=True)
        self.report.rows_out = len(trips)
        logging.info(
            "Cleaning kept %s of %s trips (%.2f%%)",
            len(trips), self.report.rows_in, pct(len(trips), self.report.rows_in),
        )
        return trips

    # ────────────────────────────────────────────────────────────────────────
    # steps
    def _audit(self, name: str, affected: int, total: int) -> None:
        step = CleaningStep(name, int(affected), total)
        self.report.steps.append(step)
        logging.info("%-24s %s rows (%.2f%%)", name, step.rows_affected, step.pct)

    def _drop(self, trips: pd.DataFrame, mask: pd.Series, name: str) -> pd.DataFrame:
        self._audit(name, mask.sum(), len(trips))
        return trips.loc[~mask].copy()

    @staticmethod
    def _rename_time_columns(trips: pd.DataFrame) -> pd.DataFrame:
        return trips.rename(columns=RENAMES)

    def _drop_missing_end_coords(self, trips: pd.DataFrame) -> pd.DataFrame:
        mask = trips[["end_lat", "end_lng"]].isna().any(axis=1)
        return self._drop(trips, mask, "missing end coordinates")

    def _drop_zero_coords(self, trips: pd.DataFrame) -> pd.DataFrame:
        mask = trips[COORD_COLUMNS].eq(0).any(axis=1)
        return self._drop(trips, mask, "zero coordinates")

    def _drop_test_stations(self, trips: pd.DataFrame) -> pd.DataFrame:
        mask = pd.Series(False, index=trips.index)
        for col in STATION_COLUMNS:
            mask |= (
                trips[col]
                .astype("string")
                .str.contains(TEST_MARKER, case=False, regex=False, na=False)
                .astype(bool)
            )
        return self._drop(trips, mask, "test stations")

    def _assert_unique_ride_ids(self, trips: pd.DataFrame) -> None:
        duplicates = int(trips["ride_id"].duplicated().sum())
        self._audit("duplicate ride_id", duplicates, len(trips))
        if duplicates:
            raise DuplicateRideIdError(duplicates)

    def _fill_station_ids(self, trips: pd.DataFrame) -> pd.DataFrame:
        for id_col, _, lat_col, lng_col in ENDPOINTS:
            m = _is_blank(trips[id_col])
            self._audit(f"empty {id_col}", m.sum(), len(trips))
            # without both coordinates there is nothing to build an id from
            m &= trips[[lat_col, lng_col]].notna().all(axis=1)
            if not m.any():
                continue
            trips[id_col] = trips[id_col].astype(object)
            trips.loc[m, id_col] = (
                trips.loc[m, lat_col].map(str) + trips.loc[m, lng_col].map(str)
            )
        return trips

    def _fill_station_names(self, trips: pd.DataFrame) -> pd.DataFrame:
        for id_col, name_col, _, _ in ENDPOINTS:
            m = _is_blank(trips[name_col])
            self._audit(f"empty {name_col}", m.sum(), len(trips))
            if not m.any():
                continue
            trips[name_col] = trips[name_col].astype(object)
            trips.loc[m, name_col] = trips.loc[m, id_col]
        return trips

    def _drop_duration_outliers(self, trips: pd.DataFrame) -> pd.DataFrame:
        d = trips[DURATION]
        mask = ~((d > 0) & (d < MAX_DURATION_MINS))
        return self._drop(trips, mask, "duration outliers")
