from pathlib import Path

import pandas as pd
import pytest

from bikeshare.models.trip import RAW_COLUMNS
from bikeshare.scraper.trip.loader import find_monthly_files, load_monthly_trips
from core.exceptions import NoInputFilesError, SchemaMismatchError

HEADER = ",".join(RAW_COLUMNS)


def month_csv(tmp_path: Path, name: str, rows: list[str], header: str = HEADER) -> Path:
    path = tmp_path / name
    path.write_text("\n".join([header, *rows]) + "\n")
    return path


def row(ride_id: str, month: int = 1) -> str:
    return (
        f"{ride_id},electric_bike,2023-{month:02d}-10 07:00:00,2023-{month:02d}-10 07:12:00,"
        "Clark St & Elm St,TA1307000039,,,41.90297,-87.63128,41.91,-87.63,casual"
    )


def test_concatenates_monthly_files_in_order(tmp_path):
    month_csv(tmp_path, "202302-divvy-tripdata.csv", [row("B1", 2)])
    month_csv(tmp_path, "202301-divvy-tripdata.csv", [row("A1"), row("A2")])

    trips = load_monthly_trips(tmp_path, "*-divvy-tripdata.csv")

    assert list(trips.columns) == RAW_COLUMNS
    assert trips["ride_id"].tolist() == ["A1", "A2", "B1"]
    assert trips.index.tolist() == [0, 1, 2]
    assert pd.api.types.is_datetime64_any_dtype(trips["started_at"])
    # empty station labels arrive as nulls
    assert trips["end_station_id"].isna().all()


def test_ignores_files_outside_the_pattern(tmp_path):
    month_csv(tmp_path, "202301-divvy-tripdata.csv", [row("A1")])
    month_csv(tmp_path, "stations.csv", ["whatever"], header="x")
    (tmp_path / "._202302-divvy-tripdata.csv").write_text("junk")

    files = find_monthly_files(tmp_path, "*-divvy-tripdata.csv")
    assert [f.name for f in files] == ["202301-divvy-tripdata.csv"]


def test_no_files_is_fatal(tmp_path):
    with pytest.raises(NoInputFilesError):
        load_monthly_trips(tmp_path, "*-divvy-tripdata.csv")


def test_missing_column_fails_fast(tmp_path):
    month_csv(tmp_path, "202301-divvy-tripdata.csv", [row("A1")])
    short_header = ",".join(RAW_COLUMNS[:-1])
    short_row = row("B1", 2).rsplit(",", 1)[0]
    month_csv(tmp_path, "202302-divvy-tripdata.csv", [short_row], header=short_header)

    with pytest.raises(SchemaMismatchError) as exc:
        load_monthly_trips(tmp_path, "*-divvy-tripdata.csv")

    assert exc.value.file_name == "202302-divvy-tripdata.csv"
    assert exc.value.missing == ["member_casual"]


def test_reordered_columns_fail_fast(tmp_path):
    swapped = RAW_COLUMNS.copy()
    swapped[0], swapped[1] = swapped[1], swapped[0]
    month_csv(tmp_path, "202301-divvy-tripdata.csv", [], header=",".join(swapped))

    with pytest.raises(SchemaMismatchError):
        load_monthly_trips(tmp_path, "*-divvy-tripdata.csv")
