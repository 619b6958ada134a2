from __future__ import annotations
import logging
from pathlib import Path

import pandas as pd

from bikeshare.models.trip import RAW_COLUMNS, RAW_TIME_COLUMNS
from core.exceptions import NoInputFilesError, SchemaMismatchError

ENCODING = "utf-8"

__all__ = ["find_monthly_files", "read_monthly_file", "load_monthly_trips"]


def find_monthly_files(data_dir: Path, pattern: str) -> list[Path]:
    files = sorted(p for p in Path(data_dir).glob(pattern) if not p.name.startswith("._"))
    if not files:
        raise NoInputFilesError(data_dir, pattern)
    return files


def _check_schema(df: pd.DataFrame, file_name: str) -> None:
    columns = list(df.columns)
    if columns == RAW_COLUMNS:
        return
    missing = [c for c in RAW_COLUMNS if c not in columns]
    unexpected = [c for c in columns if c not in RAW_COLUMNS]
    if missing or unexpected:
        raise SchemaMismatchError(file_name, missing, unexpected)
    # same names, different order: positional concat would misalign
    raise SchemaMismatchError(file_name, [], [f"order: {columns}"])


def read_monthly_file(path: Path) -> pd.DataFrame:
    df = pd.read_csv(
        path,
        encoding=ENCODING,
        dtype={"ride_id": str, "start_station_id": str, "end_station_id": str},
        low_memory=False,
    )
    df.columns = df.columns.str.strip()
    _check_schema(df, path.name)
    for col in RAW_TIME_COLUMNS:
        df[col] = pd.to_datetime(df[col], errors="raise")
    return df


def load_monthly_trips(data_dir: Path, pattern: str) -> pd.DataFrame:
    """
    Read every monthly file matching *pattern* and stack them into one table.

    Every file must carry the 13-column trip schema in file order; the first
    file that does not aborts the run with ``SchemaMismatchError``.
    """
    frames = []
    for path in find_monthly_files(data_dir, pattern):
        df = read_monthly_file(path)
        logging.debug("Read %s rows from %s", len(df), path.name)
        frames.append(df)

    trips = pd.concat(frames, ignore_index=True)
    logging.info("Loaded %s trips from %s file(s)", len(trips), len(frames))
    return trips
