from __future__ import annotations
import logging
from pathlib import Path

import pandas as pd

from bikeshare.models.trip import EXPORT_EXCLUDED

CLEANED_CSV = "trips_cleaned.csv"
SAMPLE_CSV = "trips_sample.csv"


def export_trips(trips: pd.DataFrame, out_csv: Path) -> Path:
    """Write *trips* to CSV, leaving out derived-only columns such as ``duration_mins``."""
    out_csv = Path(out_csv)
    out_csv.parent.mkdir(parents=True, exist_ok=True)
    trips.drop(columns=EXPORT_EXCLUDED, errors="ignore").to_csv(out_csv, index=False)
    logging.info("Wrote %s rows → %s", len(trips), out_csv)
    return out_csv


def export_tables(tables: dict[str, pd.DataFrame], out_dir: Path) -> list[Path]:
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    paths = []
    for name, table in tables.items():
        path = out_dir / f"{name}.csv"
        table.to_csv(path, index=False)
        paths.append(path)
    return paths


def export_report(
    cleaned: pd.DataFrame | None,
    sample: pd.DataFrame,
    out_dir: Path,
) -> dict[str, Path]:
    out_dir = Path(out_dir)
    written = {"sample": export_trips(sample, out_dir / SAMPLE_CSV)}
    if cleaned is not None:
        written["cleaned"] = export_trips(cleaned, out_dir / CLEANED_CSV)
    return written
