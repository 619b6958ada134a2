from __future__ import annotations
import logging
from dataclasses import dataclass, field
from pathlib import Path

import pandas as pd

from bikeshare.scraper.trip.cleaner import CleaningReport, TripCleaner
from bikeshare.scraper.trip.loader import load_monthly_trips
from bikeshare.services.analysis import summarize
from bikeshare.services.charts import render_charts
from bikeshare.services.derive import derive_fields
from bikeshare.services.export import export_report, export_tables
from bikeshare.services.geometry import (
    augment_with_geometry,
    compute_trip_geometry,
    load_trip_geometry,
)
from bikeshare.services.sampling import sample_trips
from core.config import Settings


@dataclass
class ReportResult:
    cleaned: pd.DataFrame
    sample: pd.DataFrame
    cleaning: CleaningReport
    tables: dict[str, pd.DataFrame] = field(default_factory=dict)
    written: dict[str, Path] = field(default_factory=dict)
    charts: list[Path] = field(default_factory=list)


def run_pipeline(
    settings: Settings,
    geometry_csv: Path | None = None,
    with_charts: bool = True,
    export_cleaned: bool = True,
) -> ReportResult:
    """
    Ingest → clean → sample → derive → augment → analyze → export.

    With *geometry_csv* the distance/bearing table is read from that file
    instead of being computed here.
    """
    logging.info("Report run started (data_dir=%s)", settings.data_dir)

    trips = load_monthly_trips(settings.data_dir, settings.file_pattern)

    cleaner = TripCleaner()
    cleaned = cleaner.clean(trips)
    del trips

    sample = sample_trips(cleaned, frac=settings.sample_frac, seed=settings.random_seed)
    sample = derive_fields(sample)

    if geometry_csv is not None:
        geometry = load_trip_geometry(geometry_csv)
    else:
        geometry = compute_trip_geometry(sample)
    sample = augment_with_geometry(sample, geometry)

    tables = summarize(sample)
    tables["cleaning_report"] = cleaner.report.to_frame()

    out_dir = settings.output_dir
    written = export_report(cleaned if export_cleaned else None, sample, out_dir)
    export_tables(tables, out_dir / "tables")

    charts: list[Path] = []
    if with_charts:
        charts = render_charts(sample, out_dir / "charts")

    logging.info("Report run finished")
    return ReportResult(
        cleaned=cleaned,
        sample=sample,
        cleaning=cleaner.report,
        tables=tables,
        written=written,
        charts=charts,
    )
