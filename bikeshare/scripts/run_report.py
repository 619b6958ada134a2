"""
run_report.py  –  Yearly member vs. casual ridership report.

USAGE examples
--------------
# download the twelve monthly archives of 2023 into ./data/raw
bikeshare-report fetch --year 2023 --dir ./data/raw

# clean, sample, analyze and export
bikeshare-report run --data-dir ./data/raw --output-dir ./data/processed

# reuse a distance/bearing table computed elsewhere
bikeshare-report run --geometry-csv ./data/geometry.csv
"""
from __future__ import annotations
import argparse
import dataclasses
import logging
import sys
from pathlib import Path

import requests

from bikeshare.scraper.trip.scraper import TripFetcher
from core.config import Settings
from core.exceptions import TripPipelineError
from usecases.report import run_pipeline


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="bikeshare-report")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = ap.add_subparsers(dest="command", required=True)

    fetch = sub.add_parser("fetch", help="download monthly trip archives")
    fetch.add_argument("-y", "--year", type=int, help="year to download")
    fetch.add_argument("-d", "--dir", help="destination directory")
    fetch.add_argument("--url", help="base URL of the trip-data bucket")

    run = sub.add_parser("run", help="build the report")
    run.add_argument("--data-dir", help="directory holding the monthly CSVs")
    run.add_argument("--output-dir", help="where exports, tables and charts go")
    run.add_argument("--pattern", help="glob for monthly files")
    run.add_argument("--sample-frac", type=float, help="sample proportion in (0, 1]")
    run.add_argument("--seed", type=int, help="random seed for sampling")
    run.add_argument("--geometry-csv", help="precomputed ride_id,distance_miles,direction table")
    run.add_argument("--no-charts", action="store_true", help="skip chart rendering")
    run.add_argument("--skip-cleaned-export", action="store_true",
                     help="only export the sample")
    return ap


def _apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    overrides = {}
    for attr, value in [
        ("data_dir", getattr(args, "data_dir", None) or getattr(args, "dir", None)),
        ("output_dir", getattr(args, "output_dir", None)),
        ("file_pattern", getattr(args, "pattern", None)),
        ("sample_frac", getattr(args, "sample_frac", None)),
        ("random_seed", getattr(args, "seed", None)),
        ("download_url", getattr(args, "url", None)),
        ("year", getattr(args, "year", None)),
    ]:
        if value is None:
            continue
        overrides[attr] = Path(value) if attr.endswith("_dir") else value
    if "sample_frac" in overrides and not 0 < overrides["sample_frac"] <= 1:
        raise SystemExit(f"--sample-frac must be in (0, 1], got {overrides['sample_frac']}")
    return dataclasses.replace(settings, **overrides)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        settings = _apply_overrides(Settings.from_env(), args)
        if args.command == "fetch":
            TripFetcher(settings.data_dir, settings.download_url, settings.year).run_once()
            return 0

        result = run_pipeline(
            settings,
            geometry_csv=Path(args.geometry_csv) if args.geometry_csv else None,
            with_charts=not args.no_charts,
            export_cleaned=not args.skip_cleaned_export,
        )
    except TripPipelineError as exc:
        logging.error("%s: %s", exc.code.value, exc.message)
        return 1
    except requests.RequestException as exc:
        logging.error("download failed: %s", exc)
        return 1

    for name, path in result.written.items():
        print(f"✓ {name:<8} → {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
