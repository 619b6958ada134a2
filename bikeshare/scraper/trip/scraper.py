from __future__ import annotations
import logging
import shutil
import zipfile
from pathlib import Path

import requests
from retry_requests import retry

from bikeshare.divvy.constants import DATA_BUCKET_URL, HEADERS
from bikeshare.divvy.helpers import monthly_archive_names, stream_download


def extract_trip_csvs(zip_path: Path, dest_dir: Path) -> list[Path]:
    """
    Extract every trip CSV inside *zip_path* into *dest_dir*.

    macOS artefacts are ignored and files already present are left alone.
    """
    written: list[Path] = []
    with zipfile.ZipFile(zip_path) as zf:
        for member in zf.infolist():
            if member.is_dir():
                continue
            name = Path(member.filename).name
            if member.filename.startswith("__MACOSX/") or name.startswith("._"):
                continue
            if not name.lower().endswith(".csv"):
                continue

            target = dest_dir / name
            if target.exists():
                logging.debug("%s already extracted", name)
                continue
            with zf.open(member) as src, open(target, "wb") as out:
                shutil.copyfileobj(src, out)
            written.append(target)
    return written


class TripFetcher:
    """
    Download the twelve monthly trip archives of *year* from the public
    bucket and extract their CSVs into *dest_dir*.

    - Already-downloaded archives are not fetched again (idempotent).
    - Archives are kept next to the CSVs so reruns stay offline.
    """

    def __init__(self, dest_dir: Path, base_url: str = DATA_BUCKET_URL, year: int = 2023):
        self.dest_dir = Path(dest_dir)
        self.base_url = base_url.rstrip("/")
        self.year = year
        self.dest_dir.mkdir(parents=True, exist_ok=True)

    def run_once(self, session: requests.Session | None = None) -> list[Path]:
        own_session = session is None
        if own_session:
            session = retry(requests.Session(), retries=3, backoff_factor=0.5)
            session.headers.update(HEADERS)

        extracted: list[Path] = []
        downloaded, present = 0, 0
        try:
            for name in monthly_archive_names(self.year):
                zip_path = self.dest_dir / name
                if stream_download(f"{self.base_url}/{name}", zip_path, session):
                    downloaded += 1
                else:
                    present += 1
                extracted.extend(extract_trip_csvs(zip_path, self.dest_dir))
        finally:
            if own_session:
                session.close()

        logging.info(
            "Trip archives → new: %s, already present: %s, csv extracted: %s",
            downloaded, present, len(extracted),
        )
        return extracted
