from pathlib import Path

import requests
from tqdm import tqdm

from bikeshare.divvy.constants import ARCHIVE_NAME, TIMEOUT


def monthly_archive_names(year: int) -> list[str]:
    return [ARCHIVE_NAME.format(year=year, month=m) for m in range(1, 13)]


def stream_download(url: str, dest: Path, session: requests.Session) -> Path | None:
    """Download ``url`` to ``dest`` via a ``.part`` file; ``None`` if already present."""
    if dest.exists():
        return None
    dest.parent.mkdir(parents=True, exist_ok=True)
    tmp = dest.with_suffix(".part")
    with session.get(url, stream=True, timeout=TIMEOUT) as r:
        r.raise_for_status()
        total = int(r.headers.get("content-length", 0))
        with open(tmp, "wb") as f, tqdm(total=total, unit="B", unit_scale=True, desc=dest.name) as bar:
            for chunk in r.iter_content(1 << 15):
                f.write(chunk)
                bar.update(len(chunk))
    tmp.rename(dest)
    return dest


def pct(part: int, whole: int) -> float:
    return round(100.0 * part / whole, 2) if whole else 0.0
