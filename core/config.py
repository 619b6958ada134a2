"""Runtime settings read from the environment (and an optional ``.env``)."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from bikeshare.divvy.constants import (
    DATA_BUCKET_URL,
    DEFAULT_YEAR,
    RANDOM_SEED,
    SAMPLE_FRAC,
    TRIP_FILE_GLOB,
)
from core.exceptions import ConfigError


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    output_dir: Path
    file_pattern: str
    sample_frac: float
    random_seed: int
    download_url: str
    year: int

    @classmethod
    def from_env(cls, *, dotenv: bool = True) -> "Settings":
        """
        Build settings from ``BIKESHARE_*`` variables.

        Raises ``ConfigError`` when a numeric variable cannot be parsed or the
        sample fraction is outside ``(0, 1]``.
        """
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))

        sample_frac = _parse(float, "BIKESHARE_SAMPLE_FRAC", SAMPLE_FRAC)
        if not 0 < sample_frac <= 1:
            raise ConfigError(
                f"BIKESHARE_SAMPLE_FRAC must be in (0, 1], got {sample_frac}"
            )

        return cls(
            data_dir=Path(os.getenv("BIKESHARE_DATA_DIR", "data/raw")).expanduser(),
            output_dir=Path(os.getenv("BIKESHARE_OUTPUT_DIR", "data/processed")).expanduser(),
            file_pattern=os.getenv("BIKESHARE_FILE_PATTERN", TRIP_FILE_GLOB),
            sample_frac=sample_frac,
            random_seed=_parse(int, "BIKESHARE_RANDOM_SEED", RANDOM_SEED),
            download_url=os.getenv("BIKESHARE_DOWNLOAD_URL", DATA_BUCKET_URL),
            year=_parse(int, "BIKESHARE_YEAR", DEFAULT_YEAR),
        )


def _parse(kind, name: str, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return kind(raw)
    except ValueError as exc:
        raise ConfigError(
            f"Invalid {name} value: expected {kind.__name__}, got '{raw}'"
        ) from exc
