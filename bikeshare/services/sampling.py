from __future__ import annotations
import logging

import pandas as pd

from bikeshare.divvy.constants import RANDOM_SEED, SAMPLE_FRAC


def sample_trips(
    trips: pd.DataFrame,
    frac: float = SAMPLE_FRAC,
    seed: int = RANDOM_SEED,
) -> pd.DataFrame:
    """Uniform sample without replacement; same input, frac and seed give the same rows."""
    if not 0 < frac <= 1:
        raise ValueError(f"frac must be in (0, 1], got {frac}")

    sample = trips.sample(frac=frac, replace=False, random_state=seed)
    logging.info("Sampled %s of %s trips (frac=%s, seed=%s)", len(sample), len(trips), frac, seed)
    return sample.reset_index(drop=True)
