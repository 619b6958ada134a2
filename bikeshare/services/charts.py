from __future__ import annotations
import logging
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.ticker import PercentFormatter  # noqa: E402
import pandas as pd  # noqa: E402
import seaborn as sns  # noqa: E402

from bikeshare.models.trip import DAY_TYPES, DISTANCE, DURATION, MEMBER_TYPES, TRIP_TYPES  # noqa: E402
from bikeshare.services.analysis import GROUP, share_by  # noqa: E402

sns.set_theme(style="whitegrid")
PALETTE = {"member": "#1f77b4", "casual": "#ff7f0e"}


def _save(fig, out_dir: Path, name: str) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / f"{name}.png"
    fig.tight_layout()
    fig.savefig(path, dpi=120)
    plt.close(fig)
    logging.debug("Chart written: %s", path.name)
    return path


def plot_duration_histogram(trips: pd.DataFrame, out_dir: Path, max_mins: float = 60) -> Path:
    data = trips.loc[trips[DURATION] <= max_mins]
    fig, ax = plt.subplots(figsize=(9, 5))
    sns.histplot(
        data=data, x=DURATION, hue=GROUP, hue_order=MEMBER_TYPES,
        palette=PALETTE, bins=60, element="step", stat="density", common_norm=False, ax=ax,
    )
    ax.set_xlabel("Trip duration (minutes)")
    ax.set_title(f"Trip duration up to {max_mins:.0f} minutes")
    return _save(fig, out_dir, "duration_histogram")


def plot_distance_boxplot(trips: pd.DataFrame, out_dir: Path) -> Path:
    data = trips.dropna(subset=[DISTANCE])
    fig, ax = plt.subplots(figsize=(7, 5))
    sns.boxplot(
        data=data, x=GROUP, y=DISTANCE, order=MEMBER_TYPES,
        hue=GROUP, hue_order=MEMBER_TYPES, palette=PALETTE, showfliers=False, ax=ax,
    )
    ax.set_xlabel("")
    ax.set_ylabel("Distance (miles)")
    ax.set_title("One-way trip distance")
    return _save(fig, out_dir, "distance_boxplot")


def plot_share_bar(trips: pd.DataFrame, column: str, out_dir: Path, order=None) -> Path:
    shares = share_by(trips, column)
    fig, ax = plt.subplots(figsize=(10, 5))
    sns.barplot(
        data=shares, x=column, y="share", hue=GROUP, hue_order=MEMBER_TYPES,
        order=order, palette=PALETTE, ax=ax,
    )
    ax.set_ylabel("Share of group's trips")
    ax.set_xlabel(column.replace("_", " "))
    ax.yaxis.set_major_formatter(PercentFormatter(1.0))
    return _save(fig, out_dir, f"share_by_{column}")


def render_charts(trips: pd.DataFrame, out_dir: Path) -> list[Path]:
    out_dir = Path(out_dir)
    paths = [plot_duration_histogram(trips, out_dir)]
    if DISTANCE in trips.columns and trips[DISTANCE].notna().any():
        paths.append(plot_distance_boxplot(trips, out_dir))
    paths.append(plot_share_bar(trips, "hour_start", out_dir, order=list(range(24))))
    paths.append(plot_share_bar(trips, "month_start", out_dir, order=list(range(1, 13))))
    paths.append(plot_share_bar(trips, "day_type", out_dir, order=DAY_TYPES))
    paths.append(plot_share_bar(trips, "trip_type", out_dir, order=TRIP_TYPES))
    paths.append(plot_share_bar(trips, "rideable_type", out_dir))
    logging.info("Rendered %s charts into %s", len(paths), out_dir)
    return paths
