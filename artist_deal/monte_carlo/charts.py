"""
PURPOSE: Shape a simulation ensemble into chart datasets.

Produces plain data for two charts: a histogram of profit/loss outcomes and a
down-sampled ROI vs streams scatter. Rendering is left to the caller.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple

import numpy as np

from artist_deal.monte_carlo.config import HISTOGRAM_BIN_COUNT, SCATTER_TARGET_POINTS
from artist_deal.monte_carlo.outputs import format_currency
from artist_deal.monte_carlo.simulation import TrialOutcome


@dataclass
class HistogramData:
    """Profit histogram with equal-width bins between the min and max profit.

    Attributes:
        midpoints (list): Centre value of each bin.
        counts (list): Number of trials per bin.
        labels (list): Currency-formatted midpoints.
        is_profit (list): True where the bin's lower edge is >= 0.
        bin_size (float): Width of each bin.
    """
    midpoints: List[float]
    counts: List[int]
    labels: List[str]
    is_profit: List[bool]
    bin_size: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "midpoints": self.midpoints,
            "counts": self.counts,
            "labels": self.labels,
            "is_profit": self.is_profit,
            "bin_size": self.bin_size,
        }


def build_profit_histogram(
    ensemble: Sequence[TrialOutcome],
    bin_count: int = HISTOGRAM_BIN_COUNT,
) -> HistogramData:
    """
    Bin trial profits into `bin_count` equal-width bins.

    The maximum profit lands in the last bin. When every trial has the same
    profit the range is zero and all trials are counted in the first bin.

    Raises:
        ValueError: If the ensemble is empty or bin_count < 1.
    """
    if len(ensemble) == 0:
        raise ValueError("ensemble must contain at least one trial")
    if bin_count < 1:
        raise ValueError(f"bin_count must be >= 1, got {bin_count}")

    profits = np.array([outcome.profit for outcome in ensemble], dtype=float)
    low = float(profits.min())
    high = float(profits.max())
    bin_size = (high - low) / bin_count

    if bin_size > 0:
        indices = np.minimum(np.floor((profits - low) / bin_size), bin_count - 1).astype(int)
    else:
        indices = np.zeros(len(profits), dtype=int)
    counts = np.bincount(indices, minlength=bin_count)

    lower_edges = low + np.arange(bin_count) * bin_size
    midpoints = lower_edges + bin_size / 2

    return HistogramData(
        midpoints=[float(m) for m in midpoints],
        counts=[int(c) for c in counts],
        labels=[format_currency(m) for m in midpoints],
        is_profit=[bool(edge >= 0) for edge in lower_edges],
        bin_size=bin_size,
    )


def build_roi_scatter(
    ensemble: Sequence[TrialOutcome],
    target_points: int = SCATTER_TARGET_POINTS,
) -> List[Tuple[float, float]]:
    """
    Sample (streams, roi) pairs, taking every k-th trial with k = max(1, n // target_points).

    Raises:
        ValueError: If the ensemble is empty or target_points < 1.
    """
    if len(ensemble) == 0:
        raise ValueError("ensemble must contain at least one trial")
    if target_points < 1:
        raise ValueError(f"target_points must be >= 1, got {target_points}")

    step = max(1, len(ensemble) // target_points)
    return [
        (outcome.streams, outcome.roi)
        for i, outcome in enumerate(ensemble)
        if i % step == 0
    ]
