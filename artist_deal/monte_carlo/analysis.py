"""
PURPOSE: Percentile-based risk metrics from a Monte Carlo outcome ensemble.

The ensemble is ranked by profit and read at fixed fractions: the median
trial, the 5th percentile (Value-at-Risk) and the 99th percentile (upside).
The default estimator indexes the sorted ensemble at floor(n * f) without
interpolation. Linear interpolation is available but changes the reported
profit percentiles, so it is opt-in.

SRP/DRY: Single responsibility = statistics only.
         No simulation, no formatting, no chart shaping.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Optional, Sequence

import numpy as np

from artist_deal.monte_carlo.config import ROUND_CURRENCY, ROUND_PERCENT, get_percentile_levels
from artist_deal.monte_carlo.simulation import TrialOutcome

PercentileMethod = Literal["floor", "linear"]


@dataclass(frozen=True)
class RiskMetrics:
    """Risk/return summary of one simulation run.

    Attributes:
        median_revenue (float): Revenue of the median trial (ranked by profit).
        median_roi (float): ROI (%) of the median trial.
        median_profit (float): Profit at the 50th percentile.
        break_even_probability (float): Percentage of trials with positive profit (0-100).
        loss_probability (float): 100 - break_even_probability.
        var95 (float): 5th percentile profit (Value-at-Risk).
        p99_profit (float): 99th percentile profit (upside tail).
        worst_case_loss (float): abs(var95), the minimum loss in the worst 5% of trials.
        max_profit (float): Best profit across all trials.
        total_investment (float): Advance + marketing + content budget.
        num_trials (int): Ensemble size.
    """
    median_revenue: float
    median_roi: float
    median_profit: float
    break_even_probability: float
    loss_probability: float
    var95: float
    p99_profit: float
    worst_case_loss: float
    max_profit: float
    total_investment: float
    num_trials: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert metrics to dictionary for JSON serialization."""
        return {
            "median_revenue": round(self.median_revenue, ROUND_CURRENCY),
            "median_roi": round(self.median_roi, ROUND_PERCENT),
            "median_profit": round(self.median_profit, ROUND_CURRENCY),
            "break_even_probability": round(self.break_even_probability, ROUND_PERCENT),
            "loss_probability": round(self.loss_probability, ROUND_PERCENT),
            "var95": round(self.var95, ROUND_CURRENCY),
            "p99_profit": round(self.p99_profit, ROUND_CURRENCY),
            "worst_case_loss": round(self.worst_case_loss, ROUND_CURRENCY),
            "max_profit": round(self.max_profit, ROUND_CURRENCY),
            "total_investment": round(self.total_investment, ROUND_CURRENCY),
            "num_trials": self.num_trials,
        }


def percentile_index(n: int, fraction: float) -> int:
    """Index of the floor(n * fraction) element, clamped to [0, n - 1]."""
    if n <= 0:
        raise ValueError("cannot take a percentile of an empty ensemble")
    if not 0 <= fraction <= 1:
        raise ValueError(f"fraction must be in [0, 1], got {fraction}")
    return min(max(int(math.floor(n * fraction)), 0), n - 1)


def percentile_value(sorted_outcomes: Sequence[TrialOutcome], fraction: float) -> TrialOutcome:
    """Trial at the given fraction of an ensemble already sorted by profit."""
    return sorted_outcomes[percentile_index(len(sorted_outcomes), fraction)]


def sort_by_profit(ensemble: Sequence[TrialOutcome]) -> List[TrialOutcome]:
    """Return a new list ordered by profit ascending; the input is left untouched."""
    return sorted(ensemble, key=lambda outcome: outcome.profit)


class RiskAnalyzer:
    """
    Computes RiskMetrics from a simulation ensemble.

    Args:
        percentile_method: "floor" (default, non-interpolated) or "linear"
                           (numpy interpolation for the profit percentiles).
        percentile_levels: Fractions keyed "median", "var" and "upside";
                           defaults to config.get_percentile_levels().
    """

    def __init__(
        self,
        percentile_method: PercentileMethod = "floor",
        percentile_levels: Optional[Dict[str, float]] = None,
    ):
        if percentile_method not in ("floor", "linear"):
            raise ValueError(
                f"Unknown percentile_method: {percentile_method}. Must be 'floor' or 'linear'"
            )
        self.percentile_method = percentile_method
        self.percentile_levels = dict(get_percentile_levels())
        if percentile_levels:
            unknown = set(percentile_levels) - set(self.percentile_levels)
            if unknown:
                raise ValueError(f"Unknown percentile levels: {sorted(unknown)}")
            self.percentile_levels.update(percentile_levels)

    def analyze(self, ensemble: Sequence[TrialOutcome], total_investment: float) -> RiskMetrics:
        """
        Compute risk metrics for an ensemble.

        Args:
            ensemble: Trial outcomes from MonteCarloSimulation.run().
            total_investment: Advance + marketing + content budget of the deal.

        Returns:
            Fresh RiskMetrics; the ensemble itself is not reordered.

        Raises:
            ValueError: If the ensemble is empty.
        """
        if len(ensemble) == 0:
            raise ValueError("ensemble must contain at least one trial")

        ranked = sort_by_profit(ensemble)
        n = len(ranked)

        median = percentile_value(ranked, self.percentile_levels["median"])
        median_profit = self._profit_at(ranked, self.percentile_levels["median"])
        var95 = self._profit_at(ranked, self.percentile_levels["var"])
        p99_profit = self._profit_at(ranked, self.percentile_levels["upside"])

        # Break even: count how many trials have profit > 0
        break_even_count = sum(1 for outcome in ranked if outcome.profit > 0)
        break_even_probability = break_even_count / n * 100

        return RiskMetrics(
            median_revenue=median.revenue,
            median_roi=median.roi,
            median_profit=median_profit,
            break_even_probability=break_even_probability,
            loss_probability=100 - break_even_probability,
            var95=var95,
            p99_profit=p99_profit,
            worst_case_loss=abs(var95),
            max_profit=ranked[-1].profit,
            total_investment=total_investment,
            num_trials=n,
        )

    def _profit_at(self, ranked: Sequence[TrialOutcome], fraction: float) -> float:
        if self.percentile_method == "linear":
            profits = np.fromiter((outcome.profit for outcome in ranked), dtype=float, count=len(ranked))
            return float(np.percentile(profits, fraction * 100))
        return percentile_value(ranked, fraction).profit


def analyze_results(ensemble: Sequence[TrialOutcome], total_investment: float) -> RiskMetrics:
    """Module-level wrapper using the default floor-index estimator."""
    return RiskAnalyzer().analyze(ensemble, total_investment)
