"""
PURPOSE: Compare how sensitive a deal's outcome is to the genre profile.

Runs the same deal under several genre profiles and ranks the genres by the
dispersion (standard deviation) of profit. A Levene test between the most and
least dispersed genres tells whether the difference in spread is significant
or just sampling noise.

SRP/DRY: Single responsibility = genre sensitivity only.
         Simulation is delegated to MonteCarloSimulation, metrics to RiskAnalyzer.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

import numpy as np
from scipy import stats

from artist_deal.monte_carlo.analysis import RiskAnalyzer
from artist_deal.monte_carlo.genres import GENRE_KEYS, resolve_genre_key
from artist_deal.monte_carlo.inputs import DealInputs
from artist_deal.monte_carlo.simulation import MonteCarloSimulation

logger = logging.getLogger(__name__)


@dataclass
class GenreSensitivity:
    """Outcome spread of a deal under one genre.

    Attributes:
        genre (str): Genre key.
        profit_std (float): Sample standard deviation of profit.
        median_profit (float): Median profit.
        break_even_probability (float): Percentage of profitable trials.
        rank (int): Rank order (1 = most dispersed).
    """
    genre: str
    profit_std: float
    median_profit: float
    break_even_probability: float
    rank: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "genre": self.genre,
            "profit_std": round(self.profit_std, 2),
            "median_profit": round(self.median_profit, 2),
            "break_even_probability": round(self.break_even_probability, 1),
            "rank": self.rank,
        }


@dataclass
class GenreComparison:
    """Ranked genre sensitivities plus the Levene p-value of the extremes."""
    drivers: List[GenreSensitivity] = field(default_factory=list)
    levene_pvalue: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "drivers": [d.to_dict() for d in self.drivers],
            "levene_pvalue": self.levene_pvalue,
        }


class GenreSensitivityAnalyzer:
    """
    Runs a deal once per genre and ranks genres by profit dispersion.

    Every genre is simulated with the same seed, so differences come from the
    profiles and not from different random streams.
    """

    def __init__(self, random_seed: Optional[int] = None, num_workers: int = 1):
        self.random_seed = random_seed
        self.num_workers = num_workers
        self.analyzer = RiskAnalyzer()

    def analyze(self, inputs: DealInputs, genres: Iterable[str] = GENRE_KEYS) -> GenreComparison:
        """
        Compute per-genre profit dispersion for a deal.

        Args:
            inputs: Validated deal parameters.
            genres: Genre keys to compare; unknown keys collapse into "custom".

        Returns:
            GenreComparison with drivers sorted by profit_std descending.

        Raises:
            ValueError: If no genres are given.
        """
        keys = []
        for genre in genres:
            key = resolve_genre_key(genre)
            if key not in keys:
                keys.append(key)
        if not keys:
            raise ValueError("genres cannot be empty")

        profits_by_genre = {}
        rows = []
        for key in keys:
            simulation = MonteCarloSimulation(
                random_seed=self.random_seed, num_workers=self.num_workers
            )
            ensemble = simulation.run(inputs, key)
            profits = np.array([outcome.profit for outcome in ensemble], dtype=float)
            metrics = self.analyzer.analyze(ensemble, inputs.total_investment)
            profits_by_genre[key] = profits
            rows.append((key, self._std(profits), metrics))

        rows.sort(key=lambda row: row[1], reverse=True)
        drivers = [
            GenreSensitivity(
                genre=key,
                profit_std=profit_std,
                median_profit=metrics.median_profit,
                break_even_probability=metrics.break_even_probability,
                rank=rank,
            )
            for rank, (key, profit_std, metrics) in enumerate(rows, 1)
        ]

        levene_pvalue = None
        if len(drivers) >= 2 and inputs.iterations >= 2:
            most = profits_by_genre[drivers[0].genre]
            least = profits_by_genre[drivers[-1].genre]
            levene_pvalue = float(stats.levene(most, least).pvalue)
            logger.info(
                "Genre dispersion: %s (std %.2f) vs %s (std %.2f), Levene p=%.4g",
                drivers[0].genre,
                drivers[0].profit_std,
                drivers[-1].genre,
                drivers[-1].profit_std,
                levene_pvalue,
            )

        return GenreComparison(drivers=drivers, levene_pvalue=levene_pvalue)

    @staticmethod
    def _std(profits: np.ndarray) -> float:
        if len(profits) < 2:
            return 0.0
        return float(np.std(profits, ddof=1))

    @staticmethod
    def to_dataframe_compatible(drivers: List[GenreSensitivity]) -> Dict[str, List]:
        """
        Convert genre sensitivities to a format compatible with pandas/CSV.

        Returns:
            Dictionary with keys as column names, values as lists (one per row).
        """
        return {
            "rank": [d.rank for d in drivers],
            "genre": [d.genre for d in drivers],
            "profit_std": [round(d.profit_std, 2) for d in drivers],
            "median_profit": [round(d.median_profit, 2) for d in drivers],
            "break_even_probability": [round(d.break_even_probability, 1) for d in drivers],
        }


def compare_genres(
    inputs: DealInputs,
    genres: Iterable[str] = GENRE_KEYS,
    random_seed: Optional[int] = None,
) -> GenreComparison:
    """Module-level wrapper for GenreSensitivityAnalyzer.analyze()."""
    return GenreSensitivityAnalyzer(random_seed=random_seed).analyze(inputs, genres)
