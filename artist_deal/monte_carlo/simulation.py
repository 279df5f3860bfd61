"""
PURPOSE: Core Monte Carlo simulation engine for artist deal outcomes.

Runs N independent stochastic trials of an artist's streaming performance and
returns the raw outcome ensemble (revenue, profit, ROI, streams per trial).

SINGLE RESPONSIBILITY:
- Simulate one trial from deal inputs and a genre profile
- Repeat it N times, optionally across workers with independent generators
- Return raw outcomes (no statistics, no formatting)

CONSTRAINTS:
- Does NOT handle file I/O or output formatting
- Does NOT modify the deal inputs; reads only
- Genre is passed explicitly per run; there is no process-wide selection
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

import numpy as np

from artist_deal.monte_carlo.config import (
    ANCILLARY_RATE_MEAN,
    ANCILLARY_RATE_STD,
    AVG_REVENUE_PER_STREAM,
    DEFAULT_GENRE,
    FALLBACK_STREAMS_PER_FOLLOWER,
    MARKETING_EFFICIENCY_STD,
    ORGANIC_REACH_MEAN,
    ORGANIC_REACH_STD,
    RANDOM_SEED,
)
from artist_deal.monte_carlo.distributions import RandomVariateGenerator, UniformSource
from artist_deal.monte_carlo.genres import GenreProfile, lookup_genre, resolve_genre_key
from artist_deal.monte_carlo.inputs import DealInputs
from artist_deal.monte_carlo.risk_events import sample_viral_multiplier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrialOutcome:
    """Outcome of a single Monte Carlo trial.

    Attributes:
        revenue (float): Stream plus ancillary revenue, never negative.
        profit (float): Revenue minus total investment.
        roi (float): Profit as a percentage of total investment.
        streams (float): Simulated stream count, never negative.
        viral (bool): Whether the viral spike fired in this trial.
        viral_multiplier (float): Stream multiplier from the viral spike (1.0 if not viral).
    """
    revenue: float
    profit: float
    roi: float
    streams: float
    viral: bool = False
    viral_multiplier: float = 1.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def base_conversion_rate(social_followers: float, prev_streams: float) -> float:
    """Streams per follower from history, or the bootstrap constant for an unlisted artist."""
    if social_followers > 0:
        return prev_streams / social_followers
    return FALLBACK_STREAMS_PER_FOLLOWER


def simulate_trial(
    inputs: DealInputs,
    profile: GenreProfile,
    generator: RandomVariateGenerator,
    total_investment: Optional[float] = None,
) -> TrialOutcome:
    """
    Simulate one trial of the deal.

    Random draws happen in a fixed order: marketing efficiency, organic reach,
    performance multiplier, viral occurrence (plus viral multiplier if it
    fires), ancillary rate.

    Args:
        inputs: Validated deal parameters.
        profile: Genre profile to sample with.
        generator: Source of random variates.
        total_investment: Precomputed advance + marketing + content budget.

    Returns:
        TrialOutcome for this trial.

    Raises:
        ValueError: If the total investment is not positive.
    """
    if total_investment is None:
        total_investment = inputs.total_investment
    if total_investment <= 0:
        raise ValueError(f"total_investment must be positive, got {total_investment}")

    base_conversion = base_conversion_rate(inputs.social_followers, inputs.prev_streams)

    # 1. Reach volatility: marketing converts at a genre-specific efficiency
    marketing_reach = inputs.marketing * generator.normal(
        profile.marketing_efficiency, MARKETING_EFFICIENCY_STD
    )
    organic_reach = inputs.social_followers * generator.normal(
        ORGANIC_REACH_MEAN, ORGANIC_REACH_STD
    )
    total_reach = max(0.0, organic_reach + marketing_reach)

    # 2. Performance multiplier
    performance_multiplier = generator.log_normal(
        profile.multiplier_mean, profile.multiplier_sigma
    )

    # 3. Viral spike
    viral, viral_multiplier = sample_viral_multiplier(generator, profile.viral_probability)

    # 4. Streams
    streams = max(0.0, total_reach * base_conversion * performance_multiplier * viral_multiplier)

    # 5. Financials
    stream_revenue = streams * AVG_REVENUE_PER_STREAM
    ancillary_pct = max(0.0, generator.normal(ANCILLARY_RATE_MEAN, ANCILLARY_RATE_STD))
    total_revenue = stream_revenue + stream_revenue * ancillary_pct

    profit = total_revenue - total_investment
    roi = profit / total_investment * 100

    return TrialOutcome(
        revenue=total_revenue,
        profit=profit,
        roi=roi,
        streams=streams,
        viral=viral,
        viral_multiplier=viral_multiplier,
    )


class MonteCarloSimulation:
    """
    Monte Carlo simulation engine for artist deals.

    Each call to run() resolves the genre profile once, computes the total
    investment once, then simulates `inputs.iterations` independent trials.
    With num_workers > 1 the trials are split into chunks and every worker
    draws from its own generator spawned from a common SeedSequence.
    """

    def __init__(
        self,
        random_seed: Optional[int] = RANDOM_SEED,
        num_workers: int = 1,
        uniform_source: Optional[UniformSource] = None,
    ):
        """
        Initialize simulation engine.

        Args:
            random_seed: Seed for reproducibility (None = fresh entropy each run).
            num_workers: Number of worker threads; each gets an independent generator.
            uniform_source: Injected uniform source; forces single-worker execution.
        """
        if num_workers < 1:
            raise ValueError(f"num_workers must be >= 1, got {num_workers}")

        self.random_seed = random_seed
        self.num_workers = num_workers
        self.uniform_source = uniform_source

    def run(self, inputs: DealInputs, genre: Optional[str] = DEFAULT_GENRE) -> List[TrialOutcome]:
        """
        Execute the Monte Carlo simulation for a deal.

        Args:
            inputs: Validated deal parameters.
            genre: Genre key; unknown keys fall back to "custom".

        Returns:
            List of exactly `inputs.iterations` TrialOutcome values.

        Raises:
            ValueError: If iterations is not positive.
        """
        iterations = inputs.iterations
        if iterations <= 0:
            raise ValueError(f"iterations must be positive, got {iterations}")

        genre_key = resolve_genre_key(genre)
        profile = lookup_genre(genre_key)
        total_investment = inputs.total_investment

        logger.info(
            "Running %s trials for genre %s (total investment %.2f, workers %s)",
            iterations,
            genre_key,
            total_investment,
            self.num_workers,
        )
        start = time.perf_counter()

        if self.uniform_source is not None or self.num_workers == 1:
            generator = RandomVariateGenerator(
                uniform_source=self.uniform_source, random_state=self.random_seed
            )
            results = self._run_chunk(inputs, profile, generator, total_investment, iterations)
        else:
            results = self._run_parallel(inputs, profile, total_investment, iterations)

        elapsed = time.perf_counter() - start
        logger.info(f"Simulation complete: {len(results)} trials in {elapsed:.3f}s")
        return results

    @staticmethod
    def _run_chunk(inputs, profile, generator, total_investment, count):
        return [
            simulate_trial(inputs, profile, generator, total_investment)
            for _ in range(count)
        ]

    def _run_parallel(self, inputs, profile, total_investment, iterations):
        chunk_sizes = [
            len(chunk) for chunk in np.array_split(np.arange(iterations), self.num_workers)
        ]
        chunk_sizes = [size for size in chunk_sizes if size > 0]
        seeds = np.random.SeedSequence(self.random_seed).spawn(len(chunk_sizes))
        logger.debug(f"Splitting {iterations} trials into chunks {chunk_sizes}")

        with ThreadPoolExecutor(max_workers=len(chunk_sizes)) as executor:
            futures = [
                executor.submit(
                    self._run_chunk,
                    inputs,
                    profile,
                    RandomVariateGenerator(random_state=seed),
                    total_investment,
                    size,
                )
                for seed, size in zip(seeds, chunk_sizes)
            ]
            results = []
            for future in futures:
                results.extend(future.result())
        return results


def run_simulation(
    inputs: DealInputs,
    genre: Optional[str] = DEFAULT_GENRE,
    random_seed: Optional[int] = RANDOM_SEED,
    num_workers: int = 1,
) -> List[TrialOutcome]:
    """Module-level wrapper: run one simulation with a fresh engine."""
    return MonteCarloSimulation(random_seed=random_seed, num_workers=num_workers).run(inputs, genre)
