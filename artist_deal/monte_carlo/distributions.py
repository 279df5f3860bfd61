"""
PURPOSE: Random variate generation for the deal Monte Carlo engine.

RESPONSIBILITIES:
- Draw normal samples with the Box-Muller transform from a uniform source
- Draw log-normal samples (exp of a normal draw) for multiplicative effects
- Draw Bernoulli outcomes for rare events
- Single responsibility: only sampling, no I/O or aggregation

The uniform source is injected so tests can script the exact sequence of
uniform draws, and parallel workers can each own an independent generator.
"""

import math
from typing import Optional, Protocol, Union

import numpy as np


class UniformSource(Protocol):
    """Anything that produces uniform(0, 1) floats via ``random()``."""

    def random(self) -> float:
        ...


SeedLike = Union[int, np.random.SeedSequence, np.random.Generator, None]


def make_uniform_source(random_state: SeedLike = None) -> np.random.Generator:
    """Build a numpy Generator from a seed, a SeedSequence or an existing Generator."""
    if isinstance(random_state, np.random.Generator):
        return random_state
    return np.random.default_rng(random_state)


class RandomVariateGenerator:
    """Samples normal, log-normal and Bernoulli variates from one uniform source."""

    def __init__(
        self,
        uniform_source: Optional[UniformSource] = None,
        random_state: SeedLike = None,
    ):
        """
        Args:
            uniform_source: Object with a ``random()`` method returning floats in [0, 1).
                            Takes precedence over random_state.
            random_state: Seed used to build a numpy Generator when no source is given.
        """
        if uniform_source is None:
            uniform_source = make_uniform_source(random_state)
        self.uniform_source = uniform_source

    def _nonzero_uniform(self) -> float:
        # Converting [0, 1) to (0, 1)
        u = 0.0
        while u == 0.0:
            u = float(self.uniform_source.random())
        return u

    def normal(self, mean: float, std_dev: float) -> float:
        """
        Sample from Normal(mean, std_dev) using the Box-Muller transform.

        Consumes two uniform draws per call; the paired sine sample is discarded.
        """
        u = self._nonzero_uniform()
        v = self._nonzero_uniform()
        z = math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)
        return z * std_dev + mean

    def log_normal(self, mu: float, sigma: float) -> float:
        """
        Sample from a log-normal distribution.

        mu and sigma are the parameters of the underlying normal distribution,
        so the result is always non-negative.
        """
        return math.exp(self.normal(mu, sigma))

    def bernoulli(self, probability: float) -> bool:
        """Return True with the given probability (one uniform draw)."""
        return float(self.uniform_source.random()) < probability


# Module-level convenience functions for direct import
def sample_normal(mean, std_dev, size=1, random_state=None):
    """Module-level wrapper for Box-Muller normal sampling."""
    generator = RandomVariateGenerator(random_state=random_state)
    if size == 1:
        return generator.normal(mean, std_dev)
    return np.array([generator.normal(mean, std_dev) for _ in range(size)])


def sample_lognormal(mu, sigma, size=1, random_state=None):
    """Module-level wrapper for lognormal sampling (log-space parametrization)."""
    generator = RandomVariateGenerator(random_state=random_state)
    if size == 1:
        return generator.log_normal(mu, sigma)
    return np.array([generator.log_normal(mu, sigma) for _ in range(size)])
