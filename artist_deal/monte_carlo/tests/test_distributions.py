"""
Unit tests for the random variate generator.

STRATEGY:
    1. Script the uniform source to pin exact Box-Muller outputs
    2. Verify the zero-resampling guard
    3. Verify distribution shape statistically (KS test, log-space moments)
    4. Verify seeded reproducibility
"""

import math
import unittest

import numpy as np
from scipy import stats

from artist_deal.monte_carlo.distributions import (
    RandomVariateGenerator,
    make_uniform_source,
    sample_lognormal,
    sample_normal,
)

# sqrt(-2 * ln(U_ONE_SIGMA)) == 1
U_ONE_SIGMA = math.exp(-0.5)


class ScriptedSource:
    """Uniform source that replays a fixed list of values."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


class TestNormal(unittest.TestCase):
    """Box-Muller normal sampling."""

    def test_scripted_minus_one_sigma(self):
        """cos(2*pi*0.5) = -1, so the sample is one std dev below the mean."""
        generator = RandomVariateGenerator(uniform_source=ScriptedSource([U_ONE_SIGMA, 0.5]))
        self.assertAlmostEqual(generator.normal(10.0, 2.0), 8.0, places=9)

    def test_scripted_plus_one_sigma(self):
        generator = RandomVariateGenerator(uniform_source=ScriptedSource([U_ONE_SIGMA, 0.0, 1.0]))
        # v = 0.0 is resampled, v = 1.0 gives cos(2*pi) = 1
        self.assertAlmostEqual(generator.normal(10.0, 2.0), 12.0, places=9)

    def test_zero_draws_are_resampled(self):
        source = ScriptedSource([0.0, U_ONE_SIGMA, 0.0, 0.25])
        generator = RandomVariateGenerator(uniform_source=source)
        sample = generator.normal(3.0, 1.0)
        # cos(pi / 2) ~ 0 so the sample sits on the mean
        self.assertAlmostEqual(sample, 3.0, places=9)
        self.assertEqual(source.calls, 4)

    def test_two_uniform_draws_per_sample(self):
        source = ScriptedSource([0.3, 0.7])
        generator = RandomVariateGenerator(uniform_source=source)
        for _ in range(5):
            generator.normal(0.0, 1.0)
        self.assertEqual(source.calls, 10)

    def test_samples_are_normal(self):
        """Kolmogorov-Smirnov test against the standard normal."""
        samples = sample_normal(0.0, 1.0, size=5000, random_state=7)
        self.assertIsInstance(samples, np.ndarray)
        self.assertEqual(samples.shape, (5000,))
        result = stats.kstest(samples, "norm")
        self.assertGreater(result.pvalue, 0.001)

    def test_mean_and_std(self):
        samples = sample_normal(15.0, 5.0, size=20000, random_state=3)
        self.assertAlmostEqual(np.mean(samples), 15.0, delta=0.2)
        self.assertAlmostEqual(np.std(samples), 5.0, delta=0.2)

    def test_single_sample_is_float(self):
        sample = sample_normal(1.0, 0.2, random_state=1)
        self.assertIsInstance(sample, float)


class TestLogNormal(unittest.TestCase):
    """Log-normal sampling."""

    def test_scripted_value(self):
        generator = RandomVariateGenerator(uniform_source=ScriptedSource([U_ONE_SIGMA, 0.5]))
        self.assertAlmostEqual(generator.log_normal(0.2, 0.6), math.exp(0.2 - 0.6), places=9)

    def test_always_positive(self):
        samples = sample_lognormal(0.0, 0.8, size=5000, random_state=11)
        self.assertTrue(np.all(samples > 0))

    def test_log_space_moments(self):
        samples = sample_lognormal(0.1, 0.4, size=20000, random_state=5)
        logs = np.log(samples)
        self.assertAlmostEqual(np.mean(logs), 0.1, delta=0.02)
        self.assertAlmostEqual(np.std(logs), 0.4, delta=0.02)


class TestBernoulli(unittest.TestCase):
    """Bernoulli draws."""

    def test_success_below_probability(self):
        generator = RandomVariateGenerator(uniform_source=ScriptedSource([0.3]))
        self.assertTrue(generator.bernoulli(0.5))

    def test_failure_at_or_above_probability(self):
        generator = RandomVariateGenerator(uniform_source=ScriptedSource([0.5, 0.7]))
        self.assertFalse(generator.bernoulli(0.5))
        self.assertFalse(generator.bernoulli(0.5))

    def test_zero_probability_never_fires(self):
        generator = RandomVariateGenerator(uniform_source=ScriptedSource([0.0]))
        self.assertFalse(generator.bernoulli(0.0))


class TestReproducibility(unittest.TestCase):
    """Seeded generators replay the same sequence."""

    def test_same_seed_same_samples(self):
        a = sample_normal(0.0, 1.0, size=100, random_state=42)
        b = sample_normal(0.0, 1.0, size=100, random_state=42)
        np.testing.assert_array_equal(a, b)

    def test_different_seed_different_samples(self):
        a = sample_normal(0.0, 1.0, size=100, random_state=1)
        b = sample_normal(0.0, 1.0, size=100, random_state=2)
        self.assertFalse(np.array_equal(a, b))

    def test_existing_generator_is_reused(self):
        rng = np.random.default_rng(0)
        self.assertIs(make_uniform_source(rng), rng)


if __name__ == "__main__":
    unittest.main()
