"""
Rare event sampling for the deal Monte Carlo simulation.

PURPOSE:
    Model discrete events as Bernoulli trials with an impact distribution.
    An event occurs with a given probability and, when it occurs, its impact
    is drawn from a supplied sampler. The viral spike is the one event the
    streaming model uses: when it fires, streams are scaled by a
    Normal(5, 1) multiplier.

RESPONSIBILITIES:
    - Sample Bernoulli occurrence (did the event happen or not?)
    - Sample the impact magnitude only when the event happened
    - NO simulation aggregation, NO probability calculation
"""

from typing import Callable, Tuple

from artist_deal.monte_carlo.config import VIRAL_MULTIPLIER_MEAN, VIRAL_MULTIPLIER_STD
from artist_deal.monte_carlo.distributions import RandomVariateGenerator


def sample_bernoulli_impact(
    generator: RandomVariateGenerator,
    probability: float,
    impact_fn: Callable[[], float],
    no_event_value: float = 0.0,
) -> Tuple[bool, float]:
    """
    Sample Bernoulli occurrence + impact for a single event.

    Args:
        generator: Source of random variates.
        probability: Probability of the event occurring (0 to 1).
        impact_fn: Callable returning the impact value, only called if the event occurs.
        no_event_value: Value returned when the event does not occur.

    Returns:
        Tuple of (occurred, value).

    Raises:
        ValueError: If probability not in [0, 1]
        TypeError: If impact_fn is not callable
    """
    if not 0 <= probability <= 1:
        raise ValueError(f"probability must be in [0, 1], got {probability}")

    if not callable(impact_fn):
        raise TypeError(f"impact_fn must be callable, got {type(impact_fn)}")

    if generator.bernoulli(probability):
        return True, impact_fn()
    return False, no_event_value


def sample_viral_multiplier(
    generator: RandomVariateGenerator,
    probability: float,
) -> Tuple[bool, float]:
    """
    Sample the viral spike for one trial.

    The multiplier is exactly 1 when the trial does not go viral. When it does,
    the Normal(5, 1) draw is used as-is, without clamping.
    """
    return sample_bernoulli_impact(
        generator,
        probability,
        lambda: generator.normal(VIRAL_MULTIPLIER_MEAN, VIRAL_MULTIPLIER_STD),
        no_event_value=1.0,
    )
