"""
PURPOSE: Per-genre stochastic benchmarks for the streaming model.

Each genre shifts the log-normal performance multiplier, scales how well
marketing spend converts into reach, and sets the chance of a viral spike.
Unknown genres resolve to the "custom" profile instead of failing.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenreProfile:
    """Stochastic parameters for one genre.

    Attributes:
        multiplier_mean (float): Log-normal location of the performance multiplier.
        multiplier_sigma (float): Log-normal scale; higher means more hit-or-miss.
        marketing_efficiency (float): Mean reach gained per currency unit of marketing.
        viral_probability (float): Chance in [0, 1] that a trial goes viral.
    """
    multiplier_mean: float
    multiplier_sigma: float
    marketing_efficiency: float
    viral_probability: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


GENRE_PROFILES: Dict[str, GenreProfile] = {
    # Stable baseline, high variance (hit or miss), higher chance of viral
    "pop": GenreProfile(
        multiplier_mean=0.0,
        multiplier_sigma=0.8,
        marketing_efficiency=15,
        viral_probability=0.02,
    ),
    # Growth trend
    "hiphop": GenreProfile(
        multiplier_mean=0.2,
        multiplier_sigma=0.6,
        marketing_efficiency=18,
        viral_probability=0.015,
    ),
    # Harder to grow rapidly, very stable fanbase, ads work less well
    "rock": GenreProfile(
        multiplier_mean=-0.1,
        multiplier_sigma=0.3,
        marketing_efficiency=8,
        viral_probability=0.005,
    ),
    "indie": GenreProfile(
        multiplier_mean=0.1,
        multiplier_sigma=0.4,
        marketing_efficiency=12,
        viral_probability=0.01,
    ),
    "custom": GenreProfile(
        multiplier_mean=0.0,
        multiplier_sigma=0.6,
        marketing_efficiency=15,
        viral_probability=0.01,
    ),
}

FALLBACK_GENRE = "custom"
GENRE_KEYS = tuple(GENRE_PROFILES.keys())


def resolve_genre_key(genre: Optional[str]) -> str:
    """Normalize a genre selector to a known key, falling back to "custom"."""
    if genre is None:
        return FALLBACK_GENRE
    key = str(genre).strip().lower()
    if key not in GENRE_PROFILES:
        logger.debug(f"Unknown genre {genre!r}, using {FALLBACK_GENRE!r} profile")
        return FALLBACK_GENRE
    return key


def lookup_genre(genre: Optional[str]) -> GenreProfile:
    """Return the profile for a genre key; unknown keys get the "custom" profile."""
    return GENRE_PROFILES[resolve_genre_key(genre)]
