"""
PURPOSE: Unit tests for the genre profile table.
"""

import dataclasses

import pytest

from artist_deal.monte_carlo.genres import (
    GENRE_KEYS,
    GENRE_PROFILES,
    GenreProfile,
    lookup_genre,
    resolve_genre_key,
)


class TestGenreTable:
    """The benchmark values are design constants."""

    @pytest.mark.parametrize(
        "genre, expected",
        [
            ("pop", (0.0, 0.8, 15, 0.02)),
            ("hiphop", (0.2, 0.6, 18, 0.015)),
            ("rock", (-0.1, 0.3, 8, 0.005)),
            ("indie", (0.1, 0.4, 12, 0.01)),
            ("custom", (0.0, 0.6, 15, 0.01)),
        ],
    )
    def test_profile_values(self, genre, expected):
        profile = lookup_genre(genre)
        assert (
            profile.multiplier_mean,
            profile.multiplier_sigma,
            profile.marketing_efficiency,
            profile.viral_probability,
        ) == expected

    def test_keys(self):
        assert set(GENRE_KEYS) == {"pop", "hiphop", "rock", "indie", "custom"}

    def test_profiles_are_valid(self):
        for profile in GENRE_PROFILES.values():
            assert profile.multiplier_sigma > 0
            assert profile.marketing_efficiency > 0
            assert 0 <= profile.viral_probability <= 1

    def test_profiles_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            lookup_genre("pop").multiplier_sigma = 2.0

    def test_to_dict(self):
        assert lookup_genre("rock").to_dict() == {
            "multiplier_mean": -0.1,
            "multiplier_sigma": 0.3,
            "marketing_efficiency": 8,
            "viral_probability": 0.005,
        }


class TestGenreFallback:
    """Unknown selectors resolve to the custom profile."""

    @pytest.mark.parametrize("genre", ["jazz", "", "unknown", None])
    def test_unknown_falls_back_to_custom(self, genre):
        assert lookup_genre(genre) is GENRE_PROFILES["custom"]
        assert resolve_genre_key(genre) == "custom"

    def test_custom_can_be_selected_deliberately(self):
        assert lookup_genre("custom") is GENRE_PROFILES["custom"]

    def test_key_is_normalized(self):
        assert resolve_genre_key("  HipHop ") == "hiphop"
        assert lookup_genre("ROCK") is GENRE_PROFILES["rock"]

    def test_lookup_returns_profile(self):
        assert isinstance(lookup_genre("indie"), GenreProfile)
