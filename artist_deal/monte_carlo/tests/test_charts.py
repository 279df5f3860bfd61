"""
PURPOSE: Unit tests for chart dataset shaping.
"""

import pytest

from artist_deal.monte_carlo.charts import build_profit_histogram, build_roi_scatter
from artist_deal.monte_carlo.simulation import TrialOutcome


def outcome(profit, streams=1000.0, roi=None):
    return TrialOutcome(
        revenue=max(0.0, profit + 100.0),
        profit=profit,
        roi=profit if roi is None else roi,
        streams=streams,
    )


class TestProfitHistogram:

    def test_counts_cover_every_trial(self):
        ensemble = [outcome(float(p)) for p in range(-200, 200)]
        histogram = build_profit_histogram(ensemble)
        assert len(histogram.counts) == 40
        assert sum(histogram.counts) == 400

    def test_extremes_land_in_first_and_last_bins(self):
        ensemble = [outcome(-100.0), outcome(0.0), outcome(300.0)]
        histogram = build_profit_histogram(ensemble, bin_count=4)
        # bin size 100: [-100, 0), [0, 100), [100, 200), [200, 300]
        assert histogram.bin_size == 100
        assert histogram.counts == [1, 1, 0, 1]
        assert histogram.midpoints == [-50.0, 50.0, 150.0, 250.0]
        assert histogram.is_profit == [False, True, True, True]
        assert histogram.labels == ["-$50", "$50", "$150", "$250"]

    def test_constant_profit_goes_to_first_bin(self):
        ensemble = [outcome(42.0)] * 5
        histogram = build_profit_histogram(ensemble, bin_count=10)
        assert histogram.bin_size == 0
        assert histogram.counts[0] == 5
        assert sum(histogram.counts) == 5

    def test_to_dict(self):
        histogram = build_profit_histogram([outcome(1.0), outcome(2.0)], bin_count=2)
        result = histogram.to_dict()
        assert set(result) == {"midpoints", "counts", "labels", "is_profit", "bin_size"}
        assert result["counts"] == [1, 1]

    def test_empty_ensemble(self):
        with pytest.raises(ValueError):
            build_profit_histogram([])

    def test_invalid_bin_count(self):
        with pytest.raises(ValueError):
            build_profit_histogram([outcome(1.0)], bin_count=0)


class TestRoiScatter:

    def test_downsamples_large_ensemble(self):
        ensemble = [outcome(float(i), streams=float(i)) for i in range(900)]
        points = build_roi_scatter(ensemble)
        assert len(points) == 300
        assert points[0] == (0.0, 0.0)
        assert points[1] == (3.0, 3.0)

    def test_keeps_small_ensemble(self):
        ensemble = [outcome(float(i)) for i in range(100)]
        assert len(build_roi_scatter(ensemble)) == 100

    def test_pairs_are_streams_and_roi(self):
        points = build_roi_scatter([outcome(-5.0, streams=12.0, roi=-4.0)])
        assert points == [(12.0, -4.0)]

    def test_empty_ensemble(self):
        with pytest.raises(ValueError):
            build_roi_scatter([])
