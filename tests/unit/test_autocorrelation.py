"""Unit tests for the autocorrelation function."""

import logging

import pytest
import numpy as np

from series_analytics.data.structs import TimeSeries
from series_analytics.evaluation.autocorrelation import AutocorrelationResult, acf
from series_analytics.evaluation.statistics import correlation
from series_analytics.utils.error_handling import (
    DegenerateDistributionError,
    InsufficientSamplesError,
    InvalidLagError,
)


class TestAcf:
    """Tests for acf()."""

    def test_lag_zero_is_one(self, short_series):
        result = acf(short_series, 0)
        assert list(result) == [(0, 1.0)]
        assert result.max_lag == 0

    def test_entries_ordered_by_lag(self, seasonal_series):
        result = acf(seasonal_series, 14)
        assert result.lags == list(range(15))
        assert len(result) == 15
        assert result.n_observations == 36

    def test_lag_k_is_correlation_of_aligned_pair(self):
        values = [3.0, 1.0, 4.0, 1.0, 5.0, 9.0, 2.0, 6.0]
        result = acf(TimeSeries.from_values(values), 2)
        assert result.value_at(2) == correlation(values[2:], values[:-2])
        assert result.value_at(1) == correlation(values[1:], values[:-1])

    def test_seasonal_peaks_and_troughs(self, seasonal_series):
        result = acf(seasonal_series, 12)
        assert result.value_at(12) == pytest.approx(1.0)
        assert result.value_at(6) == pytest.approx(-1.0)
        assert all(-1.0 <= v <= 1.0 for v in result.values)

    def test_interior_undefined_values_are_filtered(self):
        ts = TimeSeries.from_values([1.0, None, 3.0, 4.0, 6.0, 5.0, 8.0])
        result = acf(ts, 1)
        assert result.value_at(1) == correlation([4.0, 6.0, 5.0, 8.0], [3.0, 4.0, 6.0, 5.0])
        assert result.n_observations == 6

    def test_max_lag_at_series_length_raises(self, short_series):
        with pytest.raises(InvalidLagError, match="less than the series length"):
            acf(short_series, 3)

    def test_negative_max_lag_raises(self, short_series):
        with pytest.raises(InvalidLagError):
            acf(short_series, -1)

    def test_lag_with_single_pair_raises(self, short_series):
        with pytest.raises(InsufficientSamplesError):
            acf(short_series, 2)

    def test_constant_series_is_degenerate(self, caplog):
        ts = TimeSeries.from_values([5.0] * 6)
        with caplog.at_level(logging.WARNING):
            with pytest.raises(DegenerateDistributionError):
                acf(ts, 2)
        rejected = [r for r in caplog.records if "rejected input" in r.getMessage()]
        assert len(rejected) == 1

    def test_value_at_out_of_range(self, short_series):
        with pytest.raises(InvalidLagError):
            acf(short_series, 1).value_at(2)


class TestAutocorrelationResult:
    """Tests for correlogram helpers."""

    def test_critical_bound(self):
        result = AutocorrelationResult(entries=((0, 1.0), (1, 0.5), (2, 0.1)), n_observations=100)
        assert result.critical_bound() == pytest.approx(0.196)
        assert result.critical_bound(z=2.0) == pytest.approx(0.2)
        assert result.significant_lags() == [1]

    def test_to_frame(self, seasonal_series):
        frame = acf(seasonal_series, 3).to_frame()
        assert list(frame.columns) == ["lag", "acf"]
        assert frame["lag"].tolist() == [0, 1, 2, 3]
        assert frame["acf"].iloc[0] == 1.0

    def test_to_dict(self):
        result = AutocorrelationResult(entries=((0, 1.0), (1, -0.25)), n_observations=10)
        assert result.to_dict() == {
            "lags": [0, 1],
            "values": [1.0, -0.25],
            "n_observations": 10,
        }

    def test_critical_bound_without_observations(self):
        result = AutocorrelationResult(entries=((0, 1.0),), n_observations=0)
        with pytest.raises(InsufficientSamplesError):
            result.critical_bound()


def test_acf_accepts_numpy_integer_max_lag(seasonal_series):
    assert acf(seasonal_series, np.int64(2)).max_lag == 2
