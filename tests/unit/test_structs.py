"""Unit tests for the TimeSeries, LaggedPair and AccuracyInput value types."""

import dataclasses

import pytest
import pandas as pd
import numpy as np

from series_analytics.data.structs import AccuracyInput, LaggedPair, TimeSeries, as_float_array
from series_analytics.utils.error_handling import MisalignedInputError, MissingValueError


class TestTimeSeries:
    """Tests for TimeSeries construction and accessors."""

    def test_from_values_with_period_index(self, short_series):
        assert isinstance(short_series.index, pd.PeriodIndex)
        assert str(short_series.index[0]) == "2021-01"
        assert short_series.freq == "M"
        assert short_series.to_list() == [10.0, 12.0, 14.0]

    def test_from_values_defaults_to_range_index(self):
        ts = TimeSeries.from_values([1.5, 2.5])
        assert isinstance(ts.index, pd.RangeIndex)
        assert len(ts) == 2

    def test_nan_and_none_become_undefined(self):
        ts = TimeSeries.from_values([1.0, np.nan, None, 4.0])
        assert ts.to_list() == [1.0, None, None, 4.0]
        assert ts.n_undefined == 2
        assert ts[1] is None
        assert ts[3] == 4.0
        np.testing.assert_array_equal(ts.is_defined(), [True, False, False, True])
        np.testing.assert_array_equal(ts.observed(), [1.0, 4.0])

    def test_values_are_nullable_float(self):
        ts = TimeSeries(pd.Series([1, 2, 3]))
        assert str(ts.data.dtype) == "Float64"

    def test_month_start_datetime_index_is_evenly_spaced(self):
        index = pd.date_range("2020-01-01", periods=6, freq="MS")
        ts = TimeSeries(pd.Series(np.arange(6.0), index=pd.DatetimeIndex(list(index))))
        assert ts.freq == "MS"

    def test_rejects_duplicate_index(self):
        with pytest.raises(ValueError, match="Duplicate"):
            TimeSeries(pd.Series([1.0, 2.0, 3.0], index=[0, 1, 1]))

    def test_rejects_decreasing_index(self):
        with pytest.raises(ValueError, match="not increasing"):
            TimeSeries(pd.Series([1.0, 2.0, 3.0], index=[2, 1, 0]))

    def test_rejects_gaps_in_index(self):
        index = pd.DatetimeIndex(["2020-01-01", "2020-01-02", "2020-01-05"])
        with pytest.raises(ValueError, match="not evenly spaced"):
            TimeSeries(pd.Series([1.0, 2.0, 3.0], index=index))

    def test_rejects_infinite_values(self):
        with pytest.raises(ValueError, match="finite"):
            TimeSeries.from_values([1.0, np.inf, 3.0])

    def test_rejects_non_series(self):
        with pytest.raises(TypeError):
            TimeSeries([1.0, 2.0])

    def test_length_mismatch_with_explicit_index(self):
        with pytest.raises(ValueError, match="Length mismatch"):
            TimeSeries.from_values([1.0, 2.0], index=pd.RangeIndex(3))

    def test_is_immutable(self, short_series):
        with pytest.raises(dataclasses.FrozenInstanceError):
            short_series.data = pd.Series([0.0])

        copy = short_series.series
        copy.iloc[0] = 999.0
        assert short_series[0] == 10.0

    def test_construction_copies_source(self):
        source = pd.Series([1.0, 2.0, 3.0])
        ts = TimeSeries(source)
        source.iloc[0] = 100.0
        assert ts[0] == 1.0

    def test_equals(self, short_series):
        same = TimeSeries.from_values([10, 12, 14], start="2021-01", freq="M", name="short")
        other = TimeSeries.from_values([10, 12, 15], start="2021-01", freq="M", name="short")
        assert short_series.equals(same)
        assert not short_series.equals(other)
        assert not short_series.equals([10, 12, 14])

    def test_with_values_keeps_index(self, short_series):
        doubled = short_series.with_values([20, 24, 28])
        assert doubled.index.equals(short_series.index)
        assert doubled.to_list() == [20.0, 24.0, 28.0]
        assert short_series.to_list() == [10.0, 12.0, 14.0]


class TestLaggedPair:
    """Tests for LaggedPair alignment."""

    def test_aligned_excludes_undefined_positions(self):
        original = TimeSeries.from_values([1.0, None, 3.0, 4.0, 6.0, 5.0])
        lagged = TimeSeries(original.data.shift(1))
        pair = LaggedPair(original=original, lagged=lagged, k=1)

        x, y = pair.aligned()
        np.testing.assert_array_equal(x, [4.0, 6.0, 5.0])
        np.testing.assert_array_equal(y, [3.0, 4.0, 6.0])
        assert len(pair) == 3
        assert pair.pairs() == [(3, 4.0, 3.0), (4, 6.0, 4.0), (5, 5.0, 6.0)]

    def test_requires_shared_index(self):
        a = TimeSeries.from_values([1.0, 2.0, 3.0])
        b = TimeSeries.from_values([1.0, 2.0, 3.0], start="2020-01", freq="M")
        with pytest.raises(MisalignedInputError):
            LaggedPair(original=a, lagged=b, k=0)


class TestAccuracyInput:
    """Tests for AccuracyInput validation."""

    def test_accepts_equal_length_sequences(self):
        pair = AccuracyInput(actual=[1, 2, 3], forecast=[1.5, 2.5, 3.5])
        assert len(pair) == 3
        assert pair.actual.dtype == float

    def test_arrays_are_read_only(self):
        pair = AccuracyInput(actual=np.array([1.0, 2.0]), forecast=np.array([1.0, 2.0]))
        with pytest.raises(ValueError):
            pair.actual[0] = 5.0

    def test_rejects_length_mismatch(self):
        with pytest.raises(MisalignedInputError, match="Length mismatch"):
            AccuracyInput(actual=[1.0, 2.0, 3.0], forecast=[1.0, 2.0])

    def test_rejects_undefined_values(self):
        with pytest.raises(MissingValueError, match="forecast"):
            AccuracyInput(actual=[1.0, 2.0], forecast=[None, 2.0])

    def test_rejects_index_length_mismatch(self):
        with pytest.raises(MisalignedInputError):
            AccuracyInput(actual=[1.0, 2.0], forecast=[1.0, 2.0], index=pd.RangeIndex(3))


def test_as_float_array_handles_nullable_inputs():
    np.testing.assert_array_equal(as_float_array([1, None, 3]), [1.0, np.nan, 3.0])
    np.testing.assert_array_equal(
        as_float_array(pd.Series([1.0, None], dtype="Float64")), [1.0, np.nan]
    )
    with pytest.raises(ValueError, match="1-D"):
        as_float_array(np.ones((2, 2)))
