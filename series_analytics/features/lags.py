"""Lag operator and lag-derived pairings.

Provides the lag shift used by the autocorrelation function and the naive
forecast baselines used by forecast accuracy evaluation.
"""

import logging
from numbers import Integral

import numpy as np

from series_analytics.data.structs import AccuracyInput, LaggedPair, TimeSeries, as_float_array
from series_analytics.utils.error_handling import InvalidLagError, log_domain_errors

logger = logging.getLogger(__name__)


def _check_lag(k, name: str = "k") -> int:
    if isinstance(k, bool) or not isinstance(k, Integral):
        raise InvalidLagError(f"{name} must be an integer, got {k!r}")
    if k < 0:
        raise InvalidLagError(f"{name} must be non-negative, got {k}")
    return int(k)


@log_domain_errors
def lag(series: TimeSeries, k: int) -> TimeSeries:
    """
    Shift a series forward by k periods on the same index.

    lagged[i] = series[i - k] where i - k is in range; the first k positions
    are undefined. k = 0 returns the input unchanged and k >= len(series)
    yields an all-undefined series.

    Args:
        series: Series to shift
        k: Number of periods, k >= 0

    Returns:
        New TimeSeries with the same index

    Raises:
        InvalidLagError: If k is negative or not an integer
    """
    k = _check_lag(k)
    if k == 0:
        return series
    return TimeSeries(series.data.shift(k))


@log_domain_errors
def lagged_pair(series: TimeSeries, k: int) -> LaggedPair:
    """Pair a series with its own lag-k copy."""
    k = _check_lag(k)
    return LaggedPair(original=series, lagged=lag(series, k), k=k)


@log_domain_errors
def naive_forecast(actual: TimeSeries, period: int = 1) -> AccuracyInput:
    """
    Build the naive forecast baseline aligned against the actual values.

    The forecast for time t is the actual value at t - period. The first
    `period` observations have no forecast and are dropped, as is any other
    position where either side is undefined. period=1 is the naive forecast;
    period=m (the seasonal period) is the seasonal naive forecast.

    Args:
        actual: Observed series
        period: Lag used as forecast, period >= 1

    Returns:
        AccuracyInput with the truncated, aligned actual and forecast values
    """
    period = _check_lag(period, "period")
    if period == 0:
        raise InvalidLagError("period must be at least 1 for a naive forecast")

    forecast = lag(actual, period)
    keep = actual.is_defined() & forecast.is_defined()
    dropped = len(actual) - int(keep.sum())
    logger.debug(f"Naive forecast (period={period}) dropped {dropped} unaligned positions")

    return AccuracyInput(
        actual=as_float_array(actual)[keep],
        forecast=as_float_array(forecast)[keep],
        index=actual.index[np.asarray(keep)],
    )
