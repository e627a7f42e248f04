"""Lag, descriptive statistics, autocorrelation and forecast accuracy for time series."""

from series_analytics.data.structs import AccuracyInput, LaggedPair, TimeSeries
from series_analytics.evaluation.autocorrelation import AutocorrelationResult, acf
from series_analytics.evaluation.metrics import AccuracyResult, accuracy
from series_analytics.evaluation.statistics import (
    DescriptiveSummary,
    correlation,
    covariance,
    describe,
    mad,
    mean,
    median,
    msd,
    stddev,
    variance,
)
from series_analytics.features.lags import lag, lagged_pair, naive_forecast
from series_analytics.utils.error_handling import DomainError

__version__ = "0.1.0"

__all__ = [
    "TimeSeries",
    "LaggedPair",
    "AccuracyInput",
    "lag",
    "lagged_pair",
    "naive_forecast",
    "mean",
    "median",
    "mad",
    "msd",
    "variance",
    "stddev",
    "covariance",
    "correlation",
    "describe",
    "DescriptiveSummary",
    "acf",
    "AutocorrelationResult",
    "accuracy",
    "AccuracyResult",
    "DomainError",
]
