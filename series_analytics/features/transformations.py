"""Variance-stabilizing transformations and calendar adjustment.

Every function returns a new TimeSeries on the same index; undefined
observations stay undefined.
"""

import logging
from typing import Sequence, Union

import numpy as np

from series_analytics.data.structs import TimeSeries, as_float_array
from series_analytics.utils.error_handling import (
    DomainError,
    MisalignedInputError,
    log_domain_errors,
)

logger = logging.getLogger(__name__)

TRANSFORMS = ("none", "sqrt", "log")


@log_domain_errors
def sqrt_transform(series: TimeSeries) -> TimeSeries:
    """Square-root transform; requires non-negative observations."""
    values = as_float_array(series)
    if (values[~np.isnan(values)] < 0).any():
        raise DomainError("sqrt transform requires non-negative observations")
    return series.with_values(np.sqrt(values))


@log_domain_errors
def log_transform(series: TimeSeries) -> TimeSeries:
    """Natural-log transform; requires strictly positive observations."""
    values = as_float_array(series)
    if (values[~np.isnan(values)] <= 0).any():
        raise DomainError("log transform requires strictly positive observations")
    return series.with_values(np.log(values))


@log_domain_errors
def calendar_adjust(
    series: TimeSeries,
    period_lengths: Union[Sequence[float], np.ndarray],
) -> TimeSeries:
    """
    Rescale each observation by the length of its period.

    Dividing monthly totals by the days in each month removes the variation
    caused by months of different length, giving an average per day.

    Args:
        series: Series of per-period totals
        period_lengths: Precomputed length of each period (e.g. from
            days_in_month), aligned with the series

    Returns:
        Adjusted series
    """
    lengths = as_float_array(period_lengths)
    if len(lengths) != len(series):
        raise MisalignedInputError(
            f"Length mismatch: series ({len(series)}) vs period_lengths ({len(lengths)})"
        )
    if np.isnan(lengths).any() or (lengths <= 0).any():
        raise DomainError("period_lengths must be defined and positive")

    return series.with_values(as_float_array(series) / lengths)


def apply_transform(series: TimeSeries, method: str) -> TimeSeries:
    """Apply a named transform ('none', 'sqrt' or 'log')."""
    if method == "none":
        return series
    if method == "sqrt":
        return sqrt_transform(series)
    if method == "log":
        return log_transform(series)
    raise ValueError(f"Unknown transform: {method}. Expected one of {TRANSFORMS}")
