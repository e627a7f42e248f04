"""Calendar utilities for period-length adjustments."""

import logging

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


def days_in_month(index: pd.Index) -> np.ndarray:
    """
    Number of days in the month of each index position.

    Args:
        index: DatetimeIndex or monthly-or-finer PeriodIndex

    Returns:
        Integer array aligned with the index

    Examples:
        >>> days_in_month(pd.period_range("2024-01", periods=3, freq="M"))
        array([31, 29, 31])
    """
    if isinstance(index, (pd.DatetimeIndex, pd.PeriodIndex)):
        return np.asarray(index.days_in_month, dtype=int)
    raise TypeError(
        f"days_in_month needs a DatetimeIndex or PeriodIndex, got {type(index).__name__}"
    )
