"""Forecast accuracy metrics."""

from dataclasses import dataclass
from typing import Any, Dict
import logging

import numpy as np
from sklearn.metrics import mean_absolute_error

from series_analytics.data.structs import AccuracyInput, ArrayLike, index_of
from series_analytics.utils.error_handling import (
    InsufficientSamplesError,
    MisalignedInputError,
    ZeroActualError,
    log_domain_errors,
)

logger = logging.getLogger(__name__)


@dataclass
class AccuracyResult:
    """Container for forecast accuracy measures."""
    mae: float
    mape: float
    n: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "mae": self.mae,
            "mape": self.mape,
            "n": self.n,
        }


@log_domain_errors
def accuracy(forecast: ArrayLike, actual: ArrayLike) -> AccuracyResult:
    """
    Calculate MAE and MAPE of a forecast against actual values.

    Both sequences must already be aligned: this function never lags.
    Use naive_forecast() to build and truncate a naive baseline first.

    Args:
        forecast: Forecast values
        actual: Actual values, same length (and index, if labeled) as forecast

    Returns:
        AccuracyResult with MAE and MAPE (in percent)

    Raises:
        MisalignedInputError: If lengths or indices differ
        MissingValueError: If either sequence has undefined values
        ZeroActualError: If any actual value is zero
    """
    f_index, a_index = index_of(forecast), index_of(actual)
    if f_index is not None and a_index is not None and not f_index.equals(a_index):
        raise MisalignedInputError("forecast and actual must share the same index")

    return evaluate_accuracy(AccuracyInput(actual=actual, forecast=forecast))


@log_domain_errors
def evaluate_accuracy(pair: AccuracyInput) -> AccuracyResult:
    """
    Calculate MAE and MAPE for an already validated AccuracyInput.

    MAE  = mean(|actual - forecast|)
    MAPE = mean(|(actual - forecast) / actual|) * 100
    """
    y_true, y_pred = pair.actual, pair.forecast
    if len(y_true) == 0:
        raise InsufficientSamplesError("accuracy", 1, 0)

    zeros = np.flatnonzero(y_true == 0)
    if len(zeros) > 0:
        raise ZeroActualError(zeros.tolist())

    mae = float(mean_absolute_error(y_true, y_pred))
    mape = float(np.mean(np.abs((y_true - y_pred) / y_true)) * 100)

    logger.info(f"Accuracy over {len(y_true)} periods: MAE={mae:.4f}, MAPE={mape:.2f}%")
    return AccuracyResult(mae=mae, mape=mape, n=len(y_true))
