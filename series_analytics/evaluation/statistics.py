"""Descriptive statistics over fully-defined numeric samples.

MSD divides by n (population second moment) while variance, standard
deviation and covariance divide by n - 1 (sample estimators). The two
conventions are kept as separate functions and must not be unified.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple
import logging

import numpy as np

from series_analytics.data.structs import ArrayLike, as_float_array, index_of
from series_analytics.utils.error_handling import (
    DegenerateDistributionError,
    DomainError,
    InsufficientSamplesError,
    MisalignedInputError,
    MissingValueError,
    log_domain_errors,
)

logger = logging.getLogger(__name__)


@dataclass
class DescriptiveSummary:
    """Univariate summary statistics of a sample."""
    n: int
    mean: float
    median: float
    mad: float
    msd: float
    variance: float
    stddev: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "n": self.n,
            "mean": self.mean,
            "median": self.median,
            "mad": self.mad,
            "msd": self.msd,
            "variance": self.variance,
            "stddev": self.stddev,
        }


def _samples(values: ArrayLike, statistic: str, min_n: int) -> np.ndarray:
    """Convert to a float array, rejecting undefined, infinite or too few values."""
    arr = as_float_array(values)
    missing = np.flatnonzero(np.isnan(arr))
    if len(missing) > 0:
        raise MissingValueError(
            f"{statistic} requires fully-defined samples; "
            f"undefined values at positions {missing.tolist()[:10]}"
        )
    if np.isinf(arr).any():
        raise DomainError(f"{statistic} requires finite samples")
    if len(arr) < min_n:
        raise InsufficientSamplesError(statistic, min_n, len(arr))
    return arr


def _paired_samples(x: ArrayLike, y: ArrayLike, statistic: str) -> Tuple[np.ndarray, np.ndarray]:
    """Convert an index-aligned pair, rejecting length or label mismatches."""
    x_index, y_index = index_of(x), index_of(y)
    if x_index is not None and y_index is not None and not x_index.equals(y_index):
        raise MisalignedInputError(f"{statistic} requires x and y to share the same index")

    x_arr = _samples(x, statistic, 0)
    y_arr = _samples(y, statistic, 0)
    if len(x_arr) != len(y_arr):
        raise MisalignedInputError(
            f"{statistic} requires equal lengths, got {len(x_arr)} and {len(y_arr)}"
        )
    if len(x_arr) < 2:
        raise InsufficientSamplesError(statistic, 2, len(x_arr))
    return x_arr, y_arr


def _deviations(arr: np.ndarray) -> np.ndarray:
    # Identical samples deviate by exactly zero, whatever rounding the mean picks up.
    if (arr == arr[0]).all():
        return np.zeros_like(arr)
    return arr - arr.mean()


@log_domain_errors
def mean(samples: ArrayLike) -> float:
    """Arithmetic average."""
    return float(np.mean(_samples(samples, "mean", 1)))


@log_domain_errors
def median(samples: ArrayLike) -> float:
    """Middle order statistic; the average of the two central values for even n."""
    return float(np.median(_samples(samples, "median", 1)))


@log_domain_errors
def mad(samples: ArrayLike) -> float:
    """Mean absolute deviation from the mean."""
    arr = _samples(samples, "mad", 1)
    return float(np.mean(np.abs(_deviations(arr))))


@log_domain_errors
def msd(samples: ArrayLike) -> float:
    """Mean squared deviation from the mean (divides by n)."""
    arr = _samples(samples, "msd", 1)
    return float(np.sum(_deviations(arr) ** 2) / len(arr))


@log_domain_errors
def variance(samples: ArrayLike) -> float:
    """Unbiased sample variance (divides by n - 1)."""
    arr = _samples(samples, "variance", 2)
    return float(np.sum(_deviations(arr) ** 2) / (len(arr) - 1))


@log_domain_errors
def stddev(samples: ArrayLike) -> float:
    """Sample standard deviation, the square root of variance."""
    arr = _samples(samples, "stddev", 2)
    return float(np.sqrt(np.sum(_deviations(arr) ** 2) / (len(arr) - 1)))


@log_domain_errors
def covariance(x: ArrayLike, y: ArrayLike) -> float:
    """
    Sample covariance of paired observations (divides by n - 1).

    Args:
        x: First sample
        y: Second sample, same length and index as x

    Returns:
        Covariance of x and y
    """
    x_arr, y_arr = _paired_samples(x, y, "covariance")
    return float(np.sum(_deviations(x_arr) * _deviations(y_arr)) / (len(x_arr) - 1))


@log_domain_errors
def correlation(x: ArrayLike, y: ArrayLike) -> float:
    """
    Pearson correlation: covariance(x, y) / (stddev(x) * stddev(y)).

    Args:
        x: First sample
        y: Second sample, same length and index as x

    Returns:
        Correlation in [-1, 1]

    Raises:
        DegenerateDistributionError: If either sample has zero standard deviation
    """
    x_arr, y_arr = _paired_samples(x, y, "correlation")
    dx, dy = _deviations(x_arr), _deviations(y_arr)
    denom = len(x_arr) - 1

    sx = np.sqrt(np.sum(dx ** 2) / denom)
    sy = np.sqrt(np.sum(dy ** 2) / denom)
    scale = sx * sy
    if sx == 0.0 or sy == 0.0 or scale == 0.0:
        raise DegenerateDistributionError(
            "correlation is undefined when a standard deviation is zero"
        )

    r = (np.sum(dx * dy) / denom) / scale
    return float(np.clip(r, -1.0, 1.0))


@log_domain_errors
def describe(samples: ArrayLike) -> DescriptiveSummary:
    """
    Summarize a sample with mean, median, MAD, MSD, variance and std dev.

    Requires at least two fully-defined observations, since variance and
    standard deviation are part of the summary.
    """
    arr = _samples(samples, "describe", 2)
    dev = _deviations(arr)
    n = len(arr)
    var = float(np.sum(dev ** 2) / (n - 1))

    summary = DescriptiveSummary(
        n=n,
        mean=float(np.mean(arr)),
        median=float(np.median(arr)),
        mad=float(np.mean(np.abs(dev))),
        msd=float(np.sum(dev ** 2) / n),
        variance=var,
        stddev=float(np.sqrt(var)),
    )
    logger.debug(f"Described {n} samples: mean={summary.mean:.4f}, variance={summary.variance:.4f}")
    return summary
