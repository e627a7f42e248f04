"""Autocorrelation function over an evenly spaced time series."""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Tuple
import logging

import numpy as np
import pandas as pd

from series_analytics.data.structs import TimeSeries
from series_analytics.evaluation.statistics import correlation
from series_analytics.features.lags import lagged_pair
from series_analytics.utils.error_handling import (
    InsufficientSamplesError,
    InvalidLagError,
    log_domain_errors,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AutocorrelationResult:
    """
    ACF values ordered by increasing lag, starting at lag 0.

    Attributes:
        entries: (lag, value) pairs for lag = 0..max_lag
        n_observations: Number of defined observations in the source series
    """
    entries: Tuple[Tuple[int, float], ...]
    n_observations: int

    @property
    def max_lag(self) -> int:
        return self.entries[-1][0]

    @property
    def lags(self) -> List[int]:
        return [k for k, _ in self.entries]

    @property
    def values(self) -> List[float]:
        return [v for _, v in self.entries]

    def value_at(self, k: int) -> float:
        """ACF value at lag k."""
        if not 0 <= k <= self.max_lag:
            raise InvalidLagError(f"Lag {k} outside computed range 0..{self.max_lag}")
        return self.entries[k][1]

    def critical_bound(self, z: float = 1.96) -> float:
        """
        White-noise critical bound z / sqrt(T).

        For white noise, about 95% of ACF spikes (z=1.96) lie within
        +/- this bound; correlograms draw it as dashed lines.
        """
        if self.n_observations == 0:
            raise InsufficientSamplesError("critical_bound", 1, 0)
        return float(z / np.sqrt(self.n_observations))

    def significant_lags(self, z: float = 1.96) -> List[int]:
        """Lags k >= 1 whose ACF value lies outside the white-noise bound."""
        bound = self.critical_bound(z)
        return [k for k, v in self.entries[1:] if abs(v) > bound]

    def to_frame(self) -> pd.DataFrame:
        """Tabulate as a DataFrame with columns 'lag' and 'acf'."""
        return pd.DataFrame({"lag": self.lags, "acf": self.values})

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "lags": self.lags,
            "values": self.values,
            "n_observations": self.n_observations,
        }

    def __iter__(self) -> Iterator[Tuple[int, float]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@log_domain_errors
def acf(series: TimeSeries, max_lag: int) -> AutocorrelationResult:
    """
    Compute the autocorrelation function for lags 0..max_lag.

    Lag 0 is 1 by definition. For each lag k >= 1 the series is paired with
    its lag-k copy, both sides are restricted to positions where they are
    defined (the first k observations drop out), and the Pearson correlation
    of that aligned pair is taken.

    Args:
        series: Source series
        max_lag: Largest lag to compute, 0 <= max_lag < len(series)

    Returns:
        AutocorrelationResult ordered by increasing lag

    Raises:
        InvalidLagError: If max_lag is negative, not an integer, or not below
            the series length
        InsufficientSamplesError: If a lag leaves fewer than two aligned pairs
        DegenerateDistributionError: If an aligned pair has zero variance
    """
    if isinstance(max_lag, bool) or not isinstance(max_lag, (int, np.integer)):
        raise InvalidLagError(f"max_lag must be an integer, got {max_lag!r}")
    if max_lag < 0:
        raise InvalidLagError(f"max_lag must be non-negative, got {max_lag}")
    if max_lag >= len(series):
        raise InvalidLagError(
            f"max_lag ({max_lag}) must be less than the series length ({len(series)})"
        )

    entries: List[Tuple[int, float]] = [(0, 1.0)]
    for k in range(1, int(max_lag) + 1):
        x, y = lagged_pair(series, k).aligned()
        entries.append((k, correlation(x, y)))
        logger.debug(f"ACF lag {k}: {entries[-1][1]:.4f} over {len(x)} pairs")

    n_obs = len(series) - series.n_undefined
    logger.info(f"Computed ACF up to lag {max_lag} for series '{series.name}' ({n_obs} observations)")
    return AutocorrelationResult(entries=tuple(entries), n_observations=n_obs)
