"""Validation utilities for time series indices and observation values."""

from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field
import logging

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


@dataclass
class IndexReport:
    """Regularity checks for a time series index."""
    length: int
    is_monotonic: bool
    has_duplicates: bool
    is_evenly_spaced: bool
    freq: Optional[str] = None
    issues: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.issues

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "length": self.length,
            "is_monotonic": self.is_monotonic,
            "has_duplicates": self.has_duplicates,
            "is_evenly_spaced": self.is_evenly_spaced,
            "freq": self.freq,
            "issues": self.issues,
        }


class SeriesValidator:
    """Validates that an index and its values can form a TimeSeries."""

    def check_index(self, index: pd.Index) -> IndexReport:
        """
        Check that an index is strictly increasing, unique and evenly spaced.

        DatetimeIndex spacing is judged by calendar frequency (pd.infer_freq),
        so month-start or month-end stamps count as evenly spaced even though
        their spacing in days varies.

        Args:
            index: Index to check

        Returns:
            IndexReport with the individual checks and a list of issues
        """
        issues: List[str] = []
        n = len(index)

        has_duplicates = bool(index.has_duplicates)
        if has_duplicates:
            dupes = index[index.duplicated()].unique().tolist()
            issues.append(f"Duplicate index values: {dupes[:5]}")

        is_monotonic = bool(index.is_monotonic_increasing)
        if not is_monotonic:
            issues.append("Index is not increasing")

        freq = None
        is_evenly_spaced = True
        if n >= 3 and is_monotonic and not has_duplicates:
            is_evenly_spaced, freq = self._check_spacing(index)
            if not is_evenly_spaced:
                issues.append("Index is not evenly spaced")
        elif isinstance(index, (pd.DatetimeIndex, pd.PeriodIndex)) and index.freq is not None:
            freq = index.freqstr

        return IndexReport(
            length=n,
            is_monotonic=is_monotonic,
            has_duplicates=has_duplicates,
            is_evenly_spaced=is_evenly_spaced,
            freq=freq,
            issues=issues,
        )

    def _check_spacing(self, index: pd.Index) -> tuple[bool, Optional[str]]:
        """Return (evenly_spaced, freq string) for an index of length >= 3."""
        if isinstance(index, pd.DatetimeIndex):
            if index.freq is not None:
                return True, index.freqstr
            freq = pd.infer_freq(index)
            return freq is not None, freq

        if isinstance(index, pd.PeriodIndex):
            steps = np.diff(index.asi8)
            return bool((steps == steps[0]).all()), index.freqstr

        if pd.api.types.is_numeric_dtype(index.dtype):
            steps = np.diff(index.to_numpy(dtype=float))
            return bool(np.allclose(steps, steps[0])), None

        logger.warning(f"Cannot check spacing of index dtype {index.dtype}")
        return False, None

    def validate_index(self, index: pd.Index) -> IndexReport:
        """
        Check an index and raise if it cannot carry a time series.

        Raises:
            ValueError: If the index has duplicates, is not increasing or is
                not evenly spaced
        """
        report = self.check_index(index)
        if not report.is_valid:
            raise ValueError(f"Invalid time series index: {'; '.join(report.issues)}")
        return report

    def validate_values(self, values: pd.Series) -> None:
        """
        Reject infinite observations. Undefined (NA) values are allowed.

        Raises:
            ValueError: If any defined value is infinite
        """
        defined = values.dropna().to_numpy(dtype=float)
        if np.isinf(defined).any():
            raise ValueError("Time series values must be finite")
