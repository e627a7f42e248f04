"""Core data structures for series analytics."""

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from series_analytics.data.validators import SeriesValidator
from series_analytics.utils.error_handling import MisalignedInputError, MissingValueError

ArrayLike = Union["TimeSeries", pd.Series, np.ndarray, Sequence[Any]]


def as_float_array(values: ArrayLike) -> np.ndarray:
    """
    Convert a sequence of observations to a 1-D float array.

    Undefined entries (None, pd.NA, NaN) become NaN so callers can detect
    and reject or filter them explicitly.
    """
    if isinstance(values, TimeSeries):
        values = values.data
    if isinstance(values, (pd.Series, pd.Index)):
        arr = values.to_numpy(dtype=float, na_value=np.nan)
    elif isinstance(values, np.ndarray) and values.dtype.kind in "fiub":
        arr = values.astype(float)
    else:
        arr = pd.Series(list(values), dtype=object).to_numpy(dtype=float, na_value=np.nan)

    if arr.ndim != 1:
        raise ValueError(f"Expected a 1-D sequence, got shape {arr.shape}")
    return arr


def index_of(values: ArrayLike) -> Optional[pd.Index]:
    """Return the index of a labeled sequence, or None for plain sequences."""
    if isinstance(values, TimeSeries):
        return values.index
    if isinstance(values, pd.Series):
        return values.index
    return None


@dataclass(frozen=True, eq=False)
class TimeSeries:
    """
    Immutable ordered sequence of observations on an evenly spaced index.

    Undefined observations are stored as pd.NA in a nullable Float64 series.
    They are never treated as zero; aggregates must filter or reject them.

    Attributes:
        data: Observations indexed by time (copied and converted on construction)
    """
    data: pd.Series

    def __post_init__(self):
        """Normalize values to Float64 and validate the index."""
        if not isinstance(self.data, pd.Series):
            raise TypeError(f"TimeSeries expects a pandas Series, got {type(self.data).__name__}")

        validator = SeriesValidator()
        report = validator.validate_index(self.data.index)

        raw = self.data.to_numpy(dtype=float, na_value=np.nan)
        data = pd.Series(
            pd.array(raw, dtype="Float64"),
            index=self.data.index.copy(),
            name=self.data.name,
        )
        validator.validate_values(data)

        object.__setattr__(self, "data", data)
        object.__setattr__(self, "_freq", report.freq)

    @classmethod
    def from_values(
        cls,
        values: Sequence[Any],
        index: Optional[pd.Index] = None,
        start: Optional[Any] = None,
        freq: Optional[str] = None,
        name: Optional[str] = None,
    ) -> "TimeSeries":
        """
        Build a series from literal observations.

        Args:
            values: Observations; None or NaN marks an undefined observation
            index: Explicit index (takes precedence over start/freq)
            start: First period, used with freq to build a PeriodIndex
            freq: Period frequency (e.g. 'M' for monthly, 'Q', 'Y')
            name: Series name

        Returns:
            New TimeSeries
        """
        arr = as_float_array(values)
        if index is None:
            if start is not None:
                index = pd.period_range(start=start, periods=len(arr), freq=freq)
            else:
                index = pd.RangeIndex(len(arr))
        if len(index) != len(arr):
            raise ValueError(
                f"Length mismatch: index ({len(index)}) vs values ({len(arr)})"
            )
        return cls(pd.Series(arr, index=index, name=name))

    def with_values(self, values: Sequence[Any]) -> "TimeSeries":
        """Return a new series on the same index with replaced values."""
        return TimeSeries.from_values(values, index=self.index, name=self.name)

    @property
    def series(self) -> pd.Series:
        """Copy of the underlying Float64 series."""
        return self.data.copy()

    @property
    def index(self) -> pd.Index:
        return self.data.index

    @property
    def name(self) -> Optional[str]:
        return self.data.name

    @property
    def freq(self) -> Optional[str]:
        return self._freq

    @property
    def n_undefined(self) -> int:
        return int(self.data.isna().sum())

    def is_defined(self) -> np.ndarray:
        """Boolean mask of positions holding an observation."""
        return self.data.notna().to_numpy(dtype=bool)

    def observed(self) -> np.ndarray:
        """Defined observations only, in index order."""
        return self.data.dropna().to_numpy(dtype=float)

    def to_list(self) -> List[Optional[float]]:
        """Observations as floats, with None for undefined positions."""
        return [None if pd.isna(v) else float(v) for v in self.data]

    def equals(self, other: "TimeSeries") -> bool:
        """True if index, values and undefined positions all match."""
        return isinstance(other, TimeSeries) and self.data.equals(other.data)

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, position: int) -> Optional[float]:
        value = self.data.iloc[position]
        return None if pd.isna(value) else float(value)

    def __repr__(self) -> str:
        return f"TimeSeries(name={self.name!r}, length={len(self)}, freq={self.freq!r})"


@dataclass(frozen=True, eq=False)
class LaggedPair:
    """
    A series paired with its own lag-k copy.

    Only positions where both sides are defined are exposed; the first k
    positions are always excluded.

    Attributes:
        original: Source series
        lagged: Source series shifted by k
        k: Lag
    """
    original: TimeSeries
    lagged: TimeSeries
    k: int

    def __post_init__(self):
        if not self.original.index.equals(self.lagged.index):
            raise MisalignedInputError("LaggedPair sides must share the same index")

    def mask(self) -> np.ndarray:
        """Positions where both the original and lagged values are defined."""
        return self.original.is_defined() & self.lagged.is_defined()

    def aligned(self) -> Tuple[np.ndarray, np.ndarray]:
        """Return (original, lagged) float arrays restricted to defined pairs."""
        keep = self.mask()
        return as_float_array(self.original)[keep], as_float_array(self.lagged)[keep]

    def pairs(self) -> List[Tuple[Any, float, float]]:
        """List of (index label, original value, lagged value) for defined pairs."""
        x, y = self.aligned()
        labels = self.original.index[self.mask()]
        return list(zip(labels, x.tolist(), y.tolist()))

    def __len__(self) -> int:
        return int(self.mask().sum())


@dataclass(frozen=True, eq=False)
class AccuracyInput:
    """
    Equal-length, fully-defined actual and forecast sequences aligned by position.

    Attributes:
        actual: Observed values
        forecast: Forecast values for the same periods
        index: Optional period labels shared by both sequences
    """
    actual: np.ndarray
    forecast: np.ndarray
    index: Optional[pd.Index] = None

    def __post_init__(self):
        actual = as_float_array(self.actual)
        forecast = as_float_array(self.forecast)

        if len(actual) != len(forecast):
            raise MisalignedInputError(
                f"Length mismatch: actual ({len(actual)}) vs forecast ({len(forecast)})"
            )
        if self.index is not None and len(self.index) != len(actual):
            raise MisalignedInputError(
                f"Length mismatch: index ({len(self.index)}) vs actual ({len(actual)})"
            )
        for label, arr in (("actual", actual), ("forecast", forecast)):
            missing = np.flatnonzero(np.isnan(arr))
            if len(missing) > 0:
                raise MissingValueError(
                    f"{label} has undefined values at positions {missing.tolist()}; "
                    "filter them before building an AccuracyInput"
                )

        actual.setflags(write=False)
        forecast.setflags(write=False)
        object.__setattr__(self, "actual", actual)
        object.__setattr__(self, "forecast", forecast)

    def __len__(self) -> int:
        return len(self.actual)
