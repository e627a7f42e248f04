"""Time series value types, validation and loading."""

from .structs import TimeSeries, LaggedPair, AccuracyInput
from .validators import SeriesValidator, IndexReport
from .loaders import DataLoader, ValidationResult

__all__ = [
    "TimeSeries",
    "LaggedPair",
    "AccuracyInput",
    "SeriesValidator",
    "IndexReport",
    "DataLoader",
    "ValidationResult",
]
