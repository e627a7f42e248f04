"""Lag operator, transformations and calendar utilities."""

from .lags import lag, lagged_pair, naive_forecast
from .transformations import sqrt_transform, log_transform, calendar_adjust, apply_transform
from .calendar import days_in_month

__all__ = [
    "lag",
    "lagged_pair",
    "naive_forecast",
    "sqrt_transform",
    "log_transform",
    "calendar_adjust",
    "apply_transform",
    "days_in_month",
]
