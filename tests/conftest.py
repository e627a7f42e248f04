"""Pytest configuration and shared fixtures."""

import logging

import pytest
import pandas as pd
import numpy as np

from series_analytics.data.structs import TimeSeries


@pytest.fixture
def short_series():
    """Three consecutive monthly observations."""
    return TimeSeries.from_values([10, 12, 14], start="2021-01", freq="M", name="short")


@pytest.fixture
def seasonal_series():
    """Three years of a pure monthly cycle with period 12."""
    t = np.arange(36)
    values = 100 + 10 * np.sin(2 * np.pi * t / 12)
    return TimeSeries.from_values(values, start="2018-01", freq="M", name="seasonal")


@pytest.fixture
def production_series():
    """Four years of positive monthly production with trend and seasonality."""
    t = np.arange(48)
    values = 200 + 2 * t + 20 * np.sin(2 * np.pi * t / 12)
    return TimeSeries.from_values(values, start="2016-01", freq="M", name="production")


@pytest.fixture
def sample_monthly_df():
    """Create a sample monthly DataFrame as a dataset provider would supply it."""
    return pd.DataFrame({
        "month": ["2020-03", "2020-01", "2020-02", "2020-04", "2020-05"],
        "production": [130.0, 110.0, np.nan, 125.0, 140.0],
        "region": ["north"] * 5,
    })


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
