"""
Serialization utilities for analysis reports.
"""

import json
import logging
from pathlib import Path
from typing import Any, Union
from datetime import datetime
import pandas as pd
import numpy as np

logger = logging.getLogger(__name__)


class DateTimeEncoder(json.JSONEncoder):
    """JSON encoder that handles datetime, period, numpy and NA values."""
    def default(self, obj):
        if isinstance(obj, (datetime, pd.Timestamp)):
            return obj.isoformat()
        if isinstance(obj, pd.Period):
            return str(obj)
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if obj is pd.NA:
            return None
        return super().default(obj)


def save_json(data: Any, path: Union[str, Path], **kwargs) -> None:
    """Save data to JSON with datetime support."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        json.dump(data, f, cls=DateTimeEncoder, indent=2, **kwargs)
    logger.debug(f"Saved JSON to {path}")


def load_json(path: Union[str, Path]) -> Any:
    """Load data from JSON."""
    with open(path, 'r') as f:
        return json.load(f)
