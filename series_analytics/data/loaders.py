"""Loading utilities that turn tabular datasets into TimeSeries."""

from typing import Dict, Optional, Any, List
from dataclasses import dataclass
import logging
from pathlib import Path

import pandas as pd

from series_analytics.data.structs import TimeSeries

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of schema validation."""
    is_valid: bool
    errors: List[str]
    warnings: List[str]
    schema_violations: Dict[str, str]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "is_valid": self.is_valid,
            "errors": self.errors,
            "warnings": self.warnings,
            "schema_violations": self.schema_violations,
        }


class DataLoader:
    """Builds TimeSeries from DataFrames or CSV files with schema validation."""

    def load_csv(
        self,
        path: str,
        time_col: str,
        value_col: str,
        freq: Optional[str] = None,
        schema: Optional[Dict[str, str]] = None,
    ) -> TimeSeries:
        """
        Load one series from a CSV file.

        Args:
            path: Path to the CSV file
            time_col: Column holding the time stamps or period labels
            value_col: Column holding the observations
            freq: Period frequency (e.g. 'M'); a PeriodIndex is built when given
            schema: Expected schema as {column_name: dtype_string}

        Returns:
            TimeSeries named after value_col

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If schema validation fails
        """
        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"CSV file not found: {path}")

        df = pd.read_csv(file_path)
        logger.info(f"Loaded {len(df)} rows from {path}")

        if schema:
            result = self.validate_schema(df, schema)
            if not result.is_valid:
                error_msg = "; ".join(result.errors)
                raise ValueError(f"Schema validation failed: {error_msg}")

        return self.from_frame(df, time_col, value_col, freq=freq)

    def from_frame(
        self,
        df: pd.DataFrame,
        time_col: str,
        value_col: str,
        freq: Optional[str] = None,
    ) -> TimeSeries:
        """
        Build a TimeSeries from two columns of a DataFrame.

        Rows are sorted by time; missing observations become undefined.

        Args:
            df: Source table
            time_col: Column holding the time stamps or period labels
            value_col: Column holding the observations
            freq: Period frequency; a PeriodIndex is built when given

        Returns:
            TimeSeries named after value_col
        """
        missing = [c for c in (time_col, value_col) if c not in df.columns]
        if missing:
            raise ValueError(f"Missing required columns: {missing}")

        index = pd.DatetimeIndex(pd.to_datetime(df[time_col]))
        if freq is not None:
            index = index.to_period(freq)

        values = pd.Series(
            pd.to_numeric(df[value_col], errors="raise").to_numpy(dtype=float, na_value=float("nan")),
            index=index,
            name=value_col,
        ).sort_index()
        return TimeSeries(values)

    def validate_schema(
        self,
        df: pd.DataFrame,
        schema: Dict[str, str]
    ) -> ValidationResult:
        """
        Validate DataFrame against expected schema.

        Args:
            df: DataFrame to validate
            schema: Expected schema as {column_name: dtype_string}

        Returns:
            ValidationResult with validation details
        """
        errors: List[str] = []
        warnings: List[str] = []
        schema_violations: Dict[str, str] = {}

        for col in schema.keys():
            if col not in df.columns:
                errors.append(f"Missing required column: {col}")
                schema_violations[col] = "missing"

        extra_cols = set(df.columns) - set(schema.keys())
        if extra_cols:
            warnings.append(f"Extra columns found: {sorted(extra_cols)}")

        for col, expected_dtype in schema.items():
            if col in df.columns:
                actual_dtype = str(df[col].dtype)
                if not self._dtype_compatible(actual_dtype, expected_dtype):
                    errors.append(
                        f"Column '{col}' has dtype '{actual_dtype}', "
                        f"expected '{expected_dtype}'"
                    )
                    schema_violations[col] = (
                        f"dtype_mismatch: {actual_dtype} != {expected_dtype}"
                    )

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            schema_violations=schema_violations,
        )

    def _dtype_compatible(self, actual: str, expected: str) -> bool:
        """Check if actual dtype is compatible with expected dtype."""
        actual_norm = actual.lower().replace(" ", "")
        expected_norm = expected.lower().replace(" ", "")

        if actual_norm == expected_norm:
            return True

        numeric_types = {"float64", "float32", "float", "int64", "int32", "int"}
        if actual_norm in numeric_types and expected_norm in numeric_types:
            return True

        text_types = {"object", "str", "string"}
        if actual_norm in text_types and expected_norm in text_types:
            return True

        return False
