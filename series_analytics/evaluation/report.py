"""Config-driven analysis of a single time series."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from series_analytics.data.structs import TimeSeries
from series_analytics.evaluation.autocorrelation import AutocorrelationResult, acf
from series_analytics.evaluation.metrics import AccuracyResult, evaluate_accuracy
from series_analytics.evaluation.statistics import DescriptiveSummary, describe
from series_analytics.features.calendar import days_in_month
from series_analytics.features.lags import naive_forecast
from series_analytics.features.transformations import apply_transform, calendar_adjust
from series_analytics.utils.config_manager import ConfigManager, load_analysis_config
from series_analytics.utils.logging_config import setup_logging
from series_analytics.utils.serialization import save_json

logger = logging.getLogger(__name__)


@dataclass
class AnalysisReport:
    """Results of analyzing one series."""
    series_name: Optional[str]
    n_periods: int
    summary: DescriptiveSummary
    autocorrelation: AutocorrelationResult
    accuracy: AccuracyResult
    significant_lags: List[int]
    critical_bound: float
    config: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "series_name": self.series_name,
            "n_periods": self.n_periods,
            "summary": self.summary.to_dict(),
            "autocorrelation": self.autocorrelation.to_dict(),
            "critical_bound": self.critical_bound,
            "significant_lags": self.significant_lags,
            "naive_accuracy": self.accuracy.to_dict(),
            "config": self.config,
        }

    def save(self, path: Union[str, Path]) -> None:
        """Write the report as JSON."""
        save_json(self.to_dict(), path)
        logger.info(f"Analysis report saved to {path}")


class SeriesAnalyzer:
    """
    Runs the lag / statistics / ACF / accuracy pipeline on a series.

    Steps, in order: optional calendar adjustment (days in month), optional
    variance-stabilizing transform, descriptive statistics of the observed
    values, ACF up to acf.max_lag, and accuracy of the naive forecast with
    lag accuracy.period.
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        config_manager: Optional[ConfigManager] = None,
    ):
        """
        Initialize SeriesAnalyzer.

        Args:
            config: Overrides merged over the packaged defaults
            config_manager: ConfigManager used to load and validate config
        """
        self.config_manager = config_manager or ConfigManager()
        self.config = load_analysis_config(config, manager=self.config_manager)

    def configure_logging(self) -> None:
        """Configure logging from the logging section of the config."""
        setup_logging(
            log_level=self.config_manager.get_value(self.config, "logging.level", "INFO"),
            log_dir=self.config_manager.get_value(self.config, "logging.log_dir"),
        )

    def prepare(self, series: TimeSeries) -> TimeSeries:
        """Apply the configured calendar adjustment and transform."""
        get = self.config_manager.get_value
        if get(self.config, "transform.calendar_adjust", False):
            series = calendar_adjust(series, days_in_month(series.index))
            logger.info("Applied days-in-month calendar adjustment")
        return apply_transform(series, get(self.config, "transform.method", "none"))

    def analyze(self, series: TimeSeries) -> AnalysisReport:
        """
        Analyze a series.

        Args:
            series: Source series

        Returns:
            AnalysisReport; domain errors from any step propagate unchanged
        """
        get = self.config_manager.get_value
        max_lag = get(self.config, "acf.max_lag")
        z = get(self.config, "acf.z", 1.96)
        period = get(self.config, "accuracy.period", 1)

        logger.info(
            f"Analyzing series '{series.name}' ({len(series)} periods)",
            extra={"props": {"series": series.name, "max_lag": max_lag, "period": period}},
        )
        prepared = self.prepare(series)

        summary = describe(prepared.observed())
        correlogram = acf(prepared, max_lag)
        naive = evaluate_accuracy(naive_forecast(prepared, period=period))

        return AnalysisReport(
            series_name=series.name,
            n_periods=len(series),
            summary=summary,
            autocorrelation=correlogram,
            accuracy=naive,
            significant_lags=correlogram.significant_lags(z),
            critical_bound=correlogram.critical_bound(z),
            config=self.config,
        )
