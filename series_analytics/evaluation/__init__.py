"""Descriptive statistics, autocorrelation and forecast accuracy."""

from series_analytics.evaluation.statistics import DescriptiveSummary, describe
from series_analytics.evaluation.autocorrelation import AutocorrelationResult, acf
from series_analytics.evaluation.metrics import AccuracyResult, accuracy, evaluate_accuracy
from series_analytics.evaluation.report import AnalysisReport, SeriesAnalyzer

__all__ = [
    "DescriptiveSummary",
    "describe",
    "AutocorrelationResult",
    "acf",
    "AccuracyResult",
    "accuracy",
    "evaluate_accuracy",
    "AnalysisReport",
    "SeriesAnalyzer",
]
