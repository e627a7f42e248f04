"""Error handling, logging, configuration and serialization utilities."""

from series_analytics.utils.config_manager import ConfigManager, load_analysis_config
from series_analytics.utils.logging_config import setup_logging

__all__ = ["ConfigManager", "load_analysis_config", "setup_logging"]
