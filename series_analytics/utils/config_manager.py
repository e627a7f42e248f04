"""
Configuration management utilities.
"""

import yaml
import json
import logging
import jsonschema
from pathlib import Path
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

PACKAGE_CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"
ANALYSIS_CONFIG = "analysis_config.yaml"
ANALYSIS_SCHEMA = "analysis_config_schema.json"


class ConfigManager:
    """
    Manages loading, validation, and merging of configurations.
    """

    def __init__(self, config_dir: Optional[str] = None, schema_dir: Optional[str] = None):
        self.config_dir = Path(config_dir) if config_dir else PACKAGE_CONFIG_DIR
        self.schema_dir = Path(schema_dir) if schema_dir else self.config_dir / "schemas"

    def load_config(self, config_name: str, schema_name: Optional[str] = None) -> Dict[str, Any]:
        """
        Load a configuration file (YAML or JSON).
        Optionally validate against a schema.

        Args:
            config_name: Name of config file (e.g. 'analysis_config.yaml')
            schema_name: Name of schema file (e.g. 'analysis_config_schema.json')

        Returns:
            Loaded configuration dictionary
        """
        config_path = self.config_dir / config_name

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "r") as f:
            if config_path.suffix in (".yaml", ".yml"):
                config = yaml.safe_load(f) or {}
            elif config_path.suffix == ".json":
                config = json.load(f)
            else:
                raise ValueError(f"Unsupported configuration format: {config_path.suffix}")

        if schema_name:
            self.validate_config(config, schema_name)

        return config

    def validate_config(self, config: Dict[str, Any], schema_name: str) -> None:
        """
        Validate configuration against a schema.

        Args:
            config: Configuration dictionary
            schema_name: Name of schema file

        Raises:
            FileNotFoundError: If the schema file is missing
            ValueError: If the configuration does not match the schema
        """
        schema_path = self.schema_dir / schema_name

        if not schema_path.exists():
            raise FileNotFoundError(f"Schema file not found: {schema_path}")

        with open(schema_path, "r") as f:
            schema = json.load(f)

        try:
            jsonschema.validate(instance=config, schema=schema)
        except jsonschema.exceptions.ValidationError as e:
            path_str = " -> ".join(str(p) for p in e.path) if e.path else "root"
            error_msg = f"Configuration validation failed at '{path_str}': {e.message}"
            logger.error(error_msg)
            raise ValueError(error_msg) from e

        logger.info(f"Configuration successfully validated against {schema_name}")

    def merge_configs(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """
        Deep merge two configurations.

        Args:
            base: Base configuration
            override: Override configuration

        Returns:
            Merged configuration
        """
        merged = base.copy()
        for key, value in override.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = self.merge_configs(merged[key], value)
            else:
                merged[key] = value
        return merged

    def get_value(self, config: Dict[str, Any], path: str, default: Any = None) -> Any:
        """
        Get a value from configuration using dot notation.

        Args:
            config: Configuration dictionary
            path: Dot-separated path (e.g., 'acf.max_lag')
            default: Default value if path not found

        Returns:
            Value at path or default
        """
        current = config
        for key in path.split('.'):
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default
        return current

    def set_value(self, config: Dict[str, Any], path: str, value: Any) -> None:
        """
        Set a value in configuration using dot notation.
        Creates intermediate dictionaries if they don't exist.

        Args:
            config: Configuration dictionary (modified in-place)
            path: Dot-separated path
            value: Value to set
        """
        keys = path.split('.')
        current = config

        for key in keys[:-1]:
            if key not in current or not isinstance(current[key], dict):
                current[key] = {}
            current = current[key]

        current[keys[-1]] = value


def load_analysis_config(
    overrides: Optional[Dict[str, Any]] = None,
    manager: Optional[ConfigManager] = None,
) -> Dict[str, Any]:
    """
    Load the packaged analysis defaults, merge overrides and validate.

    Args:
        overrides: Partial configuration to merge over the defaults
        manager: ConfigManager to use (defaults to the packaged config dir)

    Returns:
        Validated analysis configuration
    """
    manager = manager or ConfigManager()
    config = manager.load_config(ANALYSIS_CONFIG)
    if overrides:
        config = manager.merge_configs(config, overrides)
    manager.validate_config(config, ANALYSIS_SCHEMA)
    return config
