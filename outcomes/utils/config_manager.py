"""
Configuration Manager for the outcomes package.

Settings are loaded from default values, environment variables
(``OUTCOMES_<SECTION>_<KEY>``) and JSON or YAML files. Domain rules such as
the accepted age range are constants of the domain layer, not configuration.
"""

import os
import json
from typing import Dict, Any, Union
from pathlib import Path
from dataclasses import dataclass, field, asdict
from functools import lru_cache

import yaml

from outcomes.utils.error_manager import ConfigurationError, ErrorCode

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_TRUE_VALUES = ["true", "1", "yes"]


@dataclass
class LoggingConfig:
    """Configuration settings for logging."""

    log_level: str = "WARNING"
    console_logging: bool = True
    format: str = DEFAULT_LOG_FORMAT

    def __post_init__(self):
        """Validate and normalise the log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if not isinstance(self.log_level, str):
            raise ConfigurationError(
                f"Invalid log level: {self.log_level!r}. Must be one of {valid_levels}"
            )
        if self.log_level.upper() not in valid_levels:
            raise ConfigurationError(
                f"Invalid log level: {self.log_level}. Must be one of {valid_levels}"
            )

        self.log_level = self.log_level.upper()


@dataclass
class DebugConfig:
    """Configuration settings for debugging."""

    global_debug: bool = False
    module_debug: Dict[str, bool] = field(default_factory=dict)

    def is_debug_enabled(self, module_name: str) -> bool:
        """
        Check if debug is enabled for a module.

        Args:
            module_name: Name of the module

        Returns:
            bool: Whether debug is enabled for the module
        """
        # First check environment variable
        env_var = f"OUTCOMES_DEBUG_{module_name.upper()}"
        if env_var in os.environ:
            return os.environ[env_var].lower() in _TRUE_VALUES

        # Then check module_debug dict
        if module_name in self.module_debug:
            return self.module_debug[module_name]

        # Fall back to global debug setting
        return self.global_debug


@dataclass
class OutcomesConfig:
    """Central configuration for the outcomes package."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    debug: DebugConfig = field(default_factory=DebugConfig)

    @classmethod
    def from_env(cls) -> "OutcomesConfig":
        """
        Create a configuration instance from environment variables.

        Returns:
            OutcomesConfig: Configuration instance with values from environment variables
        """
        config = cls()

        for env_name, env_value in os.environ.items():
            if not env_name.startswith("OUTCOMES_"):
                continue

            # Per-module debug flags are read lazily by DebugConfig
            if env_name.startswith("OUTCOMES_DEBUG_"):
                module_name = env_name.replace("OUTCOMES_DEBUG_", "", 1).lower()
                config.debug.module_debug[module_name] = env_value.lower() in _TRUE_VALUES
                continue

            if env_name == "OUTCOMES_DEBUG":
                config.debug.global_debug = env_value.lower() in _TRUE_VALUES
                continue

            parts = env_name.replace("OUTCOMES_", "", 1).lower().split("_", 1)
            if len(parts) != 2:
                continue

            section, key = parts
            if hasattr(config, section) and hasattr(getattr(config, section), key):
                section_obj = getattr(config, section)

                # Convert value to the type of the field's current value
                current_value = getattr(section_obj, key)
                if isinstance(current_value, bool):
                    new_value = env_value.lower() in _TRUE_VALUES
                elif isinstance(current_value, int):
                    new_value = int(env_value)
                else:
                    new_value = env_value

                setattr(section_obj, key, new_value)

        # Re-run validation on values assigned after construction
        config.logging.__post_init__()
        return config

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> "OutcomesConfig":
        """
        Load configuration from a JSON or YAML file.

        Args:
            file_path: Path to the configuration file

        Returns:
            OutcomesConfig: Configuration instance with values from the file
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {file_path}",
                code=ErrorCode.CONFIG_FILE_ERROR,
            )

        try:
            with file_path.open("r") as f:
                if file_path.suffix in (".yaml", ".yml"):
                    data = yaml.safe_load(f) or {}
                else:
                    data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in configuration file: {e}",
                code=ErrorCode.CONFIG_FILE_ERROR,
                cause=e,
            )
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}",
                code=ErrorCode.CONFIG_FILE_ERROR,
                cause=e,
            )
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration file: {file_path}",
                code=ErrorCode.CONFIG_FILE_ERROR,
                cause=e,
            )

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file must contain a mapping: {file_path}",
                code=ErrorCode.CONFIG_FILE_ERROR,
            )

        config = cls()

        for section_name, section_data in data.items():
            if not hasattr(config, section_name) or not isinstance(section_data, dict):
                continue

            section = getattr(config, section_name)
            for key, value in section_data.items():
                if hasattr(section, key):
                    setattr(section, key, value)

        config.logging.__post_init__()
        return config

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert configuration to a dictionary.

        Returns:
            Dict[str, Any]: Configuration as a nested dictionary
        """
        return {
            "logging": asdict(self.logging),
            "debug": {
                "global_debug": self.debug.global_debug,
                "module_debug": dict(self.debug.module_debug),
            },
        }

    def get_debug_mode(self, module_name: str) -> bool:
        """Get debug mode for a specific module."""
        return self.debug.is_debug_enabled(module_name)


@lru_cache(maxsize=None)
def get_config() -> OutcomesConfig:
    """
    Global configuration, built from the environment on first use.

    Raises:
        ConfigurationError: If an OUTCOMES_* variable holds an invalid value
    """
    return OutcomesConfig.from_env()


def get_debug_mode(module_name: str) -> bool:
    """Get debug mode for a specific module from the global configuration."""
    return get_config().get_debug_mode(module_name)


__all__ = [
    "ConfigurationError",
    "DebugConfig",
    "LoggingConfig",
    "OutcomesConfig",
    "get_config",
    "get_debug_mode",
]
