"""
Configuration System for codingkeys.

This module provides a unified configuration interface for key generation
and logging, loadable from a JSON or YAML file with environment overrides.
"""

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .constants import (
    CONFIG_FILE_NAMES,
    DEFAULT_ENUM_NAME,
    DEFAULT_INDENT_SIZE,
    DEFAULT_KEY_PROTOCOL,
    DEFAULT_LOG_FILE,
    DEFAULT_RAW_TYPE,
)
from .exceptions import ConfigurationError
from .logging import get_logger, setup_logging

logger = get_logger(__name__)


@dataclass
class GenerationConfig:
    """Key generation and rendering configuration."""

    default_style: str = "original"
    fail_on_collision: bool = True

    # Rendered construct
    enum_name: str = DEFAULT_ENUM_NAME
    raw_type: str = DEFAULT_RAW_TYPE
    key_protocol: str = DEFAULT_KEY_PROTOCOL
    indent_size: int = DEFAULT_INDENT_SIZE
    use_jinja: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    enable_file_logging: bool = False
    log_file: str = DEFAULT_LOG_FILE


class CodingKeysConfig:
    """
    Unified configuration manager for codingkeys.

    Reads a single JSON or YAML file. A missing file means defaults; a file
    that cannot be parsed is logged and also yields defaults.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, the current
                directory is searched for one of the default names.
        """
        self.config_file = self._get_config_file_path(config_file)
        self._config_data = self._load_config()

        self.generation = self._create_generation_config()
        self.logging = self._create_logging_config()
        validate_config(self)

    def _get_config_file_path(self, config_file: Optional[str]) -> Optional[Path]:
        """Get the configuration file path."""
        if config_file:
            return Path(config_file)

        for name in CONFIG_FILE_NAMES:
            candidate = Path.cwd() / name
            if candidate.exists():
                return candidate
        return None

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if self.config_file is None:
            return {}

        try:
            if self.config_file.exists():
                with open(self.config_file, "r") as f:
                    if self.config_file.suffix.lower() in [".yaml", ".yml"]:
                        config_data = yaml.safe_load(f) or {}
                    else:
                        config_data = json.load(f)
                if not isinstance(config_data, dict):
                    logger.error(
                        f"Configuration file {self.config_file} must contain a mapping, "
                        f"got {type(config_data).__name__}; using defaults"
                    )
                    return {}
                logger.info(f"Loaded configuration from {self.config_file}")
                return config_data
            else:
                logger.warning(f"Configuration file {self.config_file} not found, using defaults")
                return {}
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Failed to load configuration: {e}")
            return {}

    def _section(self, name: str) -> Dict[str, Any]:
        """Get a config section; empty or malformed sections count as absent."""
        data = self._config_data.get(name) or {}
        if not isinstance(data, dict):
            logger.error(f"Configuration section '{name}' must be a mapping, ignoring it")
            return {}
        return data

    def _create_generation_config(self) -> GenerationConfig:
        """Create generation configuration from loaded data."""
        gen_data = self._section("generation")

        # Environment variable override
        style = os.getenv("CODINGKEYS_STYLE") or gen_data.get("default_style", "original")

        return GenerationConfig(
            default_style=style,
            fail_on_collision=gen_data.get("fail_on_collision", True),
            enum_name=gen_data.get("enum_name", DEFAULT_ENUM_NAME),
            raw_type=gen_data.get("raw_type", DEFAULT_RAW_TYPE),
            key_protocol=gen_data.get("key_protocol", DEFAULT_KEY_PROTOCOL),
            indent_size=gen_data.get("indent_size", DEFAULT_INDENT_SIZE),
            use_jinja=gen_data.get("use_jinja", True),
        )

    def _create_logging_config(self) -> LoggingConfig:
        """Create logging configuration from loaded data."""
        log_data = self._section("logging")

        return LoggingConfig(
            level=log_data.get("level") or os.getenv("CODINGKEYS_LOG_LEVEL", "INFO"),
            enable_file_logging=log_data.get("enable_file_logging", False),
            log_file=log_data.get("log_file", DEFAULT_LOG_FILE),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert the configuration to a dictionary."""
        return {
            "version": "1.0",
            "generation": asdict(self.generation),
            "logging": asdict(self.logging),
        }

    def save_config(self, path: Optional[str] = None) -> None:
        """Save current configuration to file."""
        target = Path(path) if path else self.config_file
        if target is None:
            target = Path.cwd() / CONFIG_FILE_NAMES[-1]

        try:
            with open(target, "w") as f:
                if target.suffix.lower() in [".yaml", ".yml"]:
                    yaml.safe_dump(self.to_dict(), f, sort_keys=False)
                else:
                    json.dump(self.to_dict(), f, indent=2)
            self.config_file = target
            logger.info(f"Configuration saved to {target}")
        except OSError as e:
            logger.error(f"Failed to save configuration: {e}")


def create_config_from_dict(config_dict: Dict[str, Any]) -> CodingKeysConfig:
    """Create a configuration from a dictionary laid out like the config file."""
    if not isinstance(config_dict, dict):
        raise ConfigurationError(f"Configuration must be a mapping, got {type(config_dict).__name__}")

    config = CodingKeysConfig.__new__(CodingKeysConfig)
    config.config_file = None
    config._config_data = config_dict
    config.generation = config._create_generation_config()
    config.logging = config._create_logging_config()
    validate_config(config)
    return config


def validate_config(config: CodingKeysConfig) -> None:
    """Validate a configuration, raising ConfigurationError on bad values."""
    source = str(config.config_file) if config.config_file else None
    generation = config.generation

    indent_size = generation.indent_size
    if isinstance(indent_size, bool) or not isinstance(indent_size, int) or indent_size < 0:
        raise ConfigurationError("Indent size must be a non-negative integer", source)

    for field_name in ("enum_name", "raw_type", "key_protocol"):
        value = getattr(generation, field_name)
        if not isinstance(value, str) or not value.isidentifier():
            raise ConfigurationError(f"'{field_name}' must be an identifier, got {value!r}", source)

    if not isinstance(generation.default_style, str):
        raise ConfigurationError("Default style must be a string", source)

    if not isinstance(config.logging.level, str):
        raise ConfigurationError("Logging level must be a string", source)

    if config.logging.enable_file_logging and not config.logging.log_file:
        raise ConfigurationError("File logging is enabled but no log file is set", source)


def apply_logging_config(config: CodingKeysConfig) -> None:
    """Configure the package logger from the logging section."""
    log_config = config.logging
    log_file = log_config.log_file if log_config.enable_file_logging else None
    setup_logging(log_config.level, log_file)


# Global configuration instance
_global_config: Optional[CodingKeysConfig] = None


def get_config() -> CodingKeysConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = CodingKeysConfig()
        apply_logging_config(_global_config)
    return _global_config


def set_config(config: Optional[CodingKeysConfig]) -> None:
    """Set the global configuration instance."""
    global _global_config
    _global_config = config
    if config is not None:
        apply_logging_config(config)


def load_config(config_file: str) -> CodingKeysConfig:
    """Load configuration from a specific file."""
    return CodingKeysConfig(config_file)
