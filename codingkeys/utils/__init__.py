"""
Utils package for codingkeys.

This module provides logging, error types, constants and configuration
shared by the naming engine and the generator.
"""

from .exceptions import (
    CodingKeysError,
    EmptyIdentifierError,
    KeyCollisionError,
    TemplateRenderError,
    ConfigurationError,
)

from .config import (
    CodingKeysConfig,
    GenerationConfig,
    LoggingConfig,
    create_config_from_dict,
    validate_config,
    apply_logging_config,
    get_config,
    set_config,
    load_config,
)

from .logging import get_logger, setup_logging, CodingKeysLogger

__all__ = [
    # Exceptions
    "CodingKeysError",
    "EmptyIdentifierError",
    "KeyCollisionError",
    "TemplateRenderError",
    "ConfigurationError",

    # Configuration
    "CodingKeysConfig",
    "GenerationConfig",
    "LoggingConfig",
    "create_config_from_dict",
    "validate_config",
    "apply_logging_config",
    "get_config",
    "set_config",
    "load_config",

    # Logging
    "get_logger",
    "setup_logging",
    "CodingKeysLogger",
]
