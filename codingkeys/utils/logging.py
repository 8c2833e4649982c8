"""
Logging configuration and utilities.

This module provides centralized logging configuration for the
codingkeys package with appropriate formatting and levels.
"""

import logging
import os
from typing import Optional, Sequence


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the codingkeys package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
    """
    if level is None:
        level = os.environ.get("CODINGKEYS_LOG_LEVEL", "INFO")

    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("codingkeys")
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    if name == "codingkeys" or name.startswith("codingkeys."):
        return logging.getLogger(name)
    return logging.getLogger(f"codingkeys.{name}")


class CodingKeysLogger:
    """
    Domain-specific logging for the key generation pipeline.

    Wraps a package logger with helpers for the events a generation
    request goes through: start, style resolution, collisions, result.
    """

    def __init__(self, name: str):
        """
        Initialize logger for specific component.

        Args:
            name: Component name for logging context
        """
        self.logger = get_logger(name)

    def log_generation_start(self, declaration_name: str, member_count: int, style: str) -> None:
        """
        Log beginning of a generation request.

        Args:
            declaration_name: Name of the declaration being processed
            member_count: Number of declared members
            style: Naming style value in effect
        """
        self.logger.debug(
            f"Generating coding keys for '{declaration_name}' ({member_count} members, style={style})"
        )

    def log_style_fallback(self, requested: object) -> None:
        """
        Log that an unknown style value was replaced by 'original'.

        Args:
            requested: The value the caller supplied
        """
        self.logger.warning(f"Unrecognized naming style {requested!r}, falling back to 'original'")

    def log_collision(self, declaration_name: str, wire_key: str, names: Sequence[str]) -> None:
        """
        Log a wire key shared by several members.

        Args:
            declaration_name: Name of the declaration being processed
            wire_key: The shared wire key
            names: Original member names mapping to it
        """
        self.logger.warning(
            f"Key collision in '{declaration_name}': {list(names)} all map to '{wire_key}'"
        )

    def log_generation_skipped(self, declaration_name: str) -> None:
        """
        Log that no construct was emitted because nothing is eligible.

        Args:
            declaration_name: Name of the declaration being processed
        """
        self.logger.debug(f"No stored members in '{declaration_name}', skipping CodingKeys")

    def log_mapping_summary(self, declaration_name: str, total: int, overrides: int) -> None:
        """
        Log the size of a synthesized mapping.

        Args:
            declaration_name: Name of the declaration being processed
            total: Number of entries in the mapping
            overrides: Number of entries with an explicit wire key
        """
        self.logger.info(
            f"CodingKeys for '{declaration_name}': {total} keys, {overrides} overrides"
        )


# Initialize logging on module import
setup_logging()
