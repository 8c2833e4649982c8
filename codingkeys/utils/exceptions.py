"""
Custom exception definitions.

This module defines the exception hierarchy for codingkeys-specific
errors raised while generating key mappings.
"""

from typing import Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from ..codegen.types import KeyCollision


class CodingKeysError(Exception):
    """
    Base exception for all codingkeys-related errors.

    This is the root exception class for all package-specific
    errors, providing common functionality and error handling.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize codingkeys error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class EmptyIdentifierError(CodingKeysError, ValueError):
    """Raised when an empty string is used where an identifier is required."""

    def __init__(self, context: str = "identifier"):
        super().__init__(f"Empty {context} is not allowed", {"context": context})
        self.context = context


class KeyCollisionError(CodingKeysError):
    """
    Raised when distinct members map to the same wire key.

    Encoding such a type would silently drop all but one of the
    colliding fields, so the generation request is failed instead.
    """

    def __init__(self, collisions: Sequence["KeyCollision"], declaration_name: str = ""):
        """
        Initialize key collision error.

        Args:
            collisions: Every collision found in the mapping
            declaration_name: Declaration the mapping was generated for
        """
        summary = "; ".join(
            f"{', '.join(c.original_names)} -> '{c.wire_key}'" for c in collisions
        )
        target = f" in '{declaration_name}'" if declaration_name else ""
        message = f"Wire key collision{target}: {summary}"

        super().__init__(message, {"collisions": len(collisions)})
        self.collisions = tuple(collisions)
        self.declaration_name = declaration_name

    def colliding_keys(self) -> list:
        """
        Get the wire keys that were produced more than once.

        Returns:
            List of wire key strings in order of first appearance
        """
        return [collision.wire_key for collision in self.collisions]


class TemplateRenderError(CodingKeysError):
    """Raised when the CodingKeys template cannot be rendered."""

    def __init__(self, message: str, template_name: str = ""):
        details = {}
        if template_name:
            details["template"] = template_name

        super().__init__(message, details)
        self.template_name = template_name


class ConfigurationError(CodingKeysError):
    """Raised when configuration values are invalid."""

    def __init__(self, message: str, config_file: Optional[str] = None):
        details = {}
        if config_file is not None:
            details["config_file"] = config_file

        super().__init__(message, details)
        self.config_file = config_file
