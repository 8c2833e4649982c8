"""
Naming Styles and the Style Transformer.

This module defines the closed set of naming styles a CodingKeys table can
be generated with, and the transformation that turns a declared member name
into its wire key under a given style.

Boundary rule shared by snake_case and httpHeaderCase: a separator goes in
front of every uppercase letter whose predecessor is a lowercase letter or a
digit. A leading capital never gets one, and neither does a capital that
follows another capital, so acronyms stay intact (``userID`` -> ``user_id``,
``URLPath`` -> ``urlpath``).
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional, Union

from ..utils.constants import (
    ASCII_TO_LOWER,
    ASCII_TO_UPPER,
    CAMEL_CASE_PATTERN,
    HTTP_HEADER_REPLACEMENT,
    HTTP_HEADER_SEPARATOR,
    SNAKE_CASE_REPLACEMENT,
    STYLE_ALIASES,
)
from ..utils.exceptions import EmptyIdentifierError
from ..utils.logging import CodingKeysLogger

_log = CodingKeysLogger(__name__)

_BOUNDARY_RE = re.compile(CAMEL_CASE_PATTERN)


class NamingStyle(Enum):
    """Naming policy applied to every member of a declaration."""

    ORIGINAL = "original"
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    SNAKE_CASE = "snake_case"
    CAMEL_CASE = "camelCase"
    HTTP_HEADER_CASE = "httpHeaderCase"


# =============================================================================
# Character Helpers
# =============================================================================

def ascii_lower(text: str) -> str:
    """Lowercase ASCII letters only."""
    return text.translate(ASCII_TO_LOWER)


def ascii_upper(text: str) -> str:
    """Uppercase ASCII letters only."""
    return text.translate(ASCII_TO_UPPER)


def capitalize_first(text: str) -> str:
    """Uppercase the first character, leaving the rest untouched."""
    return ascii_upper(text[:1]) + text[1:]


def decapitalize_first(text: str) -> str:
    """Lowercase the first character, leaving the rest untouched."""
    return ascii_lower(text[:1]) + text[1:]


def insert_boundaries(name: str, separator: str) -> str:
    """
    Insert ``separator`` at every lowercase/digit -> uppercase transition.

    Args:
        name: Identifier to scan
        separator: String placed between the two characters

    Returns:
        The identifier with separators inserted, casing unchanged
    """
    return _BOUNDARY_RE.sub(lambda m: f"{m.group(1)}{separator}{m.group(2)}", name)


# =============================================================================
# Style Conversions
# =============================================================================

def to_snake_case(name: str) -> str:
    """Convert a camel-hump identifier to snake_case."""
    return ascii_lower(_BOUNDARY_RE.sub(SNAKE_CASE_REPLACEMENT, name))


def to_camel_case(name: str) -> str:
    """Decapitalize the first character only (``UserID`` -> ``userID``)."""
    return decapitalize_first(name)


def to_http_header_case(name: str) -> str:
    """Convert an identifier to Http-Header-Case (``cacheControl`` -> ``Cache-Control``)."""
    dashed = _BOUNDARY_RE.sub(HTTP_HEADER_REPLACEMENT, name)
    segments = [segment for segment in dashed.split(HTTP_HEADER_SEPARATOR) if segment]
    return HTTP_HEADER_SEPARATOR.join(capitalize_first(segment) for segment in segments)


def transform(name: str, style: NamingStyle) -> str:
    """
    Compute the wire key for ``name`` under ``style``.

    Args:
        name: Declared member name, must be non-empty
        style: Naming style to apply

    Returns:
        The transformed key

    Raises:
        EmptyIdentifierError: If ``name`` is empty
    """
    if not name:
        raise EmptyIdentifierError("member name")

    if style is NamingStyle.ORIGINAL:
        return name
    elif style is NamingStyle.LOWERCASE:
        return ascii_lower(name)
    elif style is NamingStyle.UPPERCASE:
        return ascii_upper(name)
    elif style is NamingStyle.SNAKE_CASE:
        return to_snake_case(name)
    elif style is NamingStyle.CAMEL_CASE:
        return to_camel_case(name)
    elif style is NamingStyle.HTTP_HEADER_CASE:
        return to_http_header_case(name)

    raise TypeError(f"Expected a NamingStyle, got {style!r}")


# =============================================================================
# Style Resolution
# =============================================================================

def parse_style(value: Optional[Union[str, NamingStyle]]) -> NamingStyle:
    """
    Resolve a caller-supplied style value to a NamingStyle.

    Accepts NamingStyle members, their string values, member-access
    spellings such as ``.snake_case`` and the legacy ``httpHeader`` alias.
    ``None`` selects ORIGINAL. Anything else also resolves to ORIGINAL,
    with a warning so that typos do not go unnoticed.
    """
    if value is None:
        return NamingStyle.ORIGINAL
    if isinstance(value, NamingStyle):
        return value

    if isinstance(value, str):
        key = value
        if key.startswith("."):
            key = key[1:]
        key = STYLE_ALIASES.get(key, key)
        try:
            return NamingStyle(key)
        except ValueError:
            pass

    _log.log_style_fallback(value)
    return NamingStyle.ORIGINAL


def style_values() -> list:
    """Return every recognized style value string, in definition order."""
    return [style.value for style in NamingStyle]
