"""
Constants for the codingkeys package.

This module consolidates constant definitions used by the naming engine,
the renderer and the configuration layer.
"""

from __future__ import annotations

import string


# =============================================================================
# Boundary Detection
# =============================================================================

# A lowercase letter or digit followed by an uppercase letter.
CAMEL_CASE_PATTERN = r'([a-z0-9])([A-Z])'
SNAKE_CASE_REPLACEMENT = r'\1_\2'
HTTP_HEADER_REPLACEMENT = r'\1-\2'

HTTP_HEADER_SEPARATOR = "-"

# ASCII-only case tables; str.lower()/upper() would touch non-ASCII letters.
ASCII_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
ASCII_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_ENUM_NAME = "CodingKeys"
DEFAULT_RAW_TYPE = "String"
DEFAULT_KEY_PROTOCOL = "CodingKey"
DEFAULT_INDENT_SIZE = 4
CODING_KEYS_TEMPLATE = "coding_keys.j2"

# Legacy spellings accepted for style values.
STYLE_ALIASES = {
    "httpHeader": "httpHeaderCase",
}


# =============================================================================
# Configuration
# =============================================================================

CONFIG_FILE_NAMES = ["codingkeys.yaml", "codingkeys.yml", "codingkeys.json"]
DEFAULT_LOG_FILE = "codingkeys.log"
