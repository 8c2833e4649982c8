"""
Naming Styles and Transformation.

This package provides the naming engine used to derive wire keys:
- NamingStyle: closed set of supported styles
- transform: per-identifier style application
- parse_style: lenient resolution of caller-supplied style values
"""

from .styles import (
    NamingStyle,
    transform,
    parse_style,
    style_values,
    ascii_lower,
    ascii_upper,
    capitalize_first,
    decapitalize_first,
    insert_boundaries,
    to_snake_case,
    to_camel_case,
    to_http_header_case,
)

__all__ = [
    "NamingStyle",
    "transform",
    "parse_style",
    "style_values",
    "ascii_lower",
    "ascii_upper",
    "capitalize_first",
    "decapitalize_first",
    "insert_boundaries",
    "to_snake_case",
    "to_camel_case",
    "to_http_header_case",
]
