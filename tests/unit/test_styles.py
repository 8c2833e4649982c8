"""
Unit tests for naming styles and the style transformer.

Tests each NamingStyle conversion, the boundary detection rule shared by
snake_case and httpHeaderCase, and lenient style parsing.
"""

import logging

import pytest

from codingkeys.naming.styles import (
    NamingStyle,
    ascii_lower,
    ascii_upper,
    capitalize_first,
    decapitalize_first,
    insert_boundaries,
    parse_style,
    style_values,
    to_http_header_case,
    to_snake_case,
    transform,
)
from codingkeys.utils.exceptions import EmptyIdentifierError


SAMPLE_NAMES = ["firstName", "UserID", "age", "contentSecurityPolicy", "x1Y2", "URLPath"]


class TestOriginalStyle:
    """Test the identity style."""

    @pytest.mark.parametrize("name", SAMPLE_NAMES)
    def test_identity(self, name):
        assert transform(name, NamingStyle.ORIGINAL) == name


class TestCaseStyles:
    """Test lowercase and uppercase."""

    def test_lowercase(self):
        assert transform("firstName", NamingStyle.LOWERCASE) == "firstname"

    def test_uppercase(self):
        assert transform("active", NamingStyle.UPPERCASE) == "ACTIVE"

    @pytest.mark.parametrize("name", SAMPLE_NAMES)
    def test_uppercase_idempotent(self, name):
        once = transform(name, NamingStyle.UPPERCASE)
        assert transform(once, NamingStyle.UPPERCASE) == once

    @pytest.mark.parametrize("name", SAMPLE_NAMES)
    def test_lowercase_idempotent(self, name):
        once = transform(name, NamingStyle.LOWERCASE)
        assert transform(once, NamingStyle.LOWERCASE) == once

    @pytest.mark.parametrize("name", SAMPLE_NAMES)
    def test_upper_then_lower(self, name):
        upper = transform(name, NamingStyle.UPPERCASE)
        assert transform(upper, NamingStyle.LOWERCASE) == name.lower()

    def test_non_ascii_untouched(self):
        """Casing only affects the ASCII letter range."""
        assert ascii_upper("straße") == "STRAßE"
        assert ascii_lower("ÀBC") == "Àbc"


class TestSnakeCase:
    """Test snake_case conversion."""

    @pytest.mark.parametrize("name,expected", [
        ("cardNo", "card_no"),
        ("cardIdentifier", "card_identifier"),
        ("age", "age"),
        ("firstName", "first_name"),
        ("userID", "user_id"),
        ("sha256Hash", "sha256_hash"),
        ("FirstName", "first_name"),
        ("URLPath", "urlpath"),
        ("already_snake", "already_snake"),
    ])
    def test_conversion(self, name, expected):
        assert transform(name, NamingStyle.SNAKE_CASE) == expected

    def test_no_separator_before_leading_capital(self):
        assert not transform("Name", NamingStyle.SNAKE_CASE).startswith("_")

    def test_no_separator_between_consecutive_capitals(self):
        assert transform("parseHTTPResponse", NamingStyle.SNAKE_CASE) == "parse_httpresponse"


class TestCamelCase:
    """Test camelCase conversion."""

    @pytest.mark.parametrize("name,expected", [
        ("UserID", "userID"),
        ("SessionToken", "sessionToken"),
        ("alreadyCamel", "alreadyCamel"),
        ("X", "x"),
    ])
    def test_conversion(self, name, expected):
        assert transform(name, NamingStyle.CAMEL_CASE) == expected


class TestHttpHeaderCase:
    """Test httpHeaderCase conversion."""

    @pytest.mark.parametrize("name,expected", [
        ("contentSecurityPolicy", "Content-Security-Policy"),
        ("cacheControl", "Cache-Control"),
        ("contentType", "Content-Type"),
        ("etag", "Etag"),
        ("xRequestID", "X-Request-ID"),
    ])
    def test_conversion(self, name, expected):
        assert transform(name, NamingStyle.HTTP_HEADER_CASE) == expected

    def test_segment_casing_preserved(self):
        """Only the first character of each segment changes."""
        assert transform("wwwAUTHenticate", NamingStyle.HTTP_HEADER_CASE) == "Www-AUTHenticate"


class TestHelpers:
    """Test character and boundary helpers."""

    @pytest.mark.parametrize("name", ["cardNo", "xRequestID", "URLPath", "a1B2c3D", "age"])
    def test_regex_replacements_match_insert_boundaries(self, name):
        assert to_snake_case(name) == ascii_lower(insert_boundaries(name, "_"))
        assert to_http_header_case(name) == "-".join(
            capitalize_first(part) for part in insert_boundaries(name, "-").split("-")
        )

    def test_insert_boundaries(self):
        assert insert_boundaries("aBcDe", "_") == "a_Bc_De"
        assert insert_boundaries("ABC", "_") == "ABC"
        assert insert_boundaries("a1B", "-") == "a1-B"

    def test_capitalize_first(self):
        assert capitalize_first("cache") == "Cache"
        assert capitalize_first("") == ""

    def test_decapitalize_first(self):
        assert decapitalize_first("Cache") == "cache"
        assert decapitalize_first("") == ""

    def test_empty_name_rejected(self):
        with pytest.raises(EmptyIdentifierError):
            transform("", NamingStyle.SNAKE_CASE)

    def test_empty_name_is_value_error(self):
        with pytest.raises(ValueError):
            transform("", NamingStyle.ORIGINAL)

    def test_invalid_style_type(self):
        with pytest.raises(TypeError):
            transform("name", "snake_case")

    @pytest.mark.parametrize("style", list(NamingStyle))
    def test_deterministic(self, style):
        assert transform("contentType", style) == transform("contentType", style)


class TestParseStyle:
    """Test lenient style resolution."""

    def test_none_is_original(self):
        assert parse_style(None) is NamingStyle.ORIGINAL

    def test_enum_passthrough(self):
        assert parse_style(NamingStyle.UPPERCASE) is NamingStyle.UPPERCASE

    @pytest.mark.parametrize("value,expected", [
        ("snake_case", NamingStyle.SNAKE_CASE),
        (".snake_case", NamingStyle.SNAKE_CASE),
        ("camelCase", NamingStyle.CAMEL_CASE),
        ("httpHeaderCase", NamingStyle.HTTP_HEADER_CASE),
        ("httpHeader", NamingStyle.HTTP_HEADER_CASE),
        (".httpHeader", NamingStyle.HTTP_HEADER_CASE),
    ])
    def test_recognized_values(self, value, expected):
        assert parse_style(value) is expected

    def test_unknown_value_falls_back(self, caplog, propagate_logs):
        with caplog.at_level(logging.WARNING, logger="codingkeys"):
            assert parse_style("kebab-case") is NamingStyle.ORIGINAL

        assert any("kebab-case" in record.getMessage() for record in caplog.records)

    @pytest.mark.parametrize("value", [" lowercase ", "snake_case\n", ". snake_case"])
    def test_padded_value_is_unknown(self, value):
        assert parse_style(value) is NamingStyle.ORIGINAL

    def test_wrong_case_is_unknown(self):
        assert parse_style("SNAKE_CASE") is NamingStyle.ORIGINAL

    def test_non_string_falls_back(self):
        assert parse_style(42) is NamingStyle.ORIGINAL

    def test_style_values(self):
        assert style_values() == [
            "original", "lowercase", "uppercase", "snake_case", "camelCase", "httpHeaderCase",
        ]
