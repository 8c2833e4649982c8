"""
Unit tests for the exception hierarchy.
"""

from codingkeys.codegen.types import KeyCollision
from codingkeys.utils.exceptions import (
    CodingKeysError,
    ConfigurationError,
    EmptyIdentifierError,
    KeyCollisionError,
    TemplateRenderError,
)


class TestCodingKeysExceptions:
    """Test cases for custom exception classes."""

    def test_base_error(self):
        error = CodingKeysError("Test error message")
        assert str(error) == "Test error message"
        assert error.details == {}

    def test_base_error_with_details(self):
        error = CodingKeysError("Test error", {"key1": "value1", "key2": 42})

        assert error.message == "Test error"
        assert "key1=value1" in str(error)
        assert "key2=42" in str(error)

    def test_empty_identifier_error(self):
        error = EmptyIdentifierError("member name")

        assert isinstance(error, CodingKeysError)
        assert isinstance(error, ValueError)
        assert error.context == "member name"
        assert "Empty member name" in str(error)

    def test_key_collision_error(self):
        collisions = [
            KeyCollision("userid", ("userId", "userID")),
            KeyCollision("name", ("Name", "name")),
        ]
        error = KeyCollisionError(collisions, "Account")

        assert error.collisions == tuple(collisions)
        assert error.colliding_keys() == ["userid", "name"]
        assert error.details["collisions"] == 2
        assert "in 'Account'" in str(error)
        assert "userId, userID -> 'userid'" in str(error)

    def test_key_collision_error_without_declaration(self):
        error = KeyCollisionError([KeyCollision("a", ("A", "a"))])
        assert error.message.startswith("Wire key collision:")

    def test_template_render_error(self):
        error = TemplateRenderError("boom", "coding_keys.j2")

        assert error.template_name == "coding_keys.j2"
        assert "template=coding_keys.j2" in str(error)

    def test_configuration_error(self):
        error = ConfigurationError("bad value")

        assert error.config_file is None
        assert str(error) == "bad value"
