"""
Pytest configuration and shared fixtures for codingkeys tests.

This module provides common test fixtures, configuration, and utilities
used across the test suite.
"""

import logging

import pytest

from codingkeys.codegen.types import Declaration, Member
from codingkeys.utils.config import create_config_from_dict, set_config


# Declaration fixtures
@pytest.fixture
def user_declaration():
    """Struct with four stored properties, as in the README example."""
    return Declaration.struct("User", [
        Member.stored("firstName"),
        Member.stored("lastName"),
        Member.stored("age"),
        Member.stored("state"),
    ])


@pytest.fixture
def state_declaration():
    """Enum with four cases."""
    return Declaration.enum("State", ["active", "inactive", "suspended", "closed"])


@pytest.fixture
def headers_declaration():
    """Struct of HTTP header fields."""
    return Declaration.struct("Headers", [
        Member.stored("contentType"),
        Member.stored("contentSecurityPolicy"),
        Member.stored("cacheControl"),
    ])


@pytest.fixture
def computed_only_declaration():
    """Struct whose members are all computed."""
    return Declaration.struct("Derived", [
        Member.computed("fullName"),
        Member.computed("isAdult"),
    ])


@pytest.fixture
def colliding_declaration():
    """Struct whose members collide under the lowercase style."""
    return Declaration.struct("Clash", [
        Member.stored("userId"),
        Member.stored("userID"),
        Member.stored("name"),
    ])


# Configuration fixtures
@pytest.fixture
def default_config():
    """Configuration with all defaults."""
    return create_config_from_dict({})


@pytest.fixture
def lenient_config():
    """Configuration that reports collisions without failing."""
    return create_config_from_dict({"generation": {"fail_on_collision": False}})


@pytest.fixture(autouse=True)
def reset_global_config(monkeypatch):
    """Isolate tests from the global configuration and environment."""
    monkeypatch.delenv("CODINGKEYS_STYLE", raising=False)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def propagate_logs():
    """Let caplog see records from the non-propagating package logger."""
    logger = logging.getLogger("codingkeys")
    logger.propagate = True
    yield
    logger.propagate = False


# Pytest hooks for test collection and reporting
def pytest_collection_modifyitems(config, items):
    """Add markers based on test path."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
