"""
Shared test fixtures and utilities for the parscore test suite.
"""

import pytest

from parscore.commands import CommandRegistry
from parscore.config import EngineConfig
from parscore.engine import RuleEngine, set_default_engine


@pytest.fixture
def registry():
    """Fresh registry with the built-in commands installed."""
    return CommandRegistry()


@pytest.fixture
def engine(registry):
    """Engine bound to the per-test registry so overrides never leak."""
    return RuleEngine(registry=registry)


@pytest.fixture
def shallow_engine(registry):
    """Engine that rejects expressions nested deeper than three commands."""
    return RuleEngine(registry=registry, config=EngineConfig(max_depth=3))


@pytest.fixture
def default_engine():
    """Swap in a fresh process-wide engine for the duration of a test.

    Usage:
        def test_something(default_engine):
            parscore.register_command(...)  # lands on default_engine
    """
    fresh = RuleEngine()
    previous = set_default_engine(fresh)
    yield fresh
    set_default_engine(previous)
