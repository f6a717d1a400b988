"""
Pytest configuration for tests at the root level.

This module contains pytest fixtures shared by the whole suite.
"""

import pytest

from tablestate.config import TableConfig
from tablestate.events import EventEmitter
from tablestate.state import RuleEngine


@pytest.fixture
def emitter():
    """An emitter handed to the engine so tests can subscribe before it runs."""
    return EventEmitter()


@pytest.fixture
def engine(emitter):
    """A fresh engine with a small unshuffled shoe."""
    return RuleEngine(TableConfig(num_decks=1, shuffle=False), event_bus=emitter)
