"""
Immutable table state and its history.

This package provides the snapshot model, the branching history that stores
every snapshot, and the rule engine that is the only way to extend it.
"""

from tablestate.state.models import Progress, Snapshot
from tablestate.state.history import HistoryNode
from tablestate.state.errors import (
    RuleError,
    InvalidStateTransitionError,
    TableFullError,
)
from tablestate.state.rules import RuleEngine

__all__ = [
    "Progress",
    "Snapshot",
    "HistoryNode",
    "RuleError",
    "InvalidStateTransitionError",
    "TableFullError",
    "RuleEngine",
]
