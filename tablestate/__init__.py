"""
tablestate: the lifecycle of a blackjack table as an append-only history.
"""

from tablestate.config import TableConfig
from tablestate.state import (
    HistoryNode,
    InvalidStateTransitionError,
    Progress,
    RuleEngine,
    RuleError,
    Snapshot,
    TableFullError,
)

__all__ = [
    "TableConfig",
    "HistoryNode",
    "InvalidStateTransitionError",
    "Progress",
    "RuleEngine",
    "RuleError",
    "Snapshot",
    "TableFullError",
]
