"""
Branching history of table snapshots.

Every accepted transition is stored as a HistoryNode. A node owns its
children and never changes once built, so the history only ever grows.

The current state is found by starting at a node and repeatedly stepping
into its most recently created child until a leaf is reached. That walk is
repeated on every query instead of caching the active leaf: any branch may
be extended later, and the walk costs only the depth of the tree (one level
per game action).

Ordering uses the pair ``(created_at, sequence)``. ``created_at`` comes from
``time.monotonic_ns()`` unless given explicitly, and ``sequence`` is a
process-wide counter that strictly increases, so two children stamped with
the same instant resolve to the one created last.
"""

import itertools
import time
from typing import Any, Dict, Iterator, List, Optional, Tuple

from tablestate.state.models import Snapshot

_sequence = itertools.count()


class HistoryNode:
    """A snapshot plus the ordered snapshots that followed it."""

    __slots__ = ("_value", "_created_at", "_sequence", "_children")

    def __init__(self, value: Snapshot, created_at: Optional[int] = None):
        """
        Args:
            value: The snapshot this node records
            created_at: Creation instant in nanoseconds; defaults to the
                monotonic clock
        """
        self._value = value
        self._created_at = time.monotonic_ns() if created_at is None else created_at
        self._sequence = next(_sequence)
        self._children: List["HistoryNode"] = []

    @property
    def value(self) -> Snapshot:
        return self._value

    @property
    def created_at(self) -> int:
        return self._created_at

    @property
    def sequence(self) -> int:
        return self._sequence

    def _order_key(self) -> Tuple[int, int]:
        return (self._created_at, self._sequence)

    def add_child(
        self, snapshot: Snapshot, created_at: Optional[int] = None
    ) -> "HistoryNode":
        """
        Record a snapshot as a new branch directly below this node.

        Args:
            snapshot: The snapshot to record
            created_at: Optional explicit creation instant

        Returns:
            The new node
        """
        node = HistoryNode(snapshot, created_at)
        self._children.append(node)
        return node

    def add_along_active_path(self, snapshot: Snapshot) -> "HistoryNode":
        """Record a snapshot below the active leaf, extending the current timeline."""
        return self.active_leaf().add_child(snapshot)

    def branch_count(self) -> int:
        return len(self._children)

    def branches(self) -> Tuple["HistoryNode", ...]:
        """Direct children, in the order they were added."""
        return tuple(self._children)

    def current_branch(self) -> Optional["HistoryNode"]:
        """The most recently created child, or None for a leaf."""
        if not self._children:
            return None
        return max(self._children, key=HistoryNode._order_key)

    def active_path(self) -> Iterator["HistoryNode"]:
        """Yield the nodes from this one down to the active leaf."""
        node: Optional[HistoryNode] = self
        while node is not None:
            yield node
            node = node.current_branch()

    def active_leaf(self) -> "HistoryNode":
        leaf = self
        for leaf in self.active_path():
            pass
        return leaf

    def current_snapshot(self) -> Snapshot:
        return self.active_leaf().value

    def depth(self) -> int:
        """Number of steps from this node to the active leaf."""
        return sum(1 for _ in self.active_path()) - 1

    def walk(self) -> Iterator["HistoryNode"]:
        """Depth-first pre-order over the whole subtree, children in insertion order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node._children))

    def __len__(self) -> int:
        return sum(1 for _ in self.walk())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "created_at": self._created_at,
            "sequence": self._sequence,
            "value": self._value.to_dict(),
            "children": [child.to_dict() for child in self._children],
        }

    def __repr__(self) -> str:
        return (
            f"HistoryNode(progress={self._value.progress.name}, "
            f"created_at={self._created_at}, branches={len(self._children)})"
        )
