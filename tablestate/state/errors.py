"""Exceptions raised by the rule engine."""

from tablestate.state.models import Progress


class RuleError(Exception):
    """Base class for requests the rule engine refuses."""

    pass


class InvalidStateTransitionError(RuleError):
    """Raised when an operation is attempted outside the phase that allows it."""

    def __init__(self, progress: Progress):
        self.progress = progress
        super().__init__(f"Game state is in {progress}.")


class TableFullError(RuleError):
    """Raised when a player would exceed the configured seat limit."""

    def __init__(self, max_players: int):
        self.max_players = max_players
        super().__init__(f"Table is full ({max_players} players).")
