"""
Event system for tablestate.

This package lets callers subscribe to the transitions a rule engine accepts.
"""

from tablestate.events.emitter import (
    EventEmitter,
    EngineEventType,
    TransitionEvent,
)

__all__ = ["EventEmitter", "EngineEventType", "TransitionEvent"]
