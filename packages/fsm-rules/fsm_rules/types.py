"""Shared type aliases and exceptions for fsm-rules."""

from __future__ import annotations

from typing import Any, Callable, Hashable

State = Hashable

Guard = Callable[[State, State, Any], object]
Action = Callable[[State, Any], None]


class FSMError(Exception):
    """Base class for errors raised by fsm-rules."""


class InvalidTransitionError(FSMError):
    """Raised when no transition is registered for the requested pair."""

    def __init__(self, from_state: State, to_state: State) -> None:
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(f"Invalid state change {from_state} -> {to_state}")


class GuardRejectionError(FSMError):
    """Raised when a guard vetoes a registered transition.

    ``reason`` is an optional caller-defined payload describing why the
    guard declined.
    """

    def __init__(
        self, from_state: State, to_state: State, reason: Any = None,
    ) -> None:
        self.from_state = from_state
        self.to_state = to_state
        self.reason = reason
        message = f"Guard rejected state change {from_state} -> {to_state}"
        if reason is not None:
            message += f": {reason}"
        super().__init__(message)
