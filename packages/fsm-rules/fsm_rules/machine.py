"""StateMachine holding the current state."""
from __future__ import annotations

import logging
from typing import Any

from fsm_rules.transitions import TransitionTable
from fsm_rules.types import GuardRejectionError, InvalidTransitionError, State

logger = logging.getLogger(__name__)


class StateMachine:
    """Holds a single current state and applies rule-checked changes.

    The machine owns no rules. Each ``change`` call is given the table to
    check against, so one machine can be driven by different rule sets.
    Not thread safe: callers sharing a machine across threads must lock.
    """

    def __init__(self, initial: State) -> None:
        self._current = initial

    @property
    def current(self) -> State:
        return self._current

    def can_change(self, table: TransitionTable, target: State) -> bool:
        """Check whether ``(current, target)`` is registered. Guards are not run."""
        found, _, _ = table.lookup(self._current, target)
        return found

    def change(
        self, table: TransitionTable, target: State, context: Any = None,
    ) -> None:
        """Move to ``target`` if ``table`` allows it.

        Raises InvalidTransitionError when the pair is not registered. A guard
        vetoes by raising (the exception propagates unchanged) or by returning
        ``False`` (raised as GuardRejectionError). The state is left untouched
        in both cases.

        The action runs after the state is committed. Exceptions from the
        action propagate, but the new state is kept.
        """
        source = self._current
        found, guard, action = table.lookup(source, target)
        if not found:
            logger.debug("Rejected unregistered change %s -> %s", source, target)
            raise InvalidTransitionError(source, target)

        if guard is not None and guard(source, target, context) is False:
            logger.debug("Guard vetoed change %s -> %s", source, target)
            raise GuardRejectionError(source, target)

        self._current = target
        logger.debug("Changed state %s -> %s", source, target)

        if action is not None:
            action(target, context)

    def __repr__(self) -> str:
        return f"StateMachine(current={self._current!r})"
