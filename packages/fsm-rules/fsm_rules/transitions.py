"""TransitionTable registry."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from fsm_rules.types import Action, Guard, State

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transition:
    """A registered edge between two states.

    ``guard`` runs before the state changes and may veto it. ``action`` runs
    after the change has been committed. ``tag`` is a display label used
    only by the exporters.
    """

    from_state: State
    to_state: State
    guard: Guard | None = None
    action: Action | None = None
    tag: str = ""


class TransitionTable:
    """Maps (from, to) state pairs to their Transition.

    Append-only: entries can be added or overwritten, never removed.
    Iteration follows insertion order of the first ``add`` for each pair.
    """

    def __init__(self) -> None:
        self._transitions: dict[State, dict[State, Transition]] = {}

    def add(
        self,
        from_state: State,
        to_state: State,
        guard: Guard | None = None,
        action: Action | None = None,
        tag: str = "",
    ) -> None:
        """Register a transition. Overwrites if the pair is already registered."""
        targets = self._transitions.setdefault(from_state, {})
        if to_state in targets:
            logger.debug("Overwriting transition %s -> %s", from_state, to_state)
        else:
            logger.debug("Adding transition %s -> %s", from_state, to_state)
        targets[to_state] = Transition(from_state, to_state, guard, action, tag)

    def get(self, from_state: State, to_state: State) -> Transition | None:
        """Return the transition for the exact pair, or None."""
        targets = self._transitions.get(from_state)
        if targets is None:
            return None
        return targets.get(to_state)

    def lookup(
        self, from_state: State, to_state: State,
    ) -> tuple[bool, Guard | None, Action | None]:
        """Return ``(found, guard, action)`` for the exact pair."""
        transition = self.get(from_state, to_state)
        if transition is None:
            return False, None, None
        return True, transition.guard, transition.action

    def edges(self) -> Iterator[Transition]:
        """Iterate over every registered transition."""
        for targets in self._transitions.values():
            yield from targets.values()

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        return self.get(pair[0], pair[1]) is not None

    def __len__(self) -> int:
        return sum(len(targets) for targets in self._transitions.values())
