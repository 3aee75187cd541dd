"""Exporter configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from fsm_rules.types import State


@dataclass(frozen=True)
class EncoderConfig:
    """Immutable display settings for graph export.

    Attributes:
        start_state: State the synthetic start marker points at.
        end_states: States joined to the synthetic end marker. No end
            marker is drawn when empty.
        tags: Display names per state. Untagged states render as
            ``"State <n>"``.
    """

    start_state: State
    end_states: tuple[State, ...] = ()
    tags: Mapping[State, str] = field(default_factory=dict)
