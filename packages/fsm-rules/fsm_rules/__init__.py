"""fsm-rules - Rule-table finite state machines with Graphviz export."""
from __future__ import annotations

import logging

from fsm_rules.config import EncoderConfig
from fsm_rules.graphviz import GraphvizEncoder, to_dot
from fsm_rules.machine import StateMachine
from fsm_rules.transitions import Transition, TransitionTable
from fsm_rules.types import (
    Action,
    FSMError,
    Guard,
    GuardRejectionError,
    InvalidTransitionError,
    State,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "State",
    "Guard",
    "Action",
    "Transition",
    "TransitionTable",
    "StateMachine",
    "EncoderConfig",
    "GraphvizEncoder",
    "to_dot",
    "FSMError",
    "InvalidTransitionError",
    "GuardRejectionError",
]
