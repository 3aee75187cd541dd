"""Graphviz DOT export of a TransitionTable."""
from __future__ import annotations

import io
from typing import Iterable, Mapping, Protocol

from fsm_rules.config import EncoderConfig
from fsm_rules.transitions import TransitionTable
from fsm_rules.types import State

START_NODE = "STATE_START"
END_NODE = "STATE_END"


class TextSink(Protocol):
    def write(self, text: str) -> object: ...


def _escape(label: str) -> str:
    return label.replace("\\", "\\\\").replace('"', '\\"')


class GraphvizEncoder:
    """Writes a TransitionTable to ``sink`` in the Graphviz DOT format.

    ``tags`` maps states to display names and may be filled in after
    construction. Transitions are emitted in table order; end-state edges
    in the order given.
    """

    def __init__(
        self,
        sink: TextSink,
        start_state: State,
        end_states: Iterable[State] = (),
    ) -> None:
        self._sink = sink
        self._start_state = start_state
        self._end_states = list(end_states)
        self.tags: dict[State, str] = {}

    @classmethod
    def from_config(cls, sink: TextSink, config: EncoderConfig) -> GraphvizEncoder:
        encoder = cls(sink, config.start_state, config.end_states)
        encoder.tags.update(config.tags)
        return encoder

    def tag_for(self, state: State) -> str:
        """Display name for ``state``, falling back to ``"State <n>"``."""
        tag = self.tags.get(state)
        if tag is not None:
            return tag
        if isinstance(state, int):
            return f"State {int(state)}"
        return f"State {state}"

    def encode(self, table: TransitionTable) -> None:
        self._write_doc_start()
        self._write_start_node()
        self._write_end_node()
        self._write_transitions(table)
        self._write_line("}")

    def _write_line(self, line: str) -> None:
        self._sink.write(line + "\n")

    def _write_doc_start(self) -> None:
        self._write_line("digraph fsm {")
        self._write_line("\trankdir=TB;")
        self._write_line('\tsize="8,5"')

    def _write_start_node(self) -> None:
        self._write_line("\tnode [shape = circle, color=grey, style=filled];")
        self._write_line(f'\t{START_NODE} [label=""]')

    def _write_end_node(self) -> None:
        if not self._end_states:
            return
        self._write_line("\tnode [shape = circle, color=grey, peripheries=2, style=filled];")
        self._write_line(f'\t{END_NODE} [label=""]')

    def _write_transitions(self, table: TransitionTable) -> None:
        self._write_line("\tnode [shape = circle, style=solid, peripheries=1];")
        self._write_line(f'\t{START_NODE} -> {self.tag_for(self._start_state)} [label=""]')
        for edge in table.edges():
            self._write_line(
                f"\t{self.tag_for(edge.from_state)} -> {self.tag_for(edge.to_state)}"
                f' [label="{_escape(edge.tag)}"]'
            )
        for state in self._end_states:
            self._write_line(f'\t{self.tag_for(state)} -> {END_NODE} [label=""]')


def to_dot(
    table: TransitionTable,
    start_state: State,
    end_states: Iterable[State] = (),
    tags: Mapping[State, str] | None = None,
) -> str:
    """Render ``table`` to a DOT string."""
    buf = io.StringIO()
    encoder = GraphvizEncoder(buf, start_state, end_states)
    if tags:
        encoder.tags.update(tags)
    encoder.encode(table)
    return buf.getvalue()
