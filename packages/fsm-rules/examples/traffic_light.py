"""Traffic light -- the smallest useful fsm-rules program.

Demonstrates:
- Declaring states as an IntEnum
- Building a TransitionTable with guards, actions and tags
- Driving a StateMachine and handling a rejected change
- Exporting the rules as a Graphviz DOT graph

Run: python -m examples.traffic_light
"""

import logging
from enum import IntEnum

from fsm_rules import InvalidTransitionError, StateMachine, TransitionTable, to_dot


class Light(IntEnum):
    RED = 0
    RED_AMBER = 1
    GREEN = 2
    AMBER = 3


# A guard gets (current, target, context). Raise or return False to veto.
def allow_change(current: Light, target: Light, ctx: object) -> None:
    print(f"  guard:  {current.name} -> {target.name}")


# An action gets (new_state, context) once the change is committed.
def show_state(state: Light, ctx: object) -> None:
    print(f"  action: now {state.name}")


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s | %(message)s")
    print("=== Traffic Light ===\n")

    rules = TransitionTable()
    rules.add(Light.RED, Light.RED_AMBER, allow_change, show_state, "Prepare to Go")
    rules.add(Light.RED_AMBER, Light.GREEN, allow_change, show_state, "Go")
    rules.add(Light.GREEN, Light.AMBER, allow_change, show_state, "Stop unless unsafe to do so")
    rules.add(Light.AMBER, Light.RED, allow_change, show_state, "Stop")

    light = StateMachine(Light.RED)
    for target in (Light.RED_AMBER, Light.GREEN, Light.AMBER, Light.RED):
        light.change(rules, target)

    # Red can't jump straight to Green.
    try:
        light.change(rules, Light.GREEN)
    except InvalidTransitionError as exc:
        print(f"\n  rejected: {exc}")

    print("\n=== DOT ===\n")
    print(to_dot(
        rules,
        start_state=Light.RED,
        end_states=[Light.GREEN],
        tags={state: state.name.title().replace("_", "") for state in Light},
    ))


if __name__ == "__main__":
    main()
