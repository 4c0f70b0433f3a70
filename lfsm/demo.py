# lfsm/demo.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""Turnstile demonstration: a coin unlocks, a push locks again."""

import sys
from typing import Any, List, Optional, Sequence

from lfsm.core.errors import UnsupportedOperatorError
from lfsm.core.rules import eq
from lfsm.core.state_machine import StateMachine
from lfsm.core.states import State

DEFAULT_EVENTS = ["coin", "push"]


def render_value(value: Any) -> str:
    """Render a state value for console output."""
    # bool first, it is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:f}"
    if isinstance(value, str):
        return value
    return ""


class ConsoleHook:
    """Prints the current state of a traced run."""

    def __init__(self, stream=None) -> None:
        self.stream = stream

    def on_trace(self, state: State) -> None:
        print(render_value(state.value), file=self.stream)


def build_turnstile(hooks: Optional[List] = None) -> StateMachine:
    """Build the two-state turnstile, starting locked."""
    machine = StateMachine(hooks=hooks)
    locked = machine.initialize("locked")
    unlocked = machine.define_state("unlocked")

    machine.connect(locked, unlocked, eq("coin"))
    machine.connect(unlocked, locked, eq("push"))
    machine.connect(locked, locked, eq("push"))
    machine.connect(unlocked, unlocked, eq("coin"))
    return machine


def main(events: Optional[Sequence[str]] = None) -> int:
    machine = build_turnstile(hooks=[ConsoleHook()])
    print(f"Initial state is ------- {render_value(machine.current_state.value)}")

    try:
        final = machine.run(DEFAULT_EVENTS if events is None else events, trace=True)
    except UnsupportedOperatorError as e:
        print(f"sorry, the comparison operator '{e.operator!s}' is not supported")
        return 1

    print(f"------------ Final state is {render_value(final.value)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
