# lfsm/core/hooks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from lfsm.core.states import State


@runtime_checkable
class HookProtocol(Protocol):
    """
    Observer for state machine lifecycle events. Users can attach logging,
    monitoring, or console output without altering core logic.

    The machine only calls the methods a hook actually defines, so a hook may
    implement any subset of them.
    """

    def on_enter(self, state: "State") -> None:
        """Called after the machine moves to a state, self-loops included."""
        ...

    def on_trace(self, state: "State") -> None:
        """Called by a traced run after each processed event with the current state."""
        ...

    def on_error(self, error: Exception) -> None:
        """Called before an error raised while firing an event propagates."""
        ...
