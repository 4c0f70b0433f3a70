# lfsm/core/state_machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging
from typing import Any, Iterable, List, Optional

from lfsm.core.errors import NotInitializedError, UnsupportedOperatorError
from lfsm.core.hooks import HookProtocol
from lfsm.core.rules import Rules
from lfsm.core.states import State
from lfsm.core.transitions import Transition
from lfsm.runtime.graph import StateGraph

logger = logging.getLogger(__name__)


class StateMachine:
    """
    A labeled-transition state machine. States and transitions live in a
    StateGraph owned by this machine; the machine itself only tracks the
    current state and steps it forward as events are fired.
    """

    def __init__(self, hooks: Optional[List[HookProtocol]] = None) -> None:
        """
        :param hooks: Optional list of hook objects implementing any of
            on_enter, on_trace, on_error.
        """
        self._graph = StateGraph()
        self._hooks = hooks or []
        self._current_state: Optional[State] = None

    @property
    def current_state(self) -> Optional[State]:
        """Get the current state, or None before initialize()."""
        return self._current_state

    @property
    def is_initialized(self) -> bool:
        return self._current_state is not None

    def initialize(self, value: Any) -> State:
        """
        Create a state holding value and make it the current state.
        Calling this again moves the machine to a new initial state; states
        created earlier stay in the graph.
        """
        state = self._graph.add_state(value)
        self._current_state = state
        logger.debug("Initialized machine at state %d", state.id)
        return state

    def define_state(self, value: Any) -> State:
        """Create a state holding value without changing the current state."""
        return self._graph.add_state(value)

    def connect(self, source: State, target: State, rules: Rules) -> Transition:
        """
        Add a transition from source to target guarded by rules. Source and
        target may be the same state.

        :param rules: Mapping of operator to the event value it compares against,
            usually built with new_rule() or eq().
        """
        return self._graph.add_transition(source, target, rules)

    def outgoing(self, state: State) -> List[Transition]:
        """Get the transitions leaving state, in evaluation order."""
        return self._graph.outgoing(state.id)

    def get_states(self) -> List[State]:
        return self._graph.get_all_states()

    def get_transitions(self) -> List[Transition]:
        return self._graph.get_transitions()

    def validate(self) -> List[str]:
        """Expose the graph's validation results."""
        return self._graph.validate()

    def fire_event(self, event: str) -> bool:
        """
        Evaluate the current state's outgoing transitions against event and
        take the first one that matches.

        :return: True if a transition was taken, False if nothing matched.
        :raises UnsupportedOperatorError: If an evaluated rule has an operator
            with no comparator. The current state is left unchanged.
        :raises NotInitializedError: If initialize() has not been called.
        """
        if self._current_state is None:
            raise NotInitializedError("StateMachine must be initialized before firing events")

        try:
            for transition in self._graph.outgoing(self._current_state.id):
                if transition.matches(event):
                    self._take(transition, event)
                    return True
        except UnsupportedOperatorError as error:
            logger.warning("Event %r aborted in state %d: %s", event, self._current_state.id, error)
            self._notify_error(error)
            raise

        logger.debug("Event %r ignored in state %d", event, self._current_state.id)
        return False

    def run(self, events: Iterable[str], trace: bool = False) -> State:
        """
        Fire events one at a time, in order, stopping at the first error.

        :param events: The event tokens to process.
        :param trace: Report the current state through on_trace hooks after
            each processed event.
        :return: The current state once every event has been processed.
        """
        for event in events:
            self.fire_event(event)
            if trace:
                self._notify_trace(self._current_state)
        if self._current_state is None:
            raise NotInitializedError("StateMachine must be initialized before running")
        return self._current_state

    def _take(self, transition: Transition, event: str) -> None:
        target = self._graph.get_state(transition.target)
        logger.debug(
            "Event %r fired transition %d: %d -> %d", event, transition.id, transition.source, transition.target
        )
        self._current_state = target
        self._notify_enter(target)

    def _notify_enter(self, state: State) -> None:
        """Invoke on_enter hooks."""
        for hook in self._hooks:
            if hasattr(hook, "on_enter"):
                hook.on_enter(state)

    def _notify_trace(self, state: State) -> None:
        """Invoke on_trace hooks."""
        logger.info("Current state is %d (%r)", state.id, state.value)
        for hook in self._hooks:
            if hasattr(hook, "on_trace"):
                hook.on_trace(state)

    def _notify_error(self, error: Exception) -> None:
        """Invoke on_error hooks."""
        for hook in self._hooks:
            if hasattr(hook, "on_error"):
                hook.on_error(error)
