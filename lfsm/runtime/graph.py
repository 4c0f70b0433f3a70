"""Graph-based state machine structure management."""

import itertools
import logging
import threading
from typing import Any, Dict, List

from ..core.errors import StateNotFoundError
from ..core.rules import Rules
from ..core.states import State
from ..core.transitions import Transition

logger = logging.getLogger(__name__)


class StateGraph:
    """
    Holds the states of one machine and the transitions between them.
    Parallel transitions between the same pair of states are kept side by side,
    and each source state keeps its outgoing transitions in insertion order.
    """

    def __init__(self) -> None:
        self._states: Dict[int, State] = {}
        self._outgoing: Dict[int, List[Transition]] = {}
        self._transitions: Dict[int, Transition] = {}
        # Ids are per graph so that separate machines never share counters.
        self._state_ids = itertools.count(0)
        self._transition_ids = itertools.count(1)
        self._lock = threading.Lock()

    def add_state(self, value: Any) -> State:
        """Allocate the next state id and register a state holding value."""
        with self._lock:
            state = State(id=next(self._state_ids), value=value)
            self._states[state.id] = state
            self._outgoing[state.id] = []
        logger.debug("Added state %d (%r)", state.id, value)
        return state

    def add_transition(self, source: State, target: State, rules: Rules) -> Transition:
        """
        Register a transition from source to target. Operators are not checked
        here; an unsupported operator is only reported when it is evaluated.

        :raises StateNotFoundError: If source or target is not in this graph.
        :raises ValidationError: If rules is empty.
        """
        for state in (source, target):
            if not self.has_state(state):
                raise StateNotFoundError(f"State {state.id} ({state.value!r}) not in graph")

        with self._lock:
            transition = Transition.from_mapping(next(self._transition_ids), source.id, target.id, rules)
            self._transitions[transition.id] = transition
            self._outgoing[source.id].append(transition)
        logger.debug("Added transition %d: %d -> %d", transition.id, source.id, target.id)
        return transition

    def outgoing(self, state_id: int) -> List[Transition]:
        """Get the transitions leaving a state, in the order they were added."""
        return list(self._outgoing.get(state_id, ()))

    def has_state(self, state: State) -> bool:
        return self._states.get(state.id) == state

    def get_state(self, state_id: int) -> State:
        try:
            return self._states[state_id]
        except KeyError:
            raise StateNotFoundError(f"State {state_id} not in graph") from None

    def get_all_states(self) -> List[State]:
        """Get all states in id order."""
        return list(self._states.values())

    def get_transitions(self) -> List[Transition]:
        """Get all transitions in id order."""
        return list(self._transitions.values())

    def validate(self) -> List[str]:
        """
        Report rules whose operator cannot be evaluated. Nothing is raised;
        such rules still fail with UnsupportedOperatorError when fired.
        """
        errors = []
        for transition in self._transitions.values():
            for rule in transition.rules:
                if not rule.is_supported:
                    errors.append(
                        f"Transition {transition.id} ({transition.source} -> {transition.target}) "
                        f"uses unsupported operator '{rule.operator!s}'"
                    )
        return errors
