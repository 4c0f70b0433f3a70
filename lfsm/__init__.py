"""lfsm: labeled-transition finite-state machine

A mutable current state plus a directed multigraph of states connected by
rule-guarded transitions, driven by an external sequence of discrete events.

Responsibilities:
    - State and transition definition
    - Rule evaluation against incoming events
    - Event-driven stepping of the current state

Cross-cutting Concerns:
    Error Handling:
        - Structured error hierarchy rooted at FSMError
        - Configuration mistakes surface when the faulty rule is evaluated

    Logging:
        - Module-level loggers under the "lfsm" namespace
        - No handlers are installed by the library
"""

from lfsm.core.errors import (
    FSMError,
    NotInitializedError,
    StateNotFoundError,
    UnsupportedOperatorError,
    ValidationError,
)
from lfsm.core.hooks import HookProtocol
from lfsm.core.rules import Operator, Rule, eq, new_rule
from lfsm.core.state_machine import StateMachine
from lfsm.core.states import State
from lfsm.core.transitions import Transition
from lfsm.runtime.graph import StateGraph

__version__ = "0.1.0"

__all__ = [
    "FSMError",
    "NotInitializedError",
    "StateNotFoundError",
    "UnsupportedOperatorError",
    "ValidationError",
    "HookProtocol",
    "Operator",
    "Rule",
    "eq",
    "new_rule",
    "StateMachine",
    "State",
    "Transition",
    "StateGraph",
]
