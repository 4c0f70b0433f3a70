# lfsm/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any


class FSMError(Exception):
    """
    Base exception class for errors within the labeled-transition state machine library.
    """


class UnsupportedOperatorError(FSMError):
    """
    Raised when a transition rule uses a comparison operator that has no
    comparator. Detected when the rule is evaluated, not when it is defined.
    """

    def __init__(self, operator: Any) -> None:
        self.operator = operator
        super().__init__(f"Comparison operator '{operator!s}' is not supported")


class StateNotFoundError(FSMError):
    """
    Raised when a referenced state does not exist in the machine's graph.
    """


class ValidationError(FSMError):
    """
    Raised when a state or transition definition is malformed.
    """


class NotInitializedError(FSMError):
    """
    Raised when events are fired at a machine that has no current state yet.
    """
