# tests/unit/test_errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from lfsm.core.errors import (
    FSMError,
    NotInitializedError,
    StateNotFoundError,
    UnsupportedOperatorError,
    ValidationError,
)


def test_error_hierarchy():
    for cls in (NotInitializedError, StateNotFoundError, UnsupportedOperatorError, ValidationError):
        assert issubclass(cls, FSMError)


def test_exceptions_instantiation():
    e = StateNotFoundError("Missing state")
    assert str(e) == "Missing state"
    e = ValidationError("Invalid config")
    assert str(e) == "Invalid config"


def test_unsupported_operator_names_operator():
    e = UnsupportedOperatorError("eqs")
    assert e.operator == "eqs"
    assert "'eqs'" in str(e)
