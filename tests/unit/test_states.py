# tests/unit/test_states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from lfsm.core.states import State


def test_state_fields():
    s = State(id=0, value="locked")
    assert s.id == 0
    assert s.value == "locked"


def test_state_is_immutable():
    s = State(id=0, value="locked")
    with pytest.raises(AttributeError):
        s.value = "unlocked"


def test_state_equality_by_fields():
    assert State(0, "locked") == State(0, "locked")
    assert State(0, "locked") != State(1, "locked")


@pytest.mark.parametrize("value", [1, 2.5, True, "text", None])
def test_state_value_is_opaque(value):
    assert State(id=7, value=value).value is value
