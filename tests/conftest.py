# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from lfsm.core.rules import eq
from lfsm.core.state_machine import StateMachine


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property-based test")


class RecordingHook:
    """Hook implementation recording every callback it receives."""

    def __init__(self):
        self.entered = []
        self.traced = []
        self.errors = []

    def on_enter(self, state):
        self.entered.append(state)

    def on_trace(self, state):
        self.traced.append(state)

    def on_error(self, error):
        self.errors.append(error)


@pytest.fixture
def hook():
    """A hook recording enter, trace and error callbacks."""
    return RecordingHook()


@pytest.fixture
def machine(hook):
    """An empty state machine with a recording hook attached."""
    return StateMachine(hooks=[hook])


@pytest.fixture
def turnstile(hook):
    """
    The locked/unlocked turnstile, started in locked. Returns the machine and
    its two states.
    """
    sm = StateMachine(hooks=[hook])
    locked = sm.initialize("locked")
    unlocked = sm.define_state("unlocked")
    sm.connect(locked, unlocked, eq("coin"))
    sm.connect(unlocked, locked, eq("push"))
    sm.connect(locked, locked, eq("push"))
    sm.connect(unlocked, unlocked, eq("coin"))
    return sm, locked, unlocked
