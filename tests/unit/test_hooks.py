# tests/unit/test_hooks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from lfsm.core.hooks import HookProtocol
from lfsm.demo import ConsoleHook


def test_recording_hook_satisfies_protocol(hook):
    assert isinstance(hook, HookProtocol)


def test_partial_hook_is_not_a_full_protocol_instance():
    assert not isinstance(ConsoleHook(), HookProtocol)


def test_console_hook_writes_rendered_value(capsys):
    from lfsm.core.states import State

    ConsoleHook().on_trace(State(id=0, value=True))
    assert capsys.readouterr().out == "true\n"
