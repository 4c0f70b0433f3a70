# lfsm/core/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class State:
    """
    A node in the state machine. The id is allocated by the StateGraph that
    owns the state; the value is an opaque payload the engine never inspects.
    """

    id: int
    value: Any
