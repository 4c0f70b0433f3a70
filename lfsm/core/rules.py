# lfsm/core/rules.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Mapping, Union

from lfsm.core.errors import UnsupportedOperatorError


class Operator(str, Enum):
    """
    Comparison kinds a rule can apply to an incoming event.
    """

    EQ = "eq"

    @classmethod
    def coerce(cls, tag: "OperatorTag") -> "OperatorTag":
        """
        Return the Operator matching tag, or tag itself if no variant matches.
        Unknown tags are kept so they can be reported when evaluated.
        """
        if isinstance(tag, cls):
            return tag
        try:
            return cls(tag)
        except ValueError:
            return tag

    def __str__(self) -> str:
        return self.value


OperatorTag = Union[Operator, str]
Rules = Mapping[OperatorTag, str]


def _equals(expected: str, event: str) -> bool:
    return expected == event


# Every Operator variant must have an entry here.
_COMPARATORS: Dict[Operator, Callable[[str, str], bool]] = {
    Operator.EQ: _equals,
}


@dataclass(frozen=True)
class Rule:
    """
    A single trigger condition: the operator and the event value it compares against.
    """

    operator: OperatorTag
    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "operator", Operator.coerce(self.operator))

    @property
    def is_supported(self) -> bool:
        return self.operator in _COMPARATORS

    def matches(self, event: str) -> bool:
        """
        Compare the event against this rule.

        :param event: The event token supplied by the driver.
        :return: True if the rule accepts the event.
        :raises UnsupportedOperatorError: If the operator has no comparator.
        """
        comparator = _COMPARATORS.get(self.operator)
        if comparator is None:
            raise UnsupportedOperatorError(self.operator)
        return comparator(self.value, event)


def new_rule(operator: OperatorTag, value: str) -> Dict[OperatorTag, str]:
    """
    Build a single-entry rule mapping suitable for StateMachine.connect.
    The operator is not checked here.
    """
    return {Operator.coerce(operator): value}


def eq(value: str) -> Dict[OperatorTag, str]:
    """Shorthand for new_rule(Operator.EQ, value)."""
    return new_rule(Operator.EQ, value)
