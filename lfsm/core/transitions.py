# lfsm/core/transitions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from lfsm.core.errors import ValidationError
from lfsm.core.rules import Rule, Rules


@dataclass(frozen=True)
class Transition:
    """
    A directed, rule-guarded edge between two states of one StateGraph.
    Several transitions may connect the same ordered pair of states; each is
    told apart by its id.
    """

    id: int
    source: int
    target: int
    rules: Tuple[Rule, ...]

    @classmethod
    def from_mapping(cls, transition_id: int, source: int, target: int, rules: Rules) -> "Transition":
        """
        Build a transition from an operator -> event mapping. Rules keep the
        mapping's insertion order, which is the order they are evaluated in.

        :raises ValidationError: If the mapping is empty.
        """
        if not rules:
            raise ValidationError(f"Transition {source} -> {target} needs at least one rule")
        return cls(
            id=transition_id,
            source=source,
            target=target,
            rules=tuple(Rule(operator, value) for operator, value in rules.items()),
        )

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target

    def matching_rule(self, event: str) -> Optional[Rule]:
        """
        Return the first rule accepting the event, or None.

        :raises UnsupportedOperatorError: As soon as a rule with an unsupported
            operator is reached, even if a later rule would match.
        """
        for rule in self.rules:
            if rule.matches(event):
                return rule
        return None

    def matches(self, event: str) -> bool:
        return self.matching_rule(event) is not None
