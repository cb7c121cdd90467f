"""Ordered adjustment ladders.

A ladder is a list of ``(predicate, factor)`` rows evaluated top-down; the
first matching row wins and no match leaves the value unchanged. Ladders are
applied in a fixed sequence so that premiums and costs are reproducible, and
every row can be tested on its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Iterable

from vehicle_costs.domain.money import ONE


@dataclass(frozen=True, slots=True)
class AdjustmentRule:
    name: str
    applies: Callable[[Any], bool]
    factor: Decimal


@dataclass(frozen=True, slots=True)
class AppliedAdjustment:
    ladder: str
    rule: str
    factor: Decimal


@dataclass(frozen=True, slots=True)
class RuleLadder:
    name: str
    rules: tuple[AdjustmentRule, ...]

    def match(self, subject: Any) -> AdjustmentRule | None:
        for rule in self.rules:
            if rule.applies(subject):
                return rule
        return None

    def value_for(self, subject: Any, default: Decimal = ONE) -> Decimal:
        rule = self.match(subject)
        return rule.factor if rule is not None else default


def apply_ladders(
    base: Decimal, ladders: Iterable[RuleLadder], subject: Any
) -> tuple[Decimal, tuple[AppliedAdjustment, ...]]:
    """
    Multiply ``base`` by the matching factor of each ladder, in order.

    Returns:
        The adjusted value and the adjustments that matched
    """
    value = base
    applied = []
    for ladder in ladders:
        rule = ladder.match(subject)
        if rule is None:
            continue
        value *= rule.factor
        applied.append(AppliedAdjustment(ladder=ladder.name, rule=rule.name, factor=rule.factor))
    return value, tuple(applied)
