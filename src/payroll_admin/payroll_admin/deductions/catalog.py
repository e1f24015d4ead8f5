"""Calculation-rule catalog.

For each deduction calculation strategy, which values live on the deduction
type (a global rule) and which live on a user's assignment.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import CalculationStrategy, UserLevelField


@dataclass(frozen=True)
class FieldRules:
    type_amount: bool
    type_percentage: bool
    user_field: UserLevelField

    def to_dict(self) -> dict:
        return {
            "ruleAmount": self.type_amount,
            "rulePercentage": self.type_percentage,
            "userField": self.user_field.value,
        }


_RULES: dict[CalculationStrategy, FieldRules] = {
    CalculationStrategy.FIXED_PER_USER: FieldRules(False, False, UserLevelField.AMOUNT),
    CalculationStrategy.PERCENTAGE_PER_USER: FieldRules(False, False, UserLevelField.PERCENTAGE),
    CalculationStrategy.PER_LATE_INSTANCE: FieldRules(True, False, UserLevelField.NONE),
    CalculationStrategy.PER_ABSENCE_DAY: FieldRules(True, False, UserLevelField.NONE),
    CalculationStrategy.PERCENTAGE_OF_ABSENCE_DAY: FieldRules(False, True, UserLevelField.NONE),
    CalculationStrategy.MANDATORY_PERCENTAGE: FieldRules(False, True, UserLevelField.NONE),
}

_missing = set(CalculationStrategy) - set(_RULES)
if _missing:
    raise RuntimeError(f"No field rules for calculation strategies: {sorted(s.value for s in _missing)}")


def field_rules(strategy) -> FieldRules:
    """Accepts a CalculationStrategy or its wire tag.

    Raises UnknownCalculationStrategy for anything outside the closed set.
    """
    return _RULES[CalculationStrategy.parse(strategy)]


def requires_type_level_amount(strategy) -> bool:
    return field_rules(strategy).type_amount


def requires_type_level_percentage(strategy) -> bool:
    return field_rules(strategy).type_percentage


def requires_user_level_field(strategy) -> UserLevelField:
    return field_rules(strategy).user_field


def describe_strategies() -> list[dict]:
    return [
        {"value": strategy.value, "label": strategy.label, **field_rules(strategy).to_dict()}
        for strategy in CalculationStrategy
    ]
