"""Validation and normalization of deduction rules and user assignments.

Pure functions: no I/O, no state. Callers load the deduction types they need
and persist the normalized result themselves.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from ..common.validators import is_blank, parse_decimal
from ..core.constants import PERCENTAGE_MAX, PERCENTAGE_MIN
from ..core.enums import CalculationStrategy, UserLevelField
from ..core.exceptions import MissingOrInvalidAmount, MissingOrInvalidPercentage, TypeNotFound
from .catalog import field_rules, requires_user_level_field
from .model import AssignmentCandidate, DeductionType, NormalizedAssignment, NormalizedRule


def parse_amount(value, *, field: str, strategy: CalculationStrategy) -> Decimal:
    amount = parse_decimal(value)
    if amount is None or amount < 0:
        raise MissingOrInvalidAmount(
            f"{field} is required for {strategy.label} and must be a non-negative number",
            field=field,
            strategy=strategy,
        )
    return amount


def parse_percentage(value, *, field: str, strategy: CalculationStrategy) -> Decimal:
    percentage = parse_decimal(value)
    if percentage is None or not PERCENTAGE_MIN <= percentage <= PERCENTAGE_MAX:
        raise MissingOrInvalidPercentage(
            f"{field} is required for {strategy.label} and must be between 0 and 100",
            field=field,
            strategy=strategy,
        )
    return percentage


def validate_assignment(deduction_type: DeductionType, candidate: AssignmentCandidate) -> NormalizedAssignment:
    """Check a per-user candidate against the type's strategy.

    Fields that do not apply to the strategy are dropped, not rejected.
    """

    strategy = CalculationStrategy.parse(deduction_type.calculation_strategy)
    user_field = requires_user_level_field(strategy)

    amount: Optional[Decimal] = None
    percentage: Optional[Decimal] = None
    if user_field is UserLevelField.AMOUNT:
        amount = parse_amount(candidate.amount, field="assignedAmount", strategy=strategy)
    elif user_field is UserLevelField.PERCENTAGE:
        percentage = parse_percentage(candidate.percentage, field="assignedPercentage", strategy=strategy)

    return NormalizedAssignment(
        deduction_type_id=deduction_type.deduction_type_id,
        amount=amount,
        percentage=percentage,
    )


def find_deduction_type(types: Sequence[DeductionType], deduction_type_id) -> DeductionType:
    wanted = str(deduction_type_id or "").strip()
    for deduction_type in types:
        if deduction_type.deduction_type_id == wanted:
            return deduction_type
    raise TypeNotFound(deduction_type_id)


def validate_assignment_for(
    types: Sequence[DeductionType],
    deduction_type_id,
    candidate: AssignmentCandidate,
) -> NormalizedAssignment:
    return validate_assignment(find_deduction_type(types, deduction_type_id), candidate)


def normalize_type_rule(strategy, rule_amount=None, rule_percentage=None) -> NormalizedRule:
    """Normalize the global rule of a deduction type.

    A rule-driven strategy requires its own field and rejects the other one.
    Per-user strategies carry no global rule, so both fields are cleared.
    """

    strategy = CalculationStrategy.parse(strategy)
    rules = field_rules(strategy)

    if rules.type_amount:
        if not is_blank(rule_percentage):
            raise MissingOrInvalidPercentage(
                f"rulePercentage does not apply to {strategy.label}",
                field="rulePercentage",
                strategy=strategy,
            )
        return NormalizedRule(strategy, rule_amount=parse_amount(rule_amount, field="ruleAmount", strategy=strategy))

    if rules.type_percentage:
        if not is_blank(rule_amount):
            raise MissingOrInvalidAmount(
                f"ruleAmount does not apply to {strategy.label}",
                field="ruleAmount",
                strategy=strategy,
            )
        return NormalizedRule(
            strategy,
            rule_percentage=parse_percentage(rule_percentage, field="rulePercentage", strategy=strategy),
        )

    return NormalizedRule(strategy)


def validate_deduction_type(deduction_type: DeductionType) -> NormalizedRule:
    return normalize_type_rule(
        deduction_type.calculation_strategy,
        deduction_type.rule_amount,
        deduction_type.rule_percentage,
    )
