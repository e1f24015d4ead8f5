from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..core.enums import CalculationStrategy


def _decimal_str(value: Optional[Decimal]) -> Optional[str]:
    return None if value is None else str(value)


@dataclass(frozen=True)
class DeductionType:
    """Domain entity: a named deduction with its global calculation rule."""

    deduction_type_id: str
    name: str
    calculation_strategy: CalculationStrategy
    description: Optional[str] = None
    rule_amount: Optional[Decimal] = None
    rule_percentage: Optional[Decimal] = None
    is_mandatory: bool = False


@dataclass(frozen=True)
class UserDeductionAssignment:
    """A deduction assigned to one user; many-to-one to DeductionType."""

    assignment_id: str
    user_id: str
    deduction_type_id: str
    assigned_amount: Optional[Decimal] = None
    assigned_percentage: Optional[Decimal] = None
    deduction_type: Optional[DeductionType] = None


@dataclass(frozen=True)
class AssignmentCandidate:
    """Raw per-user values as typed into a form."""

    amount: Optional[str] = None
    percentage: Optional[str] = None


@dataclass(frozen=True)
class NormalizedAssignment:
    deduction_type_id: str
    amount: Optional[Decimal] = None
    percentage: Optional[Decimal] = None

    def as_candidate(self) -> AssignmentCandidate:
        return AssignmentCandidate(amount=_decimal_str(self.amount), percentage=_decimal_str(self.percentage))

    def to_payload(self) -> dict:
        return {
            "deductionTypeId": self.deduction_type_id,
            "assignedAmount": _decimal_str(self.amount),
            "assignedPercentage": _decimal_str(self.percentage),
        }


@dataclass(frozen=True)
class NormalizedRule:
    strategy: CalculationStrategy
    rule_amount: Optional[Decimal] = None
    rule_percentage: Optional[Decimal] = None


@dataclass(frozen=True)
class DeductionTypeDraft:
    """A validated deduction type ready to be sent to the backend."""

    name: str
    description: Optional[str]
    rule: NormalizedRule
    is_mandatory: bool

    def to_payload(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "calculationType": self.rule.strategy.value,
            "ruleAmount": _decimal_str(self.rule.rule_amount),
            "rulePercentage": _decimal_str(self.rule.rule_percentage),
            "isMandatory": self.is_mandatory,
        }
