from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import NotFoundError, UnknownCalculationStrategy, ValidationError
from .model import AssignmentCandidate, DeductionType, DeductionTypeDraft, NormalizedAssignment, UserDeductionAssignment
from .repository import DeductionTypeRepository, UserDeductionRepository
from .validator import normalize_type_rule, validate_assignment_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeductionTypeInput:
    """Raw deduction type form values."""

    name: str
    calculation_type: str
    description: Optional[str] = None
    rule_amount: Optional[str] = None
    rule_percentage: Optional[str] = None
    is_mandatory: bool = False


class DeductionTypeService:
    """Use cases: manage deduction types and their global rules."""

    def __init__(self, types: DeductionTypeRepository):
        self._types = types

    def list_types(self) -> Sequence[DeductionType]:
        return self._types.list_types()

    def _draft(self, data: DeductionTypeInput) -> DeductionTypeDraft:
        name = require_non_empty(data.name, "Deduction type name", field="name")
        if not data.calculation_type or not str(data.calculation_type).strip():
            raise ValidationError("Calculation type is required", field="calculationType")
        try:
            rule = normalize_type_rule(data.calculation_type, data.rule_amount, data.rule_percentage)
        except UnknownCalculationStrategy as e:
            raise ValidationError(f"Calculation type {e.tag!r} is not supported", field="calculationType") from e
        return DeductionTypeDraft(
            name=name,
            description=optional_text(data.description),
            rule=rule,
            is_mandatory=bool(data.is_mandatory),
        )

    def create_type(self, data: DeductionTypeInput) -> str:
        draft = self._draft(data)
        type_id = self._types.create_type(draft)
        logger.info("Created deduction type %s (%s)", type_id, draft.rule.strategy.value)
        return type_id

    def update_type(self, deduction_type_id: str, data: DeductionTypeInput) -> None:
        draft = self._draft(data)
        self._types.update_type(str(deduction_type_id), draft)
        logger.info("Updated deduction type %s (%s)", deduction_type_id, draft.rule.strategy.value)

    def delete_type(self, deduction_type_id: str) -> None:
        self._types.delete_type(str(deduction_type_id))
        logger.info("Deleted deduction type %s", deduction_type_id)


class UserDeductionService:
    """Use cases: assign deductions to a user.

    The catalog view is loaded once per call and the candidate is validated
    against it before anything is sent to the backend.
    """

    def __init__(self, types: DeductionTypeRepository, assignments: UserDeductionRepository):
        self._types = types
        self._assignments = assignments

    def list_for_user(self, user_id: str) -> Sequence[UserDeductionAssignment]:
        return self._assignments.list_for_user(str(user_id))

    def preview(self, deduction_type_id: str, candidate: AssignmentCandidate) -> NormalizedAssignment:
        return validate_assignment_for(self._types.list_types(), deduction_type_id, candidate)

    def assign(self, user_id: str, deduction_type_id: str, candidate: AssignmentCandidate) -> str:
        if not deduction_type_id or not str(deduction_type_id).strip():
            raise ValidationError("Deduction type is required", field="deductionTypeId")
        normalized = self.preview(deduction_type_id, candidate)
        assignment_id = self._assignments.create_for_user(str(user_id), normalized)
        logger.info("Assigned deduction type %s to user %s", normalized.deduction_type_id, user_id)
        return assignment_id

    def update(
        self,
        user_id: str,
        assignment_id: str,
        candidate: AssignmentCandidate,
        *,
        deduction_type_id: Optional[str] = None,
    ) -> None:
        current = self._assignments.get_for_user(str(user_id), str(assignment_id))
        if not current:
            raise NotFoundError(f"User deduction {assignment_id!r} not found")
        # Calculation basis of an existing assignment cannot change.
        if deduction_type_id and str(deduction_type_id).strip() != current.deduction_type_id:
            raise ValidationError("Deduction type cannot be changed when editing", field="deductionTypeId")

        normalized = self.preview(current.deduction_type_id, candidate)
        self._assignments.update_for_user(str(user_id), str(assignment_id), normalized)
        logger.info("Updated user deduction %s for user %s", assignment_id, user_id)

    def remove(self, user_id: str, assignment_id: str) -> None:
        self._assignments.delete_for_user(str(user_id), str(assignment_id))
        logger.info("Removed user deduction %s for user %s", assignment_id, user_id)
