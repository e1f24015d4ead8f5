from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..api.connection import ApiClient
from ..api.rest_base import as_list, created_id, normalize_decimal
from ..core.enums import CalculationStrategy
from .model import DeductionType, DeductionTypeDraft, NormalizedAssignment, UserDeductionAssignment
from .repository import DeductionTypeRepository, UserDeductionRepository


def to_deduction_type(row: Dict[str, Any]) -> DeductionType:
    return DeductionType(
        deduction_type_id=str(row["id"]),
        name=row["name"],
        description=row.get("description"),
        calculation_strategy=CalculationStrategy.parse(row["calculationType"]),
        rule_amount=normalize_decimal(row.get("ruleAmount")),
        rule_percentage=normalize_decimal(row.get("rulePercentage")),
        is_mandatory=bool(row.get("isMandatory", False)),
    )


def to_assignment(row: Dict[str, Any]) -> UserDeductionAssignment:
    joined = row.get("deductionType")
    return UserDeductionAssignment(
        assignment_id=str(row["id"]),
        user_id=str(row["userId"]),
        deduction_type_id=str(row["deductionTypeId"]),
        assigned_amount=normalize_decimal(row.get("assignedAmount")),
        assigned_percentage=normalize_decimal(row.get("assignedPercentage")),
        deduction_type=to_deduction_type(joined) if joined else None,
    )


class RestDeductionTypeRepository(DeductionTypeRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_types(self) -> Sequence[DeductionType]:
        return [to_deduction_type(r) for r in as_list(self._client.get("/admin/deduction-types"))]

    def create_type(self, draft: DeductionTypeDraft) -> str:
        return created_id(self._client.post("/admin/deduction-types", draft.to_payload()))

    def update_type(self, deduction_type_id: str, draft: DeductionTypeDraft) -> None:
        self._client.put(f"/admin/deduction-types/{deduction_type_id}", draft.to_payload())

    def delete_type(self, deduction_type_id: str) -> None:
        self._client.delete(f"/admin/deduction-types/{deduction_type_id}")


class RestUserDeductionRepository(UserDeductionRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_for_user(self, user_id: str) -> Sequence[UserDeductionAssignment]:
        return [to_assignment(r) for r in as_list(self._client.get(f"/admin/users/{user_id}/deductions"))]

    def get_for_user(self, user_id: str, assignment_id: str) -> Optional[UserDeductionAssignment]:
        # No single-item endpoint: the list is small (one user's deductions).
        for assignment in self.list_for_user(user_id):
            if assignment.assignment_id == str(assignment_id):
                return assignment
        return None

    def create_for_user(self, user_id: str, assignment: NormalizedAssignment) -> str:
        return created_id(self._client.post(f"/admin/users/{user_id}/deductions", assignment.to_payload()))

    def update_for_user(self, user_id: str, assignment_id: str, assignment: NormalizedAssignment) -> None:
        self._client.put(f"/admin/users/{user_id}/deductions/{assignment_id}", assignment.to_payload())

    def delete_for_user(self, user_id: str, assignment_id: str) -> None:
        self._client.delete(f"/admin/users/{user_id}/deductions/{assignment_id}")
