from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import DeductionType, DeductionTypeDraft, NormalizedAssignment, UserDeductionAssignment


class DeductionTypeRepository(Protocol):
    """Gateway interface for deduction types.

    Note (DIP): services depend on this interface, not on the REST client.
    """

    def list_types(self) -> Sequence[DeductionType]:
        raise NotImplementedError

    def create_type(self, draft: DeductionTypeDraft) -> str:
        raise NotImplementedError

    def update_type(self, deduction_type_id: str, draft: DeductionTypeDraft) -> None:
        raise NotImplementedError

    def delete_type(self, deduction_type_id: str) -> None:
        raise NotImplementedError


class UserDeductionRepository(Protocol):
    def list_for_user(self, user_id: str) -> Sequence[UserDeductionAssignment]:
        raise NotImplementedError

    def get_for_user(self, user_id: str, assignment_id: str) -> Optional[UserDeductionAssignment]:
        raise NotImplementedError

    def create_for_user(self, user_id: str, assignment: NormalizedAssignment) -> str:
        raise NotImplementedError

    def update_for_user(self, user_id: str, assignment_id: str, assignment: NormalizedAssignment) -> None:
        raise NotImplementedError

    def delete_for_user(self, user_id: str, assignment_id: str) -> None:
        raise NotImplementedError
