from __future__ import annotations

from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import AllowanceType, UserAllowance


class AllowanceTypeRepository(Protocol):
    def list_types(self) -> Sequence[AllowanceType]:
        raise NotImplementedError

    def create_type(self, *, name: str, description: Optional[str], is_fixed: bool) -> str:
        raise NotImplementedError

    def update_type(self, allowance_type_id: str, *, name: str, description: Optional[str], is_fixed: bool) -> None:
        raise NotImplementedError

    def delete_type(self, allowance_type_id: str) -> None:
        raise NotImplementedError


class UserAllowanceRepository(Protocol):
    def list_for_user(self, user_id: str) -> Sequence[UserAllowance]:
        raise NotImplementedError

    def create_for_user(self, user_id: str, *, allowance_type_id: str, amount: Decimal) -> str:
        raise NotImplementedError

    def update_for_user(self, user_id: str, allowance_id: str, *, allowance_type_id: str, amount: Decimal) -> None:
        raise NotImplementedError

    def delete_for_user(self, user_id: str, allowance_id: str) -> None:
        raise NotImplementedError
