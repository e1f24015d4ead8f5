from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional, Sequence

from ..api.connection import ApiClient
from ..api.rest_base import as_list, created_id, normalize_decimal
from .model import AllowanceType, UserAllowance
from .repository import AllowanceTypeRepository, UserAllowanceRepository


def to_allowance_type(row: Dict[str, Any]) -> AllowanceType:
    return AllowanceType(
        allowance_type_id=str(row["id"]),
        name=row["name"],
        description=row.get("description"),
        is_fixed=bool(row.get("isFixed", True)),
    )


def to_user_allowance(row: Dict[str, Any]) -> UserAllowance:
    joined = row.get("allowanceType")
    return UserAllowance(
        allowance_id=str(row["id"]),
        user_id=str(row["userId"]),
        allowance_type_id=str(row["allowanceTypeId"]),
        amount=normalize_decimal(row.get("amount")) or Decimal("0"),
        allowance_type=to_allowance_type(joined) if joined else None,
    )


class RestAllowanceTypeRepository(AllowanceTypeRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_types(self) -> Sequence[AllowanceType]:
        return [to_allowance_type(r) for r in as_list(self._client.get("/admin/allowance-types"))]

    def create_type(self, *, name: str, description: Optional[str], is_fixed: bool) -> str:
        payload = {"name": name, "description": description, "isFixed": is_fixed}
        return created_id(self._client.post("/admin/allowance-types", payload))

    def update_type(self, allowance_type_id: str, *, name: str, description: Optional[str], is_fixed: bool) -> None:
        payload = {"name": name, "description": description, "isFixed": is_fixed}
        self._client.put(f"/admin/allowance-types/{allowance_type_id}", payload)

    def delete_type(self, allowance_type_id: str) -> None:
        self._client.delete(f"/admin/allowance-types/{allowance_type_id}")


class RestUserAllowanceRepository(UserAllowanceRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_for_user(self, user_id: str) -> Sequence[UserAllowance]:
        return [to_user_allowance(r) for r in as_list(self._client.get(f"/admin/users/{user_id}/allowances"))]

    def create_for_user(self, user_id: str, *, allowance_type_id: str, amount: Decimal) -> str:
        payload = {"allowanceTypeId": allowance_type_id, "amount": str(amount)}
        return created_id(self._client.post(f"/admin/users/{user_id}/allowances", payload))

    def update_for_user(self, user_id: str, allowance_id: str, *, allowance_type_id: str, amount: Decimal) -> None:
        payload = {"allowanceTypeId": allowance_type_id, "amount": str(amount)}
        self._client.put(f"/admin/users/{user_id}/allowances/{allowance_id}", payload)

    def delete_for_user(self, user_id: str, allowance_id: str) -> None:
        self._client.delete(f"/admin/users/{user_id}/allowances/{allowance_id}")
