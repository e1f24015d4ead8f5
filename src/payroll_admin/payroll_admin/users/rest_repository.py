from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..api.connection import ApiClient
from ..api.rest_base import as_dict, as_list, created_id, normalize_decimal
from ..core.enums import Role
from ..core.exceptions import GatewayError
from .model import User, UserDraft
from .repository import UserRepository


def to_user(row: Dict[str, Any]) -> User:
    return User(
        user_id=str(row["id"]),
        name=row.get("name") or "",
        email=row.get("email") or "",
        role=Role(row["role"]),
        base_salary=normalize_decimal(row.get("baseSalary")),
    )


class RestUserRepository(UserRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_users(self, *, limit: Optional[int] = None) -> Sequence[User]:
        params = {"limit": limit, "sort": "name", "order": "asc"} if limit else None
        return [to_user(r) for r in as_list(self._client.get("/admin/users", params=params))]

    def get_by_id(self, user_id: str) -> Optional[User]:
        try:
            payload = self._client.get(f"/admin/users/{user_id}")
        except GatewayError as e:
            if e.status_code == 404:
                return None
            raise
        return to_user(as_dict(payload))

    def create_user(self, draft: UserDraft) -> str:
        return created_id(self._client.post("/admin/users", draft.to_payload()))

    def update_user(self, user_id: str, draft: UserDraft) -> None:
        self._client.put(f"/admin/users/{user_id}", draft.to_payload())

    def delete_by_id(self, user_id: str) -> None:
        self._client.delete(f"/admin/users/{user_id}")
