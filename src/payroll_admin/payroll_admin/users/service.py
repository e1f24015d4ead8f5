from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import (
    is_blank,
    optional_non_negative_decimal,
    require_email,
    require_min_length,
    require_non_empty,
)
from ..core.constants import ASSIGNABLE_ROLES, MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import NotFoundError, ValidationError
from .model import User, UserDraft
from .repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Use case: administrator manages user accounts."""

    def __init__(self, users: UserRepository):
        self._users = users

    @staticmethod
    def _role(value) -> Role:
        try:
            role = Role(str(value or "").strip())
        except ValueError:
            raise ValidationError("Role is invalid", field="role")
        if role not in ASSIGNABLE_ROLES:
            raise ValidationError("Role cannot be assigned from the admin screens", field="role")
        return role

    def _draft(self, *, name: str, email: str, role, base_salary, password: Optional[str]) -> UserDraft:
        return UserDraft(
            name=require_non_empty(name, "Name", field="name"),
            email=require_email(email),
            role=self._role(role),
            base_salary=optional_non_negative_decimal(base_salary, "Base salary", field="baseSalary"),
            password=password,
        )

    def list_users(self, *, limit: Optional[int] = None) -> Sequence[User]:
        return self._users.list_users(limit=limit)

    def get_user(self, user_id: str) -> User:
        user = self._users.get_by_id(str(user_id))
        if not user:
            raise NotFoundError(f"User {user_id!r} not found")
        return user

    def create_account(self, *, name: str, email: str, password: str, role, base_salary=None) -> str:
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH, field="password")
        draft = self._draft(name=name, email=email, role=role, base_salary=base_salary, password=password)
        user_id = self._users.create_user(draft)
        logger.info("Created user %s with role %s", user_id, draft.role.value)
        return user_id

    def update_account(self, user_id: str, *, name: str, email: str, role, base_salary=None, password: Optional[str] = None) -> None:
        # Password is optional on edit: blank keeps the current one.
        if is_blank(password):
            password = None
        else:
            require_min_length(password, "Password", MIN_PASSWORD_LENGTH, field="password")
        draft = self._draft(name=name, email=email, role=role, base_salary=base_salary, password=password)
        self._users.update_user(str(user_id), draft)
        logger.info("Updated user %s", user_id)

    def delete_account(self, user_id: str) -> None:
        self._users.delete_by_id(str(user_id))
        logger.info("Deleted user %s", user_id)
