from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: an employee or administrator account.

    Note: base_salary is the basis for PERCENTAGE_USER deductions.
    """

    user_id: str
    name: str
    email: str
    role: Role
    base_salary: Optional[Decimal] = None


@dataclass(frozen=True)
class UserDraft:
    name: str
    email: str
    role: Role
    base_salary: Optional[Decimal]
    password: Optional[str] = None

    def to_payload(self) -> dict:
        payload = {
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "baseSalary": None if self.base_salary is None else str(self.base_salary),
        }
        if self.password:
            payload["password"] = self.password
        return payload
