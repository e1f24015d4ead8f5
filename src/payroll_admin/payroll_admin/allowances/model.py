from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class AllowanceType:
    allowance_type_id: str
    name: str
    description: Optional[str] = None
    is_fixed: bool = True


@dataclass(frozen=True)
class UserAllowance:
    allowance_id: str
    user_id: str
    allowance_type_id: str
    amount: Decimal
    allowance_type: Optional[AllowanceType] = None
