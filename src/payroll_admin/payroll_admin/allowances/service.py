from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional, Sequence

from ..common.validators import optional_text, parse_decimal, require_non_empty
from ..core.exceptions import MissingOrInvalidAmount, NotFoundError, TypeNotFound, ValidationError
from .model import AllowanceType, UserAllowance
from .repository import AllowanceTypeRepository, UserAllowanceRepository

logger = logging.getLogger(__name__)


class AllowanceTypeService:
    def __init__(self, types: AllowanceTypeRepository):
        self._types = types

    def list_types(self) -> Sequence[AllowanceType]:
        return self._types.list_types()

    def create_type(self, *, name: str, description: Optional[str] = None, is_fixed: bool = True) -> str:
        name = require_non_empty(name, "Allowance type name", field="name")
        type_id = self._types.create_type(name=name, description=optional_text(description), is_fixed=bool(is_fixed))
        logger.info("Created allowance type %s", type_id)
        return type_id

    def update_type(self, allowance_type_id: str, *, name: str, description: Optional[str] = None, is_fixed: bool = True) -> None:
        name = require_non_empty(name, "Allowance type name", field="name")
        self._types.update_type(
            str(allowance_type_id), name=name, description=optional_text(description), is_fixed=bool(is_fixed)
        )
        logger.info("Updated allowance type %s", allowance_type_id)

    def delete_type(self, allowance_type_id: str) -> None:
        self._types.delete_type(str(allowance_type_id))
        logger.info("Deleted allowance type %s", allowance_type_id)


class UserAllowanceService:
    def __init__(self, types: AllowanceTypeRepository, allowances: UserAllowanceRepository):
        self._types = types
        self._allowances = allowances

    @staticmethod
    def _amount(value) -> Decimal:
        amount = parse_decimal(value)
        if amount is None or amount < 0:
            raise MissingOrInvalidAmount("Allowance amount is required and must be a non-negative number", field="amount")
        return amount

    def _require_type(self, allowance_type_id) -> str:
        wanted = str(allowance_type_id or "").strip()
        if not wanted:
            raise ValidationError("Allowance type is required", field="allowanceTypeId")
        if not any(t.allowance_type_id == wanted for t in self._types.list_types()):
            raise TypeNotFound(allowance_type_id, field="allowanceTypeId", kind="Allowance type")
        return wanted

    def list_for_user(self, user_id: str) -> Sequence[UserAllowance]:
        return self._allowances.list_for_user(str(user_id))

    def assign(self, user_id: str, *, allowance_type_id: str, amount) -> str:
        type_id = self._require_type(allowance_type_id)
        value = self._amount(amount)
        allowance_id = self._allowances.create_for_user(str(user_id), allowance_type_id=type_id, amount=value)
        logger.info("Assigned allowance type %s to user %s", type_id, user_id)
        return allowance_id

    def update(self, user_id: str, allowance_id: str, *, amount, allowance_type_id: Optional[str] = None) -> None:
        current = next((a for a in self._allowances.list_for_user(str(user_id)) if a.allowance_id == str(allowance_id)), None)
        if not current:
            raise NotFoundError(f"User allowance {allowance_id!r} not found")
        if allowance_type_id and str(allowance_type_id).strip() != current.allowance_type_id:
            raise ValidationError("Allowance type cannot be changed when editing", field="allowanceTypeId")

        value = self._amount(amount)
        self._allowances.update_for_user(
            str(user_id), str(allowance_id), allowance_type_id=current.allowance_type_id, amount=value
        )
        logger.info("Updated user allowance %s for user %s", allowance_id, user_id)

    def remove(self, user_id: str, allowance_id: str) -> None:
        self._allowances.delete_for_user(str(user_id), str(allowance_id))
        logger.info("Removed user allowance %s for user %s", allowance_id, user_id)
