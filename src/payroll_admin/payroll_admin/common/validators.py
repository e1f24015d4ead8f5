from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Optional

from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"\S+@\S+\.\S+")


def require_non_empty(value: Optional[str], field_name: str, *, field: Optional[str] = None) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required", field=field)
    return str(value).strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int, *, field: Optional[str] = None) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters", field=field)
    return value


def require_email(value: Optional[str], *, field: str = "email") -> str:
    email = require_non_empty(value, "Email", field=field)
    if not _EMAIL_RE.search(email):
        raise ValidationError("Email format is invalid", field=field)
    return email


def optional_text(value: Optional[str]) -> Optional[str]:
    """Trimmed text, or None when blank."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_decimal(value) -> Optional[Decimal]:
    """Parse a form/wire value into a finite Decimal.

    Returns None for blank or non-numeric input. JSON numbers go through
    ``str`` so a float never feeds its binary expansion into the Decimal.
    Digit separators are rejected and a negative zero becomes zero.
    """

    if is_blank(value) or isinstance(value, bool):
        return None
    if isinstance(value, str) and "_" in value:
        return None
    if isinstance(value, Decimal):
        number = value
    else:
        try:
            number = Decimal(str(value).strip())
        except InvalidOperation:
            return None
    if not number.is_finite():
        return None
    if number == 0:
        return number.copy_abs()
    return number


def optional_non_negative_decimal(value, field_name: str, *, field: Optional[str] = None) -> Optional[Decimal]:
    if is_blank(value):
        return None
    number = parse_decimal(value)
    if number is None or number < 0:
        raise ValidationError(f"{field_name} must be a non-negative number", field=field)
    return number


def optional_bool(value, *, field: str, default: bool = False) -> bool:
    """JSON boolean flag; strings such as "false" are rejected."""
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValidationError(f"{field} must be true or false", field=field)
    return value
