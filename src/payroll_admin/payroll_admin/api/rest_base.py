from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

from ..core.exceptions import GatewayError


def as_list(payload: Any) -> List[Dict[str, Any]]:
    """Normalize list responses.

    The backend answers list endpoints either with a bare array or with an
    envelope ``{"data": [...]}`` (paginated endpoints).
    """

    if payload is None:
        return []
    if isinstance(payload, dict):
        payload = payload.get("data")
    if not isinstance(payload, list):
        raise GatewayError("Backend returned an unexpected list payload")
    return list(payload)


def as_dict(payload: Any) -> Dict[str, Any]:
    if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
        return payload["data"]
    if not isinstance(payload, dict):
        raise GatewayError("Backend returned an unexpected object payload")
    return payload


def created_id(payload: Any) -> str:
    body = as_dict(payload)
    if body.get("id") is None:
        raise GatewayError("Backend did not return the id of the created record")
    return str(body["id"])


def normalize_decimal(value: Any) -> Optional[Decimal]:
    """Normalize decimal values across backend serializations.

    Prisma-style backends send decimals as strings ("150000.00"); some send
    JSON numbers. Both become Decimal; numbers go through ``str`` to avoid
    binary float artefacts.
    """

    if value is None or value == "":
        return None
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Invalid decimal value: {value!r}") from None


def normalize_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


def optional_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)
