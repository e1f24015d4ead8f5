from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..api.connection import ApiClient
from ..api.rest_base import as_list, optional_str
from ..common.datetime_utils import parse_iso_datetime
from ..core.enums import LeaveStatus
from .model import LeaveRequest, LeaveType
from .repository import LeaveRequestRepository


def to_leave_request(row: Dict[str, Any]) -> LeaveRequest:
    user = row.get("user") or {}
    leave_type = row.get("leaveType")
    return LeaveRequest(
        request_id=str(row["id"]),
        user_id=str(row["userId"]),
        user_name=user.get("name") or "",
        user_email=user.get("email") or "",
        leave_type=LeaveType(
            leave_type_id=str(leave_type["id"]),
            name=leave_type.get("name") or "",
            deducts_leave_balance=bool(leave_type.get("deductsLeaveBalance", False)),
        )
        if leave_type
        else None,
        start_date=parse_iso_datetime(row["startDate"]).date(),
        end_date=parse_iso_datetime(row["endDate"]).date(),
        reason=row.get("reason") or "",
        status=LeaveStatus(row["status"]),
        created_at=parse_iso_datetime(row.get("createdAt")),
        approved_by=optional_str(row.get("approvedBy")),
        approved_at=parse_iso_datetime(row.get("approvedAt")),
        rejected_by=optional_str(row.get("rejectedBy")),
        rejected_at=parse_iso_datetime(row.get("rejectedAt")),
        rejection_reason=row.get("rejectionReason"),
    )


class RestLeaveRequestRepository(LeaveRequestRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_requests(self, *, status: Optional[LeaveStatus] = None) -> Sequence[LeaveRequest]:
        params = {"status": status.value} if status else None
        return [to_leave_request(r) for r in as_list(self._client.get("/yayasan/leave-requests", params=params))]

    def approve(self, *, request_id: str) -> None:
        self._client.put(f"/yayasan/leave-requests/{request_id}/approve")

    def reject(self, *, request_id: str, rejection_reason: Optional[str] = None) -> None:
        payload = {"rejectionReason": rejection_reason} if rejection_reason else None
        self._client.put(f"/yayasan/leave-requests/{request_id}/reject", payload)
