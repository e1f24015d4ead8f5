from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import LeaveStatus


@dataclass(frozen=True)
class LeaveType:
    leave_type_id: str
    name: str
    deducts_leave_balance: bool


@dataclass(frozen=True)
class LeaveRequest:
    request_id: str
    user_id: str
    user_name: str
    user_email: str
    leave_type: Optional[LeaveType]
    start_date: date
    end_date: date
    reason: str
    status: LeaveStatus
    created_at: Optional[datetime]
    approved_by: Optional[str] = None
    approved_at: Optional[datetime] = None
    rejected_by: Optional[str] = None
    rejected_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None
