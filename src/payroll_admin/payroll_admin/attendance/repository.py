from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from ..core.enums import AttendanceStatus
from .model import AttendanceFilter, AttendancePage


class AttendanceRepository(Protocol):
    def list_page(self, query: AttendanceFilter) -> AttendancePage:
        raise NotImplementedError

    def set_status(self, *, user_id: str, work_date: date, status: AttendanceStatus, notes: Optional[str] = None) -> None:
        raise NotImplementedError
