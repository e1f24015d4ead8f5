from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.datetime_utils import parse_iso_date, today_local
from ..common.validators import is_blank, optional_text, require_non_empty
from ..core.constants import ADMIN_SETTABLE_STATUSES, DEFAULT_PAGE_LIMIT
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import AttendanceFilter, AttendancePage
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceMonitorService:
    """Use cases: browse attendance records and override a day's status."""

    def __init__(self, attendance: AttendanceRepository, *, page_limit: int = DEFAULT_PAGE_LIMIT):
        self._attendance = attendance
        self._page_limit = int(page_limit)

    @staticmethod
    def _parse_date(value: Optional[str], field: str) -> Optional[date]:
        if is_blank(value):
            return None
        try:
            return parse_iso_date(str(value).strip())
        except ValueError:
            raise ValidationError("Date must be YYYY-MM-DD", field=field)

    @staticmethod
    def _parse_status(value: Optional[str], field: str = "status") -> Optional[AttendanceStatus]:
        if is_blank(value):
            return None
        try:
            return AttendanceStatus(str(value).strip())
        except ValueError:
            raise ValidationError("Attendance status is invalid", field=field)

    def build_filter(
        self,
        *,
        page=None,
        user_id: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        status: Optional[str] = None,
    ) -> AttendanceFilter:
        """Filters from query-string values. Both dates default to today."""

        try:
            page_no = int(page) if not is_blank(page) else 1
        except (TypeError, ValueError):
            raise ValidationError("Page must be a number", field="page")
        if page_no < 1:
            raise ValidationError("Page must be at least 1", field="page")

        today = today_local()
        start = self._parse_date(start_date, "startDate") if start_date is not None else today
        end = self._parse_date(end_date, "endDate") if end_date is not None else today
        if start and end and end < start:
            raise ValidationError("End date must be on or after start date", field="endDate")

        return AttendanceFilter(
            page=page_no,
            limit=self._page_limit,
            user_id=optional_text(user_id),
            start_date=start,
            end_date=end,
            status=self._parse_status(status),
        )

    def list_page(self, query: AttendanceFilter) -> AttendancePage:
        return self._attendance.list_page(query)

    def set_status(self, *, user_id: str, work_date: str, status: str, notes: Optional[str] = None) -> None:
        user_id = require_non_empty(user_id, "User", field="userId")
        day = self._parse_date(work_date, "date")
        if not day:
            raise ValidationError("Date is required", field="date")
        new_status = self._parse_status(status)
        if new_status not in ADMIN_SETTABLE_STATUSES:
            raise ValidationError(
                "Status must be one of " + ", ".join(s.value for s in ADMIN_SETTABLE_STATUSES),
                field="status",
            )

        self._attendance.set_status(user_id=user_id, work_date=day, status=new_status, notes=optional_text(notes))
        logger.info("Set attendance status of user %s on %s to %s", user_id, day, new_status.value)
