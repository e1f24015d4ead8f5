from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional

from ..api.connection import ApiClient
from ..api.rest_base import as_list, normalize_float, optional_str
from ..common.datetime_utils import parse_iso_datetime
from ..core.enums import AttendanceStatus
from .model import AttendanceFilter, AttendancePage, AttendanceRecord
from .repository import AttendanceRepository


def to_attendance(row: Dict[str, Any]) -> AttendanceRecord:
    user = row.get("user") or {}
    mock = row.get("isMockLocation")
    return AttendanceRecord(
        attendance_id=str(row["id"]),
        user_id=str(row["userId"]),
        user_name=user.get("name") or "",
        user_email=user.get("email") or "",
        clock_in=parse_iso_datetime(row.get("clockIn")),
        clock_out=parse_iso_datetime(row.get("clockOut")),
        status=AttendanceStatus(row["status"]),
        notes=row.get("notes"),
        created_at=parse_iso_datetime(row.get("createdAt")),
        latitude_in=normalize_float(row.get("latitudeIn")),
        longitude_in=normalize_float(row.get("longitudeIn")),
        latitude_out=normalize_float(row.get("latitudeOut")),
        longitude_out=normalize_float(row.get("longitudeOut")),
        selfie_in_url=optional_str(row.get("selfieInUrl")),
        selfie_out_url=optional_str(row.get("selfieOutUrl")),
        device_model=row.get("deviceModel"),
        device_os=row.get("deviceOS"),
        is_mock_location=mock if isinstance(mock, bool) else None,
        gps_accuracy=normalize_float(row.get("gpsAccuracy")),
    )


class RestAttendanceRepository(AttendanceRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_page(self, query: AttendanceFilter) -> AttendancePage:
        payload = self._client.get("/admin/attendances", params=query.to_params())
        body = payload if isinstance(payload, dict) else {}
        items = [to_attendance(r) for r in as_list(payload)]
        return AttendancePage(
            items=items,
            current_page=int(body.get("currentPage") or 1),
            total_pages=int(body.get("totalPages") or 1),
            total_items=int(body.get("totalItems") or 0),
        )

    def set_status(self, *, user_id: str, work_date: date, status: AttendanceStatus, notes: Optional[str] = None) -> None:
        payload = {"userId": user_id, "date": work_date.isoformat(), "status": status.value, "notes": notes}
        self._client.post("/admin/attendance/status", payload)
