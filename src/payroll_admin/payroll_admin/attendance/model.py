from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one clock-in/clock-out record as reported by the backend.

    Note: GPS and device fields are captured by the mobile client and only
    displayed here; mock-location detection happens upstream.
    """

    attendance_id: str
    user_id: str
    user_name: str
    user_email: str
    clock_in: Optional[datetime]
    clock_out: Optional[datetime]
    status: AttendanceStatus
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    latitude_in: Optional[float] = None
    longitude_in: Optional[float] = None
    latitude_out: Optional[float] = None
    longitude_out: Optional[float] = None
    selfie_in_url: Optional[str] = None
    selfie_out_url: Optional[str] = None
    device_model: Optional[str] = None
    device_os: Optional[str] = None
    is_mock_location: Optional[bool] = None
    gps_accuracy: Optional[float] = None


@dataclass(frozen=True)
class AttendanceFilter:
    page: int = 1
    limit: int = 10
    user_id: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[AttendanceStatus] = None

    def to_params(self) -> dict:
        params = {"page": str(self.page), "limit": str(self.limit)}
        if self.user_id:
            params["userId"] = self.user_id
        if self.start_date:
            params["startDate"] = self.start_date.isoformat()
        if self.end_date:
            params["endDate"] = self.end_date.isoformat()
        if self.status:
            params["status"] = self.status.value
        return params


@dataclass(frozen=True)
class AttendancePage:
    items: Sequence[AttendanceRecord]
    current_page: int
    total_pages: int
    total_items: int
