from __future__ import annotations

from flask import Flask, request

from ..common.http import json_body, ok
from ..container import Container
from .model import AttendanceRecord


def _iso(value):
    return value.isoformat() if value else None


def attendance_to_dict(r: AttendanceRecord) -> dict:
    return {
        "id": r.attendance_id,
        "userId": r.user_id,
        "user": {"id": r.user_id, "name": r.user_name, "email": r.user_email},
        "clockIn": _iso(r.clock_in),
        "clockOut": _iso(r.clock_out),
        "status": r.status.value,
        "notes": r.notes,
        "createdAt": _iso(r.created_at),
        "latitudeIn": r.latitude_in,
        "longitudeIn": r.longitude_in,
        "latitudeOut": r.latitude_out,
        "longitudeOut": r.longitude_out,
        "selfieInUrl": r.selfie_in_url,
        "selfieOutUrl": r.selfie_out_url,
        "deviceModel": r.device_model,
        "deviceOS": r.device_os,
        "isMockLocation": r.is_mock_location,
        "gpsAccuracy": r.gps_accuracy,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/attendances", methods=["GET"], endpoint="list_attendances")
    def list_attendances():
        args = request.args
        query = container.attendance_monitor_service.build_filter(
            page=args.get("page"),
            user_id=args.get("userId"),
            start_date=args.get("startDate"),
            end_date=args.get("endDate"),
            status=args.get("status"),
        )
        page = container.attendance_monitor_service.list_page(query)
        return ok(
            [attendance_to_dict(r) for r in page.items],
            currentPage=page.current_page,
            totalPages=page.total_pages,
            totalItems=page.total_items,
        )

    @app.route("/api/admin/attendance/status", methods=["POST"], endpoint="set_attendance_status")
    def set_attendance_status():
        body = json_body()
        container.attendance_monitor_service.set_status(
            user_id=body.get("userId") or "",
            work_date=body.get("date") or "",
            status=body.get("status") or "",
            notes=body.get("notes"),
        )
        return ok({"userId": body.get("userId"), "date": body.get("date")})
