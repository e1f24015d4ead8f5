from __future__ import annotations

from flask import Flask, request

from ..common.http import ok
from ..container import Container
from .model import LeaveRequest


def _iso(value):
    return value.isoformat() if value else None


def leave_request_to_dict(r: LeaveRequest) -> dict:
    return {
        "id": r.request_id,
        "userId": r.user_id,
        "user": {"name": r.user_name, "email": r.user_email},
        "leaveType": {
            "id": r.leave_type.leave_type_id,
            "name": r.leave_type.name,
            "deductsLeaveBalance": r.leave_type.deducts_leave_balance,
        }
        if r.leave_type
        else None,
        "startDate": r.start_date.isoformat(),
        "endDate": r.end_date.isoformat(),
        "reason": r.reason,
        "status": r.status.value,
        "approvedBy": r.approved_by,
        "approvedAt": _iso(r.approved_at),
        "rejectedBy": r.rejected_by,
        "rejectedAt": _iso(r.rejected_at),
        "rejectionReason": r.rejection_reason,
        "createdAt": _iso(r.created_at),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/yayasan/leave-requests", methods=["GET"], endpoint="pending_leave_requests")
    def pending_leave_requests():
        return ok([leave_request_to_dict(r) for r in container.leave_approval_service.list_pending()])

    @app.route("/api/yayasan/leave-requests/<request_id>/approve", methods=["PUT"], endpoint="approve_leave_request")
    def approve_leave_request(request_id: str):
        container.leave_approval_service.approve(request_id=request_id)
        return ok({"id": request_id})

    @app.route("/api/yayasan/leave-requests/<request_id>/reject", methods=["PUT"], endpoint="reject_leave_request")
    def reject_leave_request(request_id: str):
        body = request.get_json(silent=True) or {}
        container.leave_approval_service.reject(request_id=request_id, rejection_reason=body.get("rejectionReason"))
        return ok({"id": request_id})
