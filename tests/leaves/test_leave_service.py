from __future__ import annotations

import pytest

from src.payroll_admin.payroll_admin.core.enums import LeaveStatus
from src.payroll_admin.payroll_admin.core.exceptions import ValidationError
from src.payroll_admin.payroll_admin.leaves.service import LeaveApprovalService


class FakeLeaveRepo:
    def __init__(self):
        self.listed_with = []
        self.approved = []
        self.rejected = []

    def list_requests(self, *, status=None):
        self.listed_with.append(status)
        return []

    def approve(self, *, request_id):
        self.approved.append(request_id)

    def reject(self, *, request_id, rejection_reason=None):
        self.rejected.append((request_id, rejection_reason))


def test_list_pending_filters_by_status():
    repo = FakeLeaveRepo()

    LeaveApprovalService(repo).list_pending()

    assert repo.listed_with == [LeaveStatus.PENDING_APPROVAL]


def test_approve_requires_id():
    repo = FakeLeaveRepo()
    svc = LeaveApprovalService(repo)

    with pytest.raises(ValidationError):
        svc.approve(request_id=" ")

    svc.approve(request_id="lr-1")
    assert repo.approved == ["lr-1"]


def test_reject_trims_reason_and_drops_blank():
    repo = FakeLeaveRepo()
    svc = LeaveApprovalService(repo)

    svc.reject(request_id="lr-1", rejection_reason="  Kuota habis ")
    svc.reject(request_id="lr-2", rejection_reason="   ")

    assert repo.rejected == [("lr-1", "Kuota habis"), ("lr-2", None)]
