from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import optional_text, require_non_empty
from ..core.enums import LeaveStatus
from .model import LeaveRequest
from .repository import LeaveRequestRepository

logger = logging.getLogger(__name__)


class LeaveApprovalService:
    """Use case: review pending leave requests.

    Note: Who may approve is decided by the backend from the caller's token.
    """

    def __init__(self, requests: LeaveRequestRepository):
        self._requests = requests

    def list_pending(self) -> Sequence[LeaveRequest]:
        return self._requests.list_requests(status=LeaveStatus.PENDING_APPROVAL)

    def approve(self, *, request_id: str) -> None:
        request_id = require_non_empty(request_id, "Leave request id", field="id")
        self._requests.approve(request_id=request_id)
        logger.info("Approved leave request %s", request_id)

    def reject(self, *, request_id: str, rejection_reason: Optional[str] = None) -> None:
        request_id = require_non_empty(request_id, "Leave request id", field="id")
        self._requests.reject(request_id=request_id, rejection_reason=optional_text(rejection_reason))
        logger.info("Rejected leave request %s", request_id)
