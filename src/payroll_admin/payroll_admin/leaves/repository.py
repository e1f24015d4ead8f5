from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveRequest


class LeaveRequestRepository(Protocol):
    def list_requests(self, *, status: Optional[LeaveStatus] = None) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def approve(self, *, request_id: str) -> None:
        raise NotImplementedError

    def reject(self, *, request_id: str, rejection_reason: Optional[str] = None) -> None:
        raise NotImplementedError
