from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .allowances.rest_repository import RestAllowanceTypeRepository, RestUserAllowanceRepository
from .allowances.service import AllowanceTypeService, UserAllowanceService
from .api.connection import ApiClient, ApiConfig
from .attendance.rest_repository import RestAttendanceRepository
from .attendance.service import AttendanceMonitorService
from .core.constants import DEFAULT_API_TIMEOUT, DEFAULT_PAGE_LIMIT
from .deductions.rest_repository import RestDeductionTypeRepository, RestUserDeductionRepository
from .deductions.service import DeductionTypeService, UserDeductionService
from .leaves.rest_repository import RestLeaveRequestRepository
from .leaves.service import LeaveApprovalService
from .users.rest_repository import RestUserRepository
from .users.service import UserService


@dataclass(frozen=True)
class Container:
    client: Optional[ApiClient]

    deduction_type_service: DeductionTypeService
    user_deduction_service: UserDeductionService
    allowance_type_service: AllowanceTypeService
    user_allowance_service: UserAllowanceService
    user_service: UserService
    leave_approval_service: LeaveApprovalService
    attendance_monitor_service: AttendanceMonitorService


def build_container(*, api_config: dict, session=None) -> Container:
    base_url = str(api_config.get("base_url") or "").strip()
    if not base_url:
        raise RuntimeError("API base URL is not configured (set API_BASE_URL)")

    config = ApiConfig(
        base_url=base_url,
        token=api_config.get("token") or None,
        timeout=float(api_config.get("timeout", DEFAULT_API_TIMEOUT)),
    )
    client = ApiClient(config, session=session) if session is not None else ApiClient.get_instance(config)

    deduction_types = RestDeductionTypeRepository(client)
    allowance_types = RestAllowanceTypeRepository(client)

    return Container(
        client=client,
        deduction_type_service=DeductionTypeService(deduction_types),
        user_deduction_service=UserDeductionService(deduction_types, RestUserDeductionRepository(client)),
        allowance_type_service=AllowanceTypeService(allowance_types),
        user_allowance_service=UserAllowanceService(allowance_types, RestUserAllowanceRepository(client)),
        user_service=UserService(RestUserRepository(client)),
        leave_approval_service=LeaveApprovalService(RestLeaveRequestRepository(client)),
        attendance_monitor_service=AttendanceMonitorService(
            RestAttendanceRepository(client),
            page_limit=int(api_config.get("page_limit", DEFAULT_PAGE_LIMIT)),
        ),
    )
