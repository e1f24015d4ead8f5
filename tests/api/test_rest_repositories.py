from datetime import date
from decimal import Decimal

from src.payroll_admin.payroll_admin.allowances.rest_repository import RestUserAllowanceRepository
from src.payroll_admin.payroll_admin.api.connection import ApiClient, ApiConfig
from src.payroll_admin.payroll_admin.attendance.model import AttendanceFilter
from src.payroll_admin.payroll_admin.attendance.rest_repository import RestAttendanceRepository
from src.payroll_admin.payroll_admin.core.enums import AttendanceStatus, CalculationStrategy, LeaveStatus, Role
from src.payroll_admin.payroll_admin.deductions.model import NormalizedAssignment
from src.payroll_admin.payroll_admin.deductions.rest_repository import (
    RestDeductionTypeRepository,
    RestUserDeductionRepository,
)
from src.payroll_admin.payroll_admin.leaves.rest_repository import RestLeaveRequestRepository
from src.payroll_admin.payroll_admin.users.rest_repository import RestUserRepository

from fakes import FakeResponse, FakeSession

DEDUCTION_TYPES = [
    {
        "id": "dt-1",
        "name": "Terlambat",
        "description": None,
        "calculationType": "PER_LATE_INSTANCE",
        "ruleAmount": "25000.00",
        "rulePercentage": None,
        "isMandatory": False,
    },
    {
        "id": "dt-2",
        "name": "BPJS",
        "calculationType": "MANDATORY_PERCENTAGE",
        "ruleAmount": None,
        "rulePercentage": "1",
        "isMandatory": True,
    },
]


def _client(routes):
    session = FakeSession(routes)
    return ApiClient(ApiConfig(base_url="http://backend.test/api"), session=session), session


def test_list_deduction_types_maps_wire_fields():
    client, _ = _client({("GET", "/admin/deduction-types"): FakeResponse(200, DEDUCTION_TYPES)})

    late, bpjs = RestDeductionTypeRepository(client).list_types()

    assert late.calculation_strategy is CalculationStrategy.PER_LATE_INSTANCE
    assert late.rule_amount == Decimal("25000.00")
    assert late.rule_percentage is None
    assert bpjs.is_mandatory is True
    assert bpjs.rule_percentage == Decimal("1")


def test_user_deductions_join_type_and_find_by_id():
    row = {
        "id": "ud-1",
        "userId": "u1",
        "deductionTypeId": "dt-1",
        "assignedAmount": None,
        "assignedPercentage": None,
        "deductionType": DEDUCTION_TYPES[0],
    }
    client, _ = _client({("GET", "/admin/users/u1/deductions"): FakeResponse(200, [row])})
    repo = RestUserDeductionRepository(client)

    found = repo.get_for_user("u1", "ud-1")

    assert found.deduction_type.name == "Terlambat"
    assert repo.get_for_user("u1", "ud-2") is None


def test_create_user_deduction_posts_normalized_body():
    client, session = _client({("POST", "/admin/users/u1/deductions"): FakeResponse(201, {"id": "ud-9"})})

    new_id = RestUserDeductionRepository(client).create_for_user(
        "u1", NormalizedAssignment(deduction_type_id="dt-3", percentage=Decimal("2.5"))
    )

    assert new_id == "ud-9"
    assert session.calls[0]["json"] == {"deductionTypeId": "dt-3", "assignedAmount": None, "assignedPercentage": "2.5"}


def test_user_allowance_amount_sent_as_string():
    client, session = _client({("PUT", "/admin/users/u1/allowances/a1"): FakeResponse(200, {"id": "a1"})})

    RestUserAllowanceRepository(client).update_for_user("u1", "a1", allowance_type_id="at-1", amount=Decimal("500000"))

    assert session.calls[0]["json"] == {"allowanceTypeId": "at-1", "amount": "500000"}


def test_users_list_unwraps_envelope():
    body = {"data": [{"id": "u1", "name": "Sari", "email": "sari@example.com", "role": "USER", "baseSalary": "4500000"}]}
    client, session = _client({("GET", "/admin/users"): FakeResponse(200, body)})

    (user,) = RestUserRepository(client).list_users(limit=1000)

    assert user.role is Role.USER
    assert user.base_salary == Decimal("4500000")
    assert session.calls[0]["params"] == {"limit": 1000, "sort": "name", "order": "asc"}


def test_missing_user_returns_none():
    client, _ = _client({})

    assert RestUserRepository(client).get_by_id("u404") is None


def test_pending_leave_requests_and_reject_reason():
    row = {
        "id": "lr-1",
        "userId": "u1",
        "user": {"name": "Sari", "email": "sari@example.com"},
        "leaveType": {"id": "lt-1", "name": "Cuti Tahunan", "deductsLeaveBalance": True},
        "startDate": "2026-03-02T00:00:00.000Z",
        "endDate": "2026-03-04T00:00:00.000Z",
        "reason": "Acara keluarga",
        "status": "PENDING_APPROVAL",
        "createdAt": "2026-02-20T08:15:00.000Z",
    }
    client, session = _client(
        {
            ("GET", "/yayasan/leave-requests"): FakeResponse(200, [row]),
            ("PUT", "/yayasan/leave-requests/lr-1/reject"): FakeResponse(200, {"id": "lr-1"}),
        }
    )
    repo = RestLeaveRequestRepository(client)

    (request,) = repo.list_requests(status=LeaveStatus.PENDING_APPROVAL)
    repo.reject(request_id="lr-1", rejection_reason="Kuota habis")

    assert request.start_date == date(2026, 3, 2)
    assert request.leave_type.deducts_leave_balance is True
    assert session.calls[0]["params"] == {"status": "PENDING_APPROVAL"}
    assert session.calls[1]["json"] == {"rejectionReason": "Kuota habis"}


def test_attendance_page_and_status_override():
    body = {
        "data": [
            {
                "id": "att-1",
                "userId": "u1",
                "user": {"id": "u1", "name": "Sari", "email": "sari@example.com"},
                "clockIn": "2026-03-02T01:05:00.000Z",
                "clockOut": None,
                "status": "TERLAMBAT",
                "notes": None,
                "latitudeIn": "-6.2",
                "longitudeIn": "106.8",
                "isMockLocation": "yes",
                "gpsAccuracy": 12,
                "createdAt": "2026-03-02T01:05:00.000Z",
            }
        ],
        "currentPage": 2,
        "totalPages": 3,
        "totalItems": 21,
    }
    client, session = _client(
        {
            ("GET", "/admin/attendances"): FakeResponse(200, body),
            ("POST", "/admin/attendance/status"): FakeResponse(200, {"message": "ok"}),
        }
    )
    repo = RestAttendanceRepository(client)

    page = repo.list_page(AttendanceFilter(page=2, start_date=date(2026, 3, 1), status=AttendanceStatus.TERLAMBAT))
    repo.set_status(user_id="u1", work_date=date(2026, 3, 2), status=AttendanceStatus.SAKIT, notes=None)

    record = page.items[0]
    assert (page.current_page, page.total_pages, page.total_items) == (2, 3, 21)
    assert record.latitude_in == -6.2
    assert record.is_mock_location is None
    assert session.calls[0]["params"] == {"page": "2", "limit": "10", "startDate": "2026-03-01", "status": "TERLAMBAT"}
    assert session.calls[1]["json"] == {"userId": "u1", "date": "2026-03-02", "status": "SAKIT", "notes": None}
