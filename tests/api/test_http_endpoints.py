from __future__ import annotations

import pytest
import requests

from src.payroll_admin.payroll_admin.container import build_container
from src.payroll_admin.payroll_admin.main import create_app

from fakes import FakeResponse, FakeSession

TYPES = [
    {"id": "dt-fixed", "name": "Koperasi", "calculationType": "FIXED_USER"},
    {"id": "dt-pct", "name": "Pinjaman", "calculationType": "PERCENTAGE_USER"},
    {"id": "dt-late", "name": "Terlambat", "calculationType": "PER_LATE_INSTANCE", "ruleAmount": "25000"},
]


def _client(monkeypatch, routes):
    monkeypatch.setenv("APP_ENV", "testing")
    session = FakeSession(routes)
    container = build_container(api_config={"base_url": "http://backend.test/api"}, session=session)
    return create_app(container=container).test_client(), session


def test_calculation_strategies(monkeypatch):
    client, _ = _client(monkeypatch, {})

    res = client.get("/api/admin/calculation-strategies")

    assert res.status_code == 200
    by_value = {s["value"]: s for s in res.get_json()["data"]}
    assert by_value["PER_LATE_INSTANCE"]["ruleAmount"] is True
    assert by_value["PERCENTAGE_USER"]["userField"] == "percentage"


def test_create_user_deduction_sends_normalized_payload(monkeypatch):
    client, session = _client(
        monkeypatch,
        {
            ("GET", "/admin/deduction-types"): FakeResponse(200, TYPES),
            ("POST", "/admin/users/u1/deductions"): FakeResponse(201, {"id": "ud-1"}),
        },
    )

    res = client.post(
        "/api/admin/users/u1/deductions",
        json={"deductionTypeId": "dt-late", "assignedAmount": "5000", "assignedPercentage": "3"},
    )

    assert res.status_code == 201
    assert res.get_json() == {"success": True, "data": {"id": "ud-1"}}
    assert session.calls[-1]["json"] == {
        "deductionTypeId": "dt-late",
        "assignedAmount": None,
        "assignedPercentage": None,
    }


def test_invalid_percentage_is_a_field_error(monkeypatch):
    client, session = _client(monkeypatch, {("GET", "/admin/deduction-types"): FakeResponse(200, TYPES)})

    res = client.post("/api/admin/users/u1/deductions", json={"deductionTypeId": "dt-pct", "assignedPercentage": "150"})

    assert res.status_code == 400
    error = res.get_json()["error"]
    assert error["code"] == "MissingOrInvalidPercentage"
    assert error["field"] == "assignedPercentage"
    assert error["strategy"] == "PERCENTAGE_USER"
    assert [c["method"] for c in session.calls] == ["GET"]


def test_validate_endpoint_previews_without_saving(monkeypatch):
    client, session = _client(monkeypatch, {("GET", "/admin/deduction-types"): FakeResponse(200, TYPES)})

    res = client.post("/api/admin/deductions/validate", json={"deductionTypeId": "dt-fixed", "assignedAmount": 150000})

    assert res.status_code == 200
    assert res.get_json()["data"]["assignedAmount"] == "150000"
    assert len(session.calls) == 1


def test_unknown_type_is_rejected(monkeypatch):
    client, _ = _client(monkeypatch, {("GET", "/admin/deduction-types"): FakeResponse(200, TYPES)})

    res = client.post("/api/admin/deductions/validate", json={"deductionTypeId": "dt-x", "assignedAmount": "1"})

    assert res.status_code == 400
    assert res.get_json()["error"]["code"] == "TypeNotFound"


def test_unknown_strategy_from_backend_is_a_server_error(monkeypatch):
    drifted = [{"id": "dt-new", "name": "Baru", "calculationType": "PER_HOUR"}]
    client, _ = _client(monkeypatch, {("GET", "/admin/deduction-types"): FakeResponse(200, drifted)})

    res = client.get("/api/admin/deduction-types")

    assert res.status_code == 500
    assert res.get_json()["success"] is False


def test_non_json_body_is_rejected(monkeypatch):
    client, _ = _client(monkeypatch, {})

    res = client.post("/api/admin/deduction-types", data="name=x", content_type="text/plain")

    assert res.status_code == 400


def test_backend_forbidden_maps_to_403(monkeypatch):
    client, _ = _client(monkeypatch, {("GET", "/admin/users"): FakeResponse(403, {"message": "Forbidden"})})

    res = client.get("/api/admin/users")

    assert res.status_code == 403
    assert res.get_json()["error"]["code"] == "FORBIDDEN"


def test_backend_conflict_passes_through(monkeypatch):
    client, _ = _client(
        monkeypatch,
        {("DELETE", "/admin/deduction-types/dt-1"): FakeResponse(409, {"message": "Type is still assigned"})},
    )

    res = client.delete("/api/admin/deduction-types/dt-1")

    assert res.status_code == 409
    assert res.get_json()["error"]["message"] == "Type is still assigned"


def test_unreachable_backend_is_bad_gateway(monkeypatch):
    client, _ = _client(
        monkeypatch, {("GET", "/yayasan/leave-requests"): requests.ConnectionError("connection refused")}
    )

    res = client.get("/api/yayasan/leave-requests")

    assert res.status_code == 502


def test_attendance_list_carries_paging_meta(monkeypatch):
    body = {"data": [], "currentPage": 1, "totalPages": 1, "totalItems": 0}
    client, session = _client(monkeypatch, {("GET", "/admin/attendances"): FakeResponse(200, body)})

    res = client.get("/api/admin/attendances?startDate=2026-03-01&endDate=2026-03-31&page=1")

    assert res.status_code == 200
    assert res.get_json()["meta"] == {"currentPage": 1, "totalPages": 1, "totalItems": 0}
    assert session.calls[0]["params"]["endDate"] == "2026-03-31"


def test_missing_base_url_fails_at_startup():
    with pytest.raises(RuntimeError):
        build_container(api_config={"base_url": ""})


def test_unsupported_calculation_type_in_request_is_a_field_error(monkeypatch):
    client, session = _client(monkeypatch, {})

    res = client.post("/api/admin/deduction-types", json={"name": "Sakit", "calculationType": "PER_SICK_DAY"})

    assert res.status_code == 400
    assert res.get_json()["error"]["field"] == "calculationType"
    assert session.calls == []


def test_is_mandatory_must_be_a_boolean(monkeypatch):
    client, session = _client(
        monkeypatch, {("POST", "/admin/deduction-types"): FakeResponse(201, {"id": "dt-new"})}
    )
    body = {"name": "BPJS", "calculationType": "MANDATORY_PERCENTAGE", "rulePercentage": "1"}

    rejected = client.post("/api/admin/deduction-types", json=dict(body, isMandatory="false"))
    accepted = client.post("/api/admin/deduction-types", json=dict(body, isMandatory=False))

    assert rejected.status_code == 400
    assert rejected.get_json()["error"]["field"] == "isMandatory"
    assert accepted.status_code == 201
    assert session.calls[0]["json"]["isMandatory"] is False


def test_missing_assignment_is_404(monkeypatch):
    client, _ = _client(monkeypatch, {("GET", "/admin/users/u1/deductions"): FakeResponse(200, [])})

    res = client.put("/api/admin/users/u1/deductions/ud-404", json={"assignedAmount": "1"})

    assert res.status_code == 404
    assert res.get_json()["error"]["code"] == "NOT_FOUND"


def test_user_list_defaults_to_lookup_limit(monkeypatch):
    client, session = _client(monkeypatch, {("GET", "/admin/users"): FakeResponse(200, {"data": []})})

    res = client.get("/api/admin/users")

    assert res.status_code == 200
    assert session.calls[0]["params"]["limit"] == 1000
