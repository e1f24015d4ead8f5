from __future__ import annotations

from flask import Flask

from ..api.rest_base import optional_str
from ..common.http import json_body, ok
from ..common.validators import optional_bool
from ..container import Container
from .catalog import describe_strategies
from .model import AssignmentCandidate, DeductionType, NormalizedAssignment, UserDeductionAssignment
from .service import DeductionTypeInput


def deduction_type_to_dict(t: DeductionType) -> dict:
    return {
        "id": t.deduction_type_id,
        "name": t.name,
        "description": t.description,
        "calculationType": t.calculation_strategy.value,
        "ruleAmount": optional_str(t.rule_amount),
        "rulePercentage": optional_str(t.rule_percentage),
        "isMandatory": t.is_mandatory,
    }


def assignment_to_dict(a: UserDeductionAssignment) -> dict:
    return {
        "id": a.assignment_id,
        "userId": a.user_id,
        "deductionTypeId": a.deduction_type_id,
        "assignedAmount": optional_str(a.assigned_amount),
        "assignedPercentage": optional_str(a.assigned_percentage),
        "deductionType": deduction_type_to_dict(a.deduction_type) if a.deduction_type else None,
    }


def _type_input(body: dict) -> DeductionTypeInput:
    return DeductionTypeInput(
        name=body.get("name") or "",
        calculation_type=body.get("calculationType") or "",
        description=body.get("description"),
        rule_amount=body.get("ruleAmount"),
        rule_percentage=body.get("rulePercentage"),
        is_mandatory=optional_bool(body.get("isMandatory"), field="isMandatory"),
    )


def _candidate(body: dict) -> AssignmentCandidate:
    return AssignmentCandidate(amount=body.get("assignedAmount"), percentage=body.get("assignedPercentage"))


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/calculation-strategies", methods=["GET"], endpoint="calculation_strategies")
    def calculation_strategies():
        return ok(describe_strategies())

    @app.route("/api/admin/deduction-types", methods=["GET"], endpoint="list_deduction_types")
    def list_deduction_types():
        return ok([deduction_type_to_dict(t) for t in container.deduction_type_service.list_types()])

    @app.route("/api/admin/deduction-types", methods=["POST"], endpoint="create_deduction_type")
    def create_deduction_type():
        type_id = container.deduction_type_service.create_type(_type_input(json_body()))
        return ok({"id": type_id}, status=201)

    @app.route("/api/admin/deduction-types/<type_id>", methods=["PUT"], endpoint="update_deduction_type")
    def update_deduction_type(type_id: str):
        container.deduction_type_service.update_type(type_id, _type_input(json_body()))
        return ok({"id": type_id})

    @app.route("/api/admin/deduction-types/<type_id>", methods=["DELETE"], endpoint="delete_deduction_type")
    def delete_deduction_type(type_id: str):
        container.deduction_type_service.delete_type(type_id)
        return ok({"id": type_id})

    @app.route("/api/admin/users/<user_id>/deductions", methods=["GET"], endpoint="list_user_deductions")
    def list_user_deductions(user_id: str):
        items = container.user_deduction_service.list_for_user(user_id)
        return ok([assignment_to_dict(a) for a in items])

    @app.route("/api/admin/deductions/validate", methods=["POST"], endpoint="validate_user_deduction")
    def validate_user_deduction():
        body = json_body()
        normalized: NormalizedAssignment = container.user_deduction_service.preview(
            body.get("deductionTypeId"), _candidate(body)
        )
        return ok(normalized.to_payload())

    @app.route("/api/admin/users/<user_id>/deductions", methods=["POST"], endpoint="create_user_deduction")
    def create_user_deduction(user_id: str):
        body = json_body()
        assignment_id = container.user_deduction_service.assign(user_id, body.get("deductionTypeId"), _candidate(body))
        return ok({"id": assignment_id}, status=201)

    @app.route(
        "/api/admin/users/<user_id>/deductions/<assignment_id>",
        methods=["PUT"],
        endpoint="update_user_deduction",
    )
    def update_user_deduction(user_id: str, assignment_id: str):
        body = json_body()
        container.user_deduction_service.update(
            user_id,
            assignment_id,
            _candidate(body),
            deduction_type_id=body.get("deductionTypeId"),
        )
        return ok({"id": assignment_id})

    @app.route(
        "/api/admin/users/<user_id>/deductions/<assignment_id>",
        methods=["DELETE"],
        endpoint="delete_user_deduction",
    )
    def delete_user_deduction(user_id: str, assignment_id: str):
        container.user_deduction_service.remove(user_id, assignment_id)
        return ok({"id": assignment_id})
