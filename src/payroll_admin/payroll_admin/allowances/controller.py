from __future__ import annotations

from flask import Flask

from ..common.http import json_body, ok
from ..common.validators import optional_bool
from ..container import Container
from .model import AllowanceType, UserAllowance


def allowance_type_to_dict(t: AllowanceType) -> dict:
    return {"id": t.allowance_type_id, "name": t.name, "description": t.description, "isFixed": t.is_fixed}


def user_allowance_to_dict(a: UserAllowance) -> dict:
    return {
        "id": a.allowance_id,
        "userId": a.user_id,
        "allowanceTypeId": a.allowance_type_id,
        "amount": str(a.amount),
        "allowanceType": allowance_type_to_dict(a.allowance_type) if a.allowance_type else None,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/allowance-types", methods=["GET"], endpoint="list_allowance_types")
    def list_allowance_types():
        return ok([allowance_type_to_dict(t) for t in container.allowance_type_service.list_types()])

    @app.route("/api/admin/allowance-types", methods=["POST"], endpoint="create_allowance_type")
    def create_allowance_type():
        body = json_body()
        type_id = container.allowance_type_service.create_type(
            name=body.get("name") or "",
            description=body.get("description"),
            is_fixed=optional_bool(body.get("isFixed"), field="isFixed", default=True),
        )
        return ok({"id": type_id}, status=201)

    @app.route("/api/admin/allowance-types/<type_id>", methods=["PUT"], endpoint="update_allowance_type")
    def update_allowance_type(type_id: str):
        body = json_body()
        container.allowance_type_service.update_type(
            type_id,
            name=body.get("name") or "",
            description=body.get("description"),
            is_fixed=optional_bool(body.get("isFixed"), field="isFixed", default=True),
        )
        return ok({"id": type_id})

    @app.route("/api/admin/allowance-types/<type_id>", methods=["DELETE"], endpoint="delete_allowance_type")
    def delete_allowance_type(type_id: str):
        container.allowance_type_service.delete_type(type_id)
        return ok({"id": type_id})

    @app.route("/api/admin/users/<user_id>/allowances", methods=["GET"], endpoint="list_user_allowances")
    def list_user_allowances(user_id: str):
        return ok([user_allowance_to_dict(a) for a in container.user_allowance_service.list_for_user(user_id)])

    @app.route("/api/admin/users/<user_id>/allowances", methods=["POST"], endpoint="create_user_allowance")
    def create_user_allowance(user_id: str):
        body = json_body()
        allowance_id = container.user_allowance_service.assign(
            user_id, allowance_type_id=body.get("allowanceTypeId"), amount=body.get("amount")
        )
        return ok({"id": allowance_id}, status=201)

    @app.route("/api/admin/users/<user_id>/allowances/<allowance_id>", methods=["PUT"], endpoint="update_user_allowance")
    def update_user_allowance(user_id: str, allowance_id: str):
        body = json_body()
        container.user_allowance_service.update(
            user_id, allowance_id, amount=body.get("amount"), allowance_type_id=body.get("allowanceTypeId")
        )
        return ok({"id": allowance_id})

    @app.route("/api/admin/users/<user_id>/allowances/<allowance_id>", methods=["DELETE"], endpoint="delete_user_allowance")
    def delete_user_allowance(user_id: str, allowance_id: str):
        container.user_allowance_service.remove(user_id, allowance_id)
        return ok({"id": allowance_id})
