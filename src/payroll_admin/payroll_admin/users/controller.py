from __future__ import annotations

from flask import Flask, request

from ..common.http import json_body, ok
from ..core.constants import USER_LOOKUP_LIMIT
from ..container import Container
from .model import User


def user_to_dict(u: User) -> dict:
    return {
        "id": u.user_id,
        "name": u.name,
        "email": u.email,
        "role": u.role.value,
        "baseSalary": None if u.base_salary is None else str(u.base_salary),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/users", methods=["GET"], endpoint="list_users")
    def list_users():
        limit = request.args.get("limit", default=USER_LOOKUP_LIMIT, type=int)
        return ok([user_to_dict(u) for u in container.user_service.list_users(limit=limit)])

    @app.route("/api/admin/users/<user_id>", methods=["GET"], endpoint="get_user")
    def get_user(user_id: str):
        return ok(user_to_dict(container.user_service.get_user(user_id)))

    @app.route("/api/admin/users", methods=["POST"], endpoint="create_user")
    def create_user():
        body = json_body()
        user_id = container.user_service.create_account(
            name=body.get("name") or "",
            email=body.get("email") or "",
            password=body.get("password") or "",
            role=body.get("role"),
            base_salary=body.get("baseSalary"),
        )
        return ok({"id": user_id}, status=201)

    @app.route("/api/admin/users/<user_id>", methods=["PUT"], endpoint="update_user")
    def update_user(user_id: str):
        body = json_body()
        container.user_service.update_account(
            user_id,
            name=body.get("name") or "",
            email=body.get("email") or "",
            role=body.get("role"),
            base_salary=body.get("baseSalary"),
            password=body.get("password"),
        )
        return ok({"id": user_id})

    @app.route("/api/admin/users/<user_id>", methods=["DELETE"], endpoint="delete_user")
    def delete_user(user_id: str):
        container.user_service.delete_account(user_id)
        return ok({"id": user_id})
