from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.exceptions import AuthorizationError, DomainError, GatewayError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def ok(data=None, status: int = 200, **meta):
    payload = {"success": True, "data": data}
    if meta:
        payload["meta"] = meta
    return jsonify(payload), status


def fail(message: str = "Bad Request", status: int = 400, code=None, field=None, strategy=None):
    err = {"message": message}
    if code:
        err["code"] = code
    if field:
        err["field"] = field
    if strategy:
        err["strategy"] = strategy
    return jsonify({"success": False, "error": err}), status


def json_body() -> dict:
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        info = e.to_dict()
        return fail(info["message"], status=400, code=type(e).__name__, field=info["field"], strategy=info["strategy"])

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return fail(str(e), status=404, code="NOT_FOUND")

    @app.errorhandler(AuthorizationError)
    def _forbidden(e: AuthorizationError):
        return fail(str(e) or "Forbidden", status=403, code="FORBIDDEN")

    @app.errorhandler(GatewayError)
    def _gateway(e: GatewayError):
        # Backend 4xx (e.g. 404, 409) pass through; everything else is a bad gateway.
        status = e.status_code if e.status_code and 400 <= e.status_code < 500 else 502
        return fail(e.message, status=status, code="GATEWAY_ERROR")

    @app.errorhandler(DomainError)
    def _domain(e: DomainError):
        logger.exception("Unhandled domain error")
        return fail("Internal server error", status=500)

    @app.errorhandler(404)
    def _404(_):
        return fail("Not found", status=404)

    @app.errorhandler(405)
    def _405(_):
        return fail("Method not allowed", status=405)
