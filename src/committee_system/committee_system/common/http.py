"""JSON helpers shared by the controllers."""
from __future__ import annotations

from decimal import Decimal

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    CapacityError,
    ConflictError,
    DomainError,
    DuplicateAttendanceError,
    DuplicateError,
    NotFoundError,
    ValidationError,
)
from .logging import get_logger

logger = get_logger("http")

# Most specific first: DuplicateAttendanceError is a DuplicateError.
_STATUS = (
    (DuplicateAttendanceError, 409, "duplicate_attendance"),
    (ValidationError, 400, "validation_error"),
    (NotFoundError, 404, "not_found"),
    (CapacityError, 409, "capacity_exceeded"),
    (DuplicateError, 409, "duplicate"),
    (ConflictError, 409, "conflict"),
)


def status_for(exc: DomainError) -> tuple[int, str]:
    for cls, status, kind in _STATUS:
        if isinstance(exc, cls):
            return status, kind
    return 400, "domain_error"


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def money(value: Decimal) -> float:
    return float(value)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        status, kind = status_for(e)
        return jsonify({"success": False, "error": kind, "message": str(e)}), status

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"success": False, "error": e.name, "message": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"success": False, "error": "internal_error", "message": "Internal server error"}), 500
