"""Request helpers shared by the JSON controllers."""

from __future__ import annotations

from datetime import date
from functools import wraps
from typing import Optional

from flask import Flask, abort, g, jsonify, request

from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..core.logger import get_logger
from ..users.model import Viewer
from .datetime_utils import parse_iso_date, parse_month_key

log = get_logger(__name__)

VIEWER_HEADER = "X-Viewer-Id"


def current_viewer(container) -> Viewer:
    """Viewer named by the auth collaborator (query arg or header)."""
    viewer_id = request.args.get("viewer_id") or request.headers.get(VIEWER_HEADER)
    if not viewer_id:
        abort(401)
    user = container.store.get_user(viewer_id)
    if not user:
        abort(404)
    return Viewer.from_user(user)


def viewer_required(container):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            g.viewer = current_viewer(container)
            return view(*args, **kwargs)

        return wrapper

    return decorator


def owner_required(container):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            g.viewer = current_viewer(container)
            if g.viewer.role != Role.SCHOOL_OWNER:
                raise AuthorizationError("Only the school owner can change this")
            return view(*args, **kwargs)

        return wrapper

    return decorator


def date_arg(name: str) -> Optional[date]:
    value = request.args.get(name)
    if not value:
        return None
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{name} must be YYYY-MM-DD")


def month_arg(name: str) -> Optional[date]:
    value = request.args.get(name)
    if not value:
        return None
    try:
        return parse_month_key(value)
    except ValueError:
        raise ValidationError(f"{name} must be YYYY-MM")


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(AuthorizationError)
    def _forbidden(e: AuthorizationError):
        return jsonify({"success": False, "message": str(e)}), 403

    @app.errorhandler(401)
    def _unauthorized(e):
        return jsonify({"success": False, "message": "Viewer id is required"}), 401

    @app.errorhandler(404)
    def _not_found(e):
        return jsonify({"success": False, "message": "Not found"}), 404
