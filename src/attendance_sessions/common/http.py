from __future__ import annotations

from typing import Any, Dict, Optional

from flask import Request, jsonify

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
)


def json_body(request: Request) -> Dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def teacher_id_from(request: Request, body: Optional[Dict[str, Any]] = None) -> Optional[str]:
    """teacher_id may come in the JSON body or the query string."""
    value = (body or {}).get("teacher_id") or request.args.get("teacher_id")
    return str(value) if value else None


def status_for(exc: DomainError) -> int:
    if isinstance(exc, AuthenticationError):
        return 401
    if isinstance(exc, AuthorizationError):
        return 403
    if isinstance(exc, NotFoundError):
        return 404
    # ValidationError, ConflictError (incl. AlreadyMarkedError), NotActiveError
    return 400


def error_response(exc: DomainError):
    return jsonify({"error": str(exc)}), status_for(exc)
