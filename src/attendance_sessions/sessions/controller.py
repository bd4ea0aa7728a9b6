from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, teacher_id_from
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/sessions/start", methods=["POST"], endpoint="start_session")
    def start_session():
        data = json_body(request)
        session_id = container.lifecycle_service.start_session(
            department=data.get("department"),
            duration_minutes=data.get("duration_minutes"),
            teacher_id=teacher_id_from(request, data),
        )
        return jsonify({"session_id": session_id})

    @app.route("/api/sessions/<session_id>/close", methods=["POST"], endpoint="close_session")
    def close_session(session_id: str):
        data = json_body(request)
        closed = container.lifecycle_service.close_session(session_id, teacher_id=teacher_id_from(request, data))
        return jsonify({"closed": closed})
