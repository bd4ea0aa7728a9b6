from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/mark", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        data = json_body(request)
        container.marking_service.mark(data.get("student_id"))
        return jsonify({"message": "Attendance marked successfully"})
