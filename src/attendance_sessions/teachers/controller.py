from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/teacher/login", methods=["POST"], endpoint="teacher_login")
    def teacher_login():
        data = json_body(request)
        teacher_id = container.auth_service.login(data.get("username"), data.get("password"))
        return jsonify({"teacher_id": teacher_id})
