from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, teacher_id_from
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students/register", methods=["POST"], endpoint="register_student")
    def register_student():
        data = json_body(request)
        student_id = container.student_service.register(
            name=data.get("name"),
            roll_no=data.get("roll_no"),
            department=data.get("department"),
        )
        return jsonify({"student_id": student_id})

    @app.route("/api/admin/students", methods=["GET"], endpoint="admin_students")
    def admin_students():
        students = container.student_service.list_students(teacher_id=teacher_id_from(request))
        return jsonify([s.to_dict() for s in students])

    @app.route("/api/admin/students/<student_id>", methods=["DELETE"], endpoint="admin_delete_student")
    def admin_delete_student(student_id: str):
        container.student_service.delete_student(student_id, teacher_id=teacher_id_from(request))
        return jsonify({"message": "Student deleted"})
