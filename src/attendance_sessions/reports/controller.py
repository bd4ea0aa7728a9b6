from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..common.http import teacher_id_from
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/history", methods=["GET"], endpoint="admin_history")
    def admin_history():
        rows = container.report_service.history(
            department=request.args.get("department"),
            day=request.args.get("date"),
            teacher_id=teacher_id_from(request),
        )
        return jsonify([r.to_dict() for r in rows])

    @app.route("/api/admin/export", methods=["GET"], endpoint="admin_export")
    def admin_export():
        department = request.args.get("department")
        day = request.args.get("date")
        payload = container.report_service.export_csv(
            department=department,
            day=day,
            teacher_id=teacher_id_from(request),
        )

        # send_file quotes the name and adds an RFC 5987 filename* for non-ASCII departments.
        filename = f"attendance_{department.strip()}_{day.strip()}.csv"
        return send_file(
            io.BytesIO(payload.encode("utf-8")),
            mimetype="text/csv",
            as_attachment=True,
            download_name=filename,
        )
