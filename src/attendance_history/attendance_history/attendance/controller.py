from __future__ import annotations

import asyncio
import io
import logging
from functools import wraps

from flask import Flask, current_app, jsonify, redirect, request, send_file, session

from ..container import Container
from ..core.exceptions import AuthenticationMissing
from .model import FilterCriteria
from .service import HistoryView

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _redirect_to_login():
        return redirect(current_app.config.get("LOGIN_URL", "/login"))

    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return _redirect_to_login()
            return view(*args, **kwargs)

        return wrapper

    def _load_view() -> HistoryView:
        """Load the viewer's records and apply the filters from the query string."""

        criteria = FilterCriteria.from_mapping(request.args)
        service = container.attendance_history_service
        return asyncio.run(service.load(session.get("user_id"), criteria))

    def _notices(view: HistoryView) -> list[dict]:
        return [{"level": n.level, "title": n.title, "message": n.message} for n in view.notices]

    @app.route("/api/attendance/history", methods=["GET"], endpoint="attendance_history")
    @login_required
    def attendance_history():
        try:
            view = _load_view()
        except AuthenticationMissing:
            return _redirect_to_login()

        return jsonify(
            {
                "role": view.role.value,
                "rows": [r.to_dict() for r in view.rows()],
                "summary": view.summary(),
                "options": view.filter_options(),
                "notices": _notices(view),
            }
        )

    @app.route("/api/attendance/options", methods=["GET"], endpoint="attendance_options")
    @login_required
    def attendance_options():
        try:
            view = asyncio.run(container.attendance_history_service.load_options(session.get("user_id")))
        except AuthenticationMissing:
            return _redirect_to_login()
        return jsonify({"options": view.filter_options(), "notices": _notices(view)})

    @app.route("/attendance/report.csv", methods=["GET"], endpoint="attendance_report_csv")
    @login_required
    def attendance_report_csv():
        try:
            view = _load_view()
        except AuthenticationMissing:
            return _redirect_to_login()

        result = view.export()
        if not result.ok:
            return jsonify(
                {
                    "success": False,
                    "error": result.error.value if result.error else None,
                    "message": "There is no attendance data to export.",
                    "notices": _notices(view),
                }
            ), 404

        artifact = result.artifact
        return send_file(
            io.BytesIO(artifact.content),
            mimetype=artifact.mimetype,
            as_attachment=True,
            download_name=artifact.filename,
        )
