from __future__ import annotations

from datetime import datetime

from flask import Flask, g, jsonify

from ..common.datetime_utils import now_local
from ..common.web import date_arg, month_arg, viewer_required
from ..container import Container
from .serializers import to_jsonable


def register(app: Flask, container: Container) -> None:
    def _now() -> datetime:
        # ?date=YYYY-MM-DD pins "today" (demo data is not always current)
        pinned = date_arg("date")
        now = now_local()
        return datetime.combine(pinned, now.time()) if pinned else now

    @app.route("/api/dashboard", methods=["GET"], endpoint="api_dashboard")
    @viewer_required(container)
    def api_dashboard():
        vm = container.composer.compose(
            g.viewer,
            container.store,
            _now(),
            month=month_arg("month"),
            selected=date_arg("selected"),
        )
        return jsonify({"success": True, "data": to_jsonable(vm)}), 200

    @app.route("/api/calendar", methods=["GET"], endpoint="api_calendar")
    @viewer_required(container)
    def api_calendar():
        view, issues = container.composer.compose_calendar(
            g.viewer,
            container.store,
            _now(),
            month=month_arg("month"),
            selected=date_arg("selected"),
        )
        return jsonify({"success": True, "data": to_jsonable(view), "issues": to_jsonable(issues)}), 200
