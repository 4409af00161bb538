from __future__ import annotations

import uuid

from flask import Flask, g, jsonify

from ..common.web import json_body, owner_required
from ..container import Container
from ..core.exceptions import ValidationError
from ..dashboard.serializers import to_jsonable
from .model import audience_from_kind


def _event_datetime(body: dict) -> str:
    """Combine the form's ``date`` and optional ``time`` into one ISO string."""
    day = str(body.get("date") or "").strip()
    at = str(body.get("time") or "").strip()
    if day and at and "T" not in day:
        return f"{day}T{at}:00"
    return day


def _audience(body: dict):
    audience = body.get("audience") or {}
    if not isinstance(audience, dict):
        raise ValidationError("Audience must be an object with kind and id")
    return audience_from_kind(audience.get("kind"), audience.get("id"))


def register(app: Flask, container: Container) -> None:
    @app.route("/api/events", methods=["POST"], endpoint="api_events_create")
    @owner_required(container)
    def api_events_create():
        body = json_body()
        event = container.store.add_event(
            event_id=f"event_{uuid.uuid4().hex[:12]}",
            title=body.get("title", ""),
            date=_event_datetime(body),
            type=body.get("type", "event"),
            audience=_audience(body),
            notes=body.get("notes", ""),
            created_by=g.viewer.viewer_id,
        )
        return jsonify({"success": True, "message": "Event created", "data": to_jsonable(event)}), 201

    @app.route("/api/events/<event_id>", methods=["PUT"], endpoint="api_events_update")
    @owner_required(container)
    def api_events_update(event_id: str):
        body = json_body()
        changes = {}
        if "title" in body:
            changes["title"] = body["title"]
        if "date" in body:
            changes["date"] = _event_datetime(body)
        if "type" in body:
            changes["type"] = body["type"]
        if "notes" in body:
            changes["notes"] = body["notes"] or ""
        if "audience" in body:
            changes["audience"] = _audience(body)
        event = container.store.update_event(event_id, **changes)
        return jsonify({"success": True, "message": "Event updated", "data": to_jsonable(event)}), 200

    @app.route("/api/events/<event_id>", methods=["DELETE"], endpoint="api_events_delete")
    @owner_required(container)
    def api_events_delete(event_id: str):
        container.store.delete_event(event_id)
        return jsonify({"success": True, "message": "Event deleted"}), 200
