from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import json_body, owner_required
from ..container import Container
from ..dashboard.serializers import to_jsonable


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payments/<payment_id>/mark-paid", methods=["POST"], endpoint="api_payments_mark_paid")
    @owner_required(container)
    def api_payments_mark_paid(payment_id: str):
        body = json_body()
        payment = container.store.mark_payment_paid(
            payment_id,
            reference=body.get("reference", ""),
            paid_on=body.get("paidOn") or body.get("paid_on") or None,
        )
        return jsonify({"success": True, "message": "Payment marked as received", "data": to_jsonable(payment)}), 200

    @app.route("/api/payments/<payment_id>/status", methods=["POST"], endpoint="api_payments_status")
    @owner_required(container)
    def api_payments_status(payment_id: str):
        body = json_body()
        payment = container.store.set_payment_status(payment_id, body.get("status"))
        return jsonify({"success": True, "data": to_jsonable(payment)}), 200
