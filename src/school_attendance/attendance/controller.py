from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_iso_date, now_local
from ..common.http import json_endpoint, json_error, parse_person_type, request_json
from ..common.validators import require_iso_date
from ..core.enums import AttendanceStatus, RejectReason
from ..container import Container
from .model import AttendanceEvent, IngestOutcome


def event_to_json(e: AttendanceEvent) -> dict:
    return {
        "event_id": e.event_id,
        "person_id": e.person_id,
        "type": e.person_type.value,
        "status": e.status.value,
        "timestamp": e.occurred_at_ms,
        "date": e.calendar_date,
        "time": e.occurred_at.strftime("%H:%M:%S"),
        "note": e.note or "",
    }


def _outcome_response(outcome: IngestOutcome):
    person = {"person_id": outcome.person.person_id, "name": outcome.person.display_name} if outcome.person else None

    if outcome.accepted:
        late = outcome.event.status == AttendanceStatus.LATE
        return jsonify(
            {
                "success": True,
                "message": outcome.message,
                "toast": "warning" if late else "success",
                "person": person,
                "event": event_to_json(outcome.event),
            }
        ), 200

    if outcome.reason == RejectReason.ALREADY_RECORDED:
        return jsonify(
            {
                "success": False,
                "reason": outcome.reason.value,
                "message": outcome.message,
                "toast": "error",
                "person": person,
                "existing": event_to_json(outcome.existing),
            }
        ), 409

    return jsonify(
        {
            "success": False,
            "reason": outcome.reason.value,
            "message": outcome.message,
            "toast": "error",
        }
    ), 404


def register(app: Flask, container: Container) -> None:
    @app.route("/api/scan", methods=["POST"], endpoint="api_scan")
    @json_endpoint
    def api_scan():
        """Record attendance for a decoded QR payload (the person identifier)."""
        data = request_json()
        code = str(data.get("code") or data.get("qr_code") or "").strip()
        if not code:
            return json_error("QR code must not be empty", 400)

        return _outcome_response(container.attendance_ledger.ingest(code))

    @app.route("/api/scan/image", methods=["POST"], endpoint="api_scan_image")
    @json_endpoint
    def api_scan_image():
        """Accept an uploaded photo, decode the QR code, then record attendance."""
        if "image" not in request.files:
            return json_error("Missing image file", 400)

        # pyzbar needs the native zbar library; only load it for this endpoint.
        from ..cards.scanner import decode_qr_payloads

        payloads = decode_qr_payloads(request.files["image"].stream)
        if not payloads:
            return json_error("No QR code found in image", 400)

        return _outcome_response(container.attendance_ledger.ingest(payloads[0]))

    @app.route("/api/attendance", methods=["GET"], endpoint="api_attendance")
    @json_endpoint
    def api_attendance():
        day = require_iso_date(request.args.get("date") or format_iso_date(now_local().date()), "date")
        type_arg = request.args.get("type")
        person_type = parse_person_type(type_arg) if type_arg else None

        events = container.attendance_ledger.events_on(day, person_type)
        return jsonify({"success": True, "date": day, "events": [event_to_json(e) for e in events]})
