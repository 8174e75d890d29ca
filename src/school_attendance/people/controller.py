from __future__ import annotations

import io
from dataclasses import asdict

from flask import Flask, jsonify, send_file

from ..common.http import json_endpoint, request_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    roster = container.roster_service

    @app.route("/api/students", methods=["GET"], endpoint="api_students")
    @json_endpoint
    def api_students():
        return jsonify({"success": True, "students": [asdict(s) for s in roster.list_students()]})

    @app.route("/api/students", methods=["POST"], endpoint="api_students_add")
    @json_endpoint
    def api_students_add():
        data = request_json()
        student = roster.add_student(
            name=data.get("name", ""),
            roll_number=data.get("roll_number", ""),
            grade=data.get("grade", ""),
            section=data.get("section", ""),
            parent_name=data.get("parent_name", ""),
            parent_contact=data.get("parent_contact", ""),
            dob=data.get("dob", ""),
            blood_group=data.get("blood_group", ""),
            address=data.get("address", ""),
            avatar_url=data.get("avatar_url", ""),
        )
        return jsonify({"success": True, "student": asdict(student)}), 201

    @app.route("/api/students/bulk", methods=["POST"], endpoint="api_students_bulk")
    @json_endpoint
    def api_students_bulk():
        added = roster.bulk_add_students(request_json().get("text", ""))
        return jsonify({"success": True, "added": len(added), "students": [asdict(s) for s in added]}), 201

    @app.route("/api/teachers", methods=["GET"], endpoint="api_teachers")
    @json_endpoint
    def api_teachers():
        return jsonify({"success": True, "teachers": [asdict(t) for t in roster.list_teachers()]})

    @app.route("/api/teachers", methods=["POST"], endpoint="api_teachers_add")
    @json_endpoint
    def api_teachers_add():
        data = request_json()
        teacher = roster.add_teacher(
            name=data.get("name", ""),
            subject=data.get("subject", ""),
            contact=data.get("contact", ""),
            email=data.get("email", ""),
            qualification=data.get("qualification", ""),
            avatar_url=data.get("avatar_url", ""),
        )
        return jsonify({"success": True, "teacher": asdict(teacher)}), 201

    @app.route("/api/people/<person_id>", methods=["DELETE"], endpoint="api_people_delete")
    @json_endpoint
    def api_people_delete(person_id: str):
        roster.remove_person(person_id)
        return jsonify({"success": True, "message": "Removed"})

    @app.route("/api/people/<person_id>/card", methods=["GET"], endpoint="api_people_card")
    @json_endpoint
    def api_people_card(person_id: str):
        return jsonify({"success": True, "card": container.card_service.card_data(person_id)})

    @app.route("/api/people/<person_id>/qr.png", methods=["GET"], endpoint="api_people_qr")
    @json_endpoint
    def api_people_qr(person_id: str):
        png = container.card_service.qr_png(person_id)
        return send_file(io.BytesIO(png), mimetype="image/png")
