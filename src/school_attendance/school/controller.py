from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify

from ..common.http import json_endpoint, request_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    school = container.school_service

    @app.route("/api/school", methods=["GET"], endpoint="api_school")
    @json_endpoint
    def api_school():
        return jsonify({"success": True, "school": asdict(school.get_details())})

    @app.route("/api/school", methods=["PUT"], endpoint="api_school_update")
    @json_endpoint
    def api_school_update():
        data = request_json()
        details = school.update_details(
            name=data.get("name", ""),
            address=data.get("address", ""),
            established_year=data.get("established_year", ""),
            logo_url=data.get("logo_url", ""),
            start_time=data.get("start_time"),
        )
        return jsonify({"success": True, "school": asdict(details)})

    @app.route("/api/school/start-time", methods=["PUT"], endpoint="api_school_start_time")
    @json_endpoint
    def api_school_start_time():
        details = school.update_start_time(request_json().get("start_time"))
        return jsonify(
            {
                "success": True,
                "school": asdict(details),
                "effective_start_time": school.effective_start_time(),
            }
        )
