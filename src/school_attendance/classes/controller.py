from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify

from ..common.http import json_endpoint, request_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/classes", methods=["GET"], endpoint="api_classes")
    @json_endpoint
    def api_classes():
        classes = container.class_service.list_classes()
        return jsonify({"success": True, "classes": [asdict(c) for c in classes]})

    @app.route("/api/classes", methods=["POST"], endpoint="api_classes_add")
    @json_endpoint
    def api_classes_add():
        data = request_json()
        cls = container.class_service.add_class(
            grade=data.get("grade", ""),
            section=data.get("section", ""),
            class_teacher_id=data.get("class_teacher_id"),
        )
        return jsonify({"success": True, "class": asdict(cls)}), 201

    @app.route("/api/classes/<class_id>", methods=["DELETE"], endpoint="api_classes_delete")
    @json_endpoint
    def api_classes_delete(class_id: str):
        container.class_service.remove_class(class_id)
        return jsonify({"success": True, "message": "Removed"})
