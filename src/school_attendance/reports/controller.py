from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_iso_date, now_local
from ..common.http import json_endpoint, parse_person_type
from ..common.validators import require_positive_int
from ..container import Container
from .service import series_row


def register(app: Flask, container: Container) -> None:
    def _today() -> str:
        return format_iso_date(now_local().date())

    def _days(default: int) -> int:
        return require_positive_int(request.args.get("days") or default, "days")

    @app.route("/api/dashboard", methods=["GET"], endpoint="api_dashboard")
    @json_endpoint
    def api_dashboard():
        data = container.report_service.dashboard(request.args.get("date") or _today())
        return jsonify({"success": True, **data})

    @app.route("/api/reports/day", methods=["GET"], endpoint="api_report_day")
    @json_endpoint
    def api_report_day():
        day = request.args.get("date") or _today()
        person_type = parse_person_type(request.args.get("type"))

        partition = container.report_service.partition_for_day(day, person_type)
        return jsonify(
            {
                "success": True,
                "date": partition.calendar_date,
                "type": person_type.value,
                "present": sorted(partition.present),
                "late": sorted(partition.late),
                "absent": sorted(partition.absent),
                "counts": partition.counts(),
                "rows": container.report_service.day_rows(partition.calendar_date, person_type),
            }
        )

    @app.route("/api/reports/series", methods=["GET"], endpoint="api_report_series")
    @json_endpoint
    def api_report_series():
        end = request.args.get("end") or _today()
        person_type = parse_person_type(request.args.get("type"))

        series = container.report_service.historical_series(end, _days(7), person_type)
        return jsonify({"success": True, "type": person_type.value, "series": [series_row(s) for s in series]})

    @app.route("/api/reports/series.csv", methods=["GET"], endpoint="api_report_series_csv")
    @json_endpoint
    def api_report_series_csv():
        end = request.args.get("end") or _today()
        days = _days(7)
        person_type = parse_person_type(request.args.get("type"))

        csv_bytes = container.report_service.series_csv(end, days, person_type)
        filename = f"attendance_{person_type.value.lower()}_{end.replace('-', '')}_{days}d.csv"
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
