from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..core.exceptions import ValidationError
from ..container import Container
from .model import AnalyticsSummary, SubjectStats


def stats_to_dict(s: SubjectStats) -> dict:
    return {
        "subject": s.subject.value,
        "total_present": s.total_present,
        "total_possible": s.total_possible,
        "percentage": s.percentage,
        "session_count": s.session_count,
    }


def summary_to_dict(summary: AnalyticsSummary) -> dict:
    return {
        "year": summary.year,
        "month": summary.month,
        "monthly": [stats_to_dict(s) for s in summary.monthly],
        "yearly": [stats_to_dict(s) for s in summary.yearly],
        "overall_average": summary.overall_average,
    }


def register(app: Flask, container: Container) -> None:
    analytics = container.analytics_service
    exporter = container.export_service

    def _period() -> tuple[int, int]:
        today = date.today()
        try:
            year = int(request.args.get("year") or today.year)
            month = int(request.args.get("month") or today.month)
        except ValueError:
            raise ValidationError("Tahun/bulan tidak sah")
        return year, month

    @app.route("/api/analytics", methods=["GET"], endpoint="api_analytics")
    def api_analytics():
        try:
            year, month = _period()
            summary = analytics.summary(year=year, month=month)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify(summary_to_dict(summary))

    @app.route("/analytics.csv", methods=["GET"], endpoint="analytics_csv")
    def analytics_csv():
        try:
            year, month = _period()
            summary = analytics.summary(year=year, month=month)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        doc = exporter.export_summary(summary)
        return app.response_class(
            doc.content,
            mimetype=doc.mimetype,
            headers={"Content-Disposition": f"attachment; filename=\"{doc.filename}\""},
        )
