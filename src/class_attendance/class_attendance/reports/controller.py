from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from .codec import report_to_dict
from .store import StoreResult

PERSIST_FAILED_NOTICE = "Perubahan tidak dapat disimpan ke storan peranti."


def register(app: Flask, container: Container) -> None:
    store = container.report_store
    exporter = container.export_service

    def _mutation_response(result: StoreResult, message: str):
        return jsonify(
            {
                "success": True,
                "message": message if result.persisted else PERSIST_FAILED_NOTICE,
                "changed": result.changed,
                "persisted": result.persisted,
                "count": len(store.list()),
            }
        )

    @app.route("/api/reports", methods=["GET"], endpoint="api_reports")
    def api_reports():
        reports = store.list()
        return jsonify({"count": len(reports), "reports": [report_to_dict(r) for r in reports]})

    @app.route("/api/reports/<report_id>", methods=["GET"], endpoint="api_report_detail")
    def api_report_detail(report_id: str):
        report = store.get(report_id)
        if not report:
            return jsonify({"success": False, "message": "Rekod tidak dijumpai"}), 404
        return jsonify(report_to_dict(report))

    @app.route("/api/reports/<report_id>", methods=["DELETE"], endpoint="api_report_delete")
    def api_report_delete(report_id: str):
        result = store.delete_by_id(report_id)
        return _mutation_response(result, "Rekod telah dipadam daripada sejarah.")

    @app.route("/api/reports", methods=["DELETE"], endpoint="api_reports_clear")
    def api_reports_clear():
        if (request.args.get("confirm") or "").lower() not in {"1", "true", "yes"}:
            return (
                jsonify(
                    {
                        "success": False,
                        "message": "Padam SEMUA rekod sejarah? Hantar semula dengan confirm=true.",
                    }
                ),
                409,
            )
        result = store.clear()
        return _mutation_response(result, "Semua rekod sejarah telah dikosongkan.")

    @app.route("/reports/<report_id>.csv", methods=["GET"], endpoint="report_csv")
    def report_csv(report_id: str):
        report = store.get(report_id)
        if not report:
            return jsonify({"success": False, "message": "Rekod tidak dijumpai"}), 404

        doc = exporter.export_report(report)
        return app.response_class(
            doc.content,
            mimetype=doc.mimetype,
            headers={"Content-Disposition": f"attachment; filename=\"{doc.filename}\""},
        )
