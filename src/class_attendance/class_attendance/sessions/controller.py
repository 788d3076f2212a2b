from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.enums import CloudSyncStatus
from ..core.exceptions import ValidationError
from ..container import Container
from ..reports.codec import report_to_dict
from .service import SessionPreview

_LOGGER = logging.getLogger(__name__)

_CLOUD_NOTICES = {
    CloudSyncStatus.SENT: ("success", "Berjaya dihantar ke Google Sheets!"),
    CloudSyncStatus.FAILED: ("error", "Gagal simpan ke awan, tetapi disimpan di peranti."),
    CloudSyncStatus.DISABLED: ("info", "URL Google Script tidak ditetapkan. Data hanya disimpan di peranti ini."),
}

PERSIST_FAILED_NOTICE = "Gagal menyimpan ke storan peranti. Rekod kekal dalam sesi semasa sahaja."

_SESSION_FIELDS = {
    "date": "date_value",
    "teacher_id": "teacher_id",
    "subject": "subject",
    "timeslot": "timeslot",
}


def preview_to_dict(p: SessionPreview) -> dict:
    return {
        "date": p.date,
        "formatted_date": p.formatted_date,
        "teacher_id": p.teacher_id,
        "teacher_name": p.teacher_name,
        "subject": p.subject,
        "timeslot": p.timeslot,
        "total_present": p.total_present,
        "roster_size": p.roster_size,
        "years": [
            {
                "year": g.year,
                "present": g.present,
                "total": g.total,
                "pupils": [
                    {"id": pupil.pupil_id, "name": pupil.name, "present": p.attendance.get(pupil.pupil_id, False)}
                    for pupil in g.pupils
                ],
            }
            for g in p.years
        ],
        "attendance": p.attendance,
    }


def register(app: Flask, container: Container) -> None:
    sessions = container.session_service

    def _fail(message: str, status: int = 400):
        return jsonify({"success": False, "message": message}), status

    def _ok(message: str = "", **extra):
        body = {"success": True, "message": message}
        body.update(extra)
        body["session"] = preview_to_dict(sessions.preview())
        return jsonify(body), 200

    @app.route("/api/session", methods=["GET"], endpoint="api_session")
    def api_session():
        return jsonify(preview_to_dict(sessions.preview()))

    @app.route("/api/session", methods=["POST"], endpoint="api_session_update")
    def api_session_update():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return _fail("Data sesi mesti objek JSON")
        kwargs = {_SESSION_FIELDS[k]: v for k, v in data.items() if k in _SESSION_FIELDS}
        try:
            sessions.update(**kwargs)
        except ValidationError as e:
            return _fail(str(e))
        return _ok()

    @app.route("/api/session/pupils/<pupil_id>/toggle", methods=["POST"], endpoint="api_session_toggle")
    def api_session_toggle(pupil_id: str):
        try:
            present = sessions.session.toggle_attendance(pupil_id)
        except ValidationError as e:
            return _fail(str(e), 404)
        return _ok(pupil_id=pupil_id, present=present)

    @app.route("/api/session/years/<int:year>/select", methods=["POST"], endpoint="api_session_select_year")
    def api_session_select_year(year: int):
        try:
            sessions.session.set_all_in_year(year, True)
        except ValidationError as e:
            return _fail(str(e))
        return _ok(f"Semua murid Tahun {year} ditanda hadir.")

    @app.route("/api/session/years/<int:year>/reset", methods=["POST"], endpoint="api_session_reset_year")
    def api_session_reset_year(year: int):
        try:
            sessions.session.set_all_in_year(year, False)
        except ValidationError as e:
            return _fail(str(e))
        return _ok(f"Kehadiran Tahun {year} telah diset semula.")

    @app.route("/api/session/reset", methods=["POST"], endpoint="api_session_reset")
    def api_session_reset():
        sessions.reset()
        return _ok("Sesi baharu dimulakan.")

    @app.route("/api/session/save", methods=["POST"], endpoint="api_session_save")
    async def api_session_save():
        try:
            outcome = await sessions.save()
        except ValidationError as e:
            return _fail(str(e))
        except Exception:
            _LOGGER.exception("Unexpected error while saving session")
            return _fail("Ralat sistem semasa menyimpan sesi", 500)

        notices = [{"type": "info", "message": "Rekod disimpan secara lokal!"}]
        if not outcome.persisted:
            notices = [{"type": "error", "message": PERSIST_FAILED_NOTICE}]
        kind, text = _CLOUD_NOTICES[outcome.cloud_status]
        notices.append({"type": kind, "message": text})

        return (
            jsonify(
                {
                    "success": True,
                    "message": notices[0]["message"],
                    "notices": notices,
                    "persisted": outcome.persisted,
                    "cloud_status": outcome.cloud_status.value,
                    "report": report_to_dict(outcome.report),
                }
            ),
            201,
        )
