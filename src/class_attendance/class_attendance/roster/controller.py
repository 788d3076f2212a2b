from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container


def register(app: Flask, container: Container) -> None:
    roster = container.roster

    @app.route("/api/roster", methods=["GET"], endpoint="api_roster")
    def api_roster():
        return jsonify(
            {
                "teachers": [{"id": t.teacher_id, "name": t.name} for t in roster.list_teachers()],
                "subjects": [s.value for s in roster.list_subjects()],
                "timeslots": [t.value for t in roster.list_timeslots()],
                "years": [
                    {
                        "year": g.year,
                        "total": g.total,
                        "pupils": [{"id": p.pupil_id, "name": p.name} for p in g.pupils],
                    }
                    for g in roster.year_groups()
                ],
                "size": roster.size,
            }
        )
