from __future__ import annotations

import csv
import io
from dataclasses import dataclass

from ..analytics.model import AnalyticsSummary, SubjectStats
from ..common.datetime_utils import format_long_date, month_name
from ..reports.model import Report
from ..roster.service import Roster


@dataclass(frozen=True)
class ExportedDocument:
    filename: str
    content: bytes
    mimetype: str = "text/csv"


def _to_bytes(out: io.StringIO) -> bytes:
    # BOM so Excel opens the file as UTF-8.
    return out.getvalue().encode("utf-8-sig")


class ExportService:
    """Renders reports and analytics summaries as downloadable CSV."""

    def __init__(self, roster: Roster, *, school_name: str, programme_name: str):
        self._roster = roster
        self._school_name = school_name
        self._programme_name = programme_name

    @staticmethod
    def report_filename(report: Report) -> str:
        return f"Kehadiran_{report.date.isoformat()}_{report.subject.value}.csv"

    @staticmethod
    def analytics_filename(year: int, month: int) -> str:
        return f"Analisis_Kehadiran_{year}_Bulan_{month}.csv"

    def export_report(self, report: Report) -> ExportedDocument:
        out = io.StringIO()
        writer = csv.writer(out)
        writer.writerow(["Rekod Kehadiran", self._school_name])
        writer.writerow(["Program", self._programme_name])
        writer.writerow(["Tarikh", format_long_date(report.date)])
        writer.writerow(["Guru", report.teacher_name])
        writer.writerow(["Subjek", report.subject.value])
        writer.writerow(["Slot Masa", report.timeslot.value])
        writer.writerow(["Jumlah Hadir", f"{report.total_present}/{self._roster.size}"])
        writer.writerow([])

        writer.writerow(["Tahun", "Nama", "Status"])
        for p in self._roster.list_pupils():
            writer.writerow([p.year, p.name, "Hadir" if report.is_present(p.pupil_id) else "Tidak Hadir"])

        return ExportedDocument(filename=self.report_filename(report), content=_to_bytes(out))

    def export_summary(self, summary: AnalyticsSummary) -> ExportedDocument:
        out = io.StringIO()
        writer = csv.DictWriter(
            out,
            fieldnames=["period", "subject", "session_count", "total_present", "total_possible", "percentage"],
        )
        writer.writeheader()

        monthly_label = f"{month_name(summary.month)} {summary.year}"
        for label, rows in ((monthly_label, summary.monthly), (str(summary.year), summary.yearly)):
            for s in rows:
                writer.writerow(self._stats_row(label, s))

        writer.writerow(
            {
                "period": str(summary.year),
                "subject": "Purata Keseluruhan",
                "percentage": summary.overall_average,
            }
        )
        return ExportedDocument(filename=self.analytics_filename(summary.year, summary.month), content=_to_bytes(out))

    @staticmethod
    def _stats_row(period: str, s: SubjectStats) -> dict:
        return {
            "period": period,
            "subject": s.subject.value,
            "session_count": s.session_count,
            "total_present": s.total_present,
            "total_possible": s.total_possible,
            "percentage": s.percentage,
        }
