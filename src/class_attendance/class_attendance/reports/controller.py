from __future__ import annotations

import csv
import io

import pandas as pd
from flask import Flask, render_template, send_file

from ..container import Container
from .service import ReportData


def _subject_column(subject: str) -> str:
    return f"{subject} (%)"


def _flat_columns(data: ReportData) -> list[str]:
    return ["id", "name", *(_subject_column(subject) for subject in data.subjects)]


def _flat_rows(data: ReportData) -> list[dict]:
    """One flat dict per student, subject columns suffixed so they never shadow id or name."""
    flat = []
    for row in data.rows:
        item = {"id": row["id"], "name": row["name"]}
        for subject, percentage in row["percentages"].items():
            item[_subject_column(subject)] = percentage
        flat.append(item)
    return flat


def _report_frame(data: ReportData) -> pd.DataFrame:
    return pd.DataFrame(_flat_rows(data), columns=_flat_columns(data))


def register(app: Flask, container: Container) -> None:
    @app.route("/reports", endpoint="reports")
    def reports():
        data = container.report_service.build_attendance_report()
        return render_template(
            "reports.html",
            subjects=data.subjects,
            rows=data.rows,
            summary=data.summary,
            active_page="reports",
        )

    @app.route("/reports.csv", endpoint="reports_csv")
    def reports_csv():
        data = container.report_service.build_attendance_report()

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=_flat_columns(data))
        writer.writeheader()
        for row in _flat_rows(data):
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=attendance_report.csv"},
        )

    @app.route("/reports.xlsx", endpoint="reports_xlsx")
    def reports_xlsx():
        data = container.report_service.build_attendance_report()

        # Build the workbook in memory, nothing is written to disk.
        output = io.BytesIO()
        with pd.ExcelWriter(output, engine="openpyxl") as writer:
            _report_frame(data).to_excel(writer, index=False, sheet_name="Students")
            pd.DataFrame(data.summary, columns=["subject", "present", "total", "percentage"]).to_excel(
                writer, index=False, sheet_name="Subjects"
            )
        output.seek(0)

        return send_file(
            output,
            download_name="attendance_report.xlsx",
            as_attachment=True,
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )
