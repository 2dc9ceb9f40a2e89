from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import today_iso
from ..common.validators import parse_int
from ..container import Container
from ..core.constants import INVALID_SUBJECT_MESSAGE
from ..core.enums import AttendanceStatus

SUBMISSION_PREFIX = "attendance_"


def _plain_text(body: str, status: int = 200):
    return body, status, {"Content-Type": "text/plain; charset=utf-8"}


def _parse_submissions(form) -> dict[int, str]:
    """Collect `attendance_<id>` fields into {student_id: status}."""
    submissions: dict[int, str] = {}
    for key, value in form.items():
        if not key.startswith(SUBMISSION_PREFIX):
            continue
        suffix = key[len(SUBMISSION_PREFIX):]
        if suffix.isascii() and suffix.isdigit():
            submissions[int(suffix)] = value
    return submissions


def register(app: Flask, container: Container) -> None:
    statuses = [s.value for s in AttendanceStatus]

    @app.route("/select-subject", endpoint="select_subject")
    def select_subject():
        return render_template("select_subject.html", subjects=container.subjects, active_page="select_subject")

    @app.route("/mark-attendance", endpoint="mark_attendance")
    def mark_attendance():
        subject = request.args.get("subject")
        if not subject:
            # Kept as a 200 plain-text body for compatibility with existing clients.
            return _plain_text(INVALID_SUBJECT_MESSAGE)

        students = container.attendance_service.list_students()
        return render_template(
            "mark_attendance.html",
            students=students,
            subject=subject,
            statuses=statuses,
            today=today_iso(),
            active_page="select_subject",
        )

    @app.route("/submit-attendance", methods=["POST"], endpoint="submit_attendance")
    def submit_attendance():
        subject = request.form.get("subject")
        if not subject:
            return _plain_text(INVALID_SUBJECT_MESSAGE)

        marked = container.attendance_service.mark_bulk(
            subject=subject,
            date=request.form.get("date") or None,
            submissions=_parse_submissions(request.form),
        )
        flash(f"Recorded {subject} attendance for {marked} student(s).", "success")
        return redirect(url_for("index"))

    @app.route("/mark-attendance/<int:student_id>", methods=["GET", "POST"], endpoint="mark_student_attendance")
    def mark_student_attendance(student_id: int):
        if request.method == "POST":
            record = container.attendance_service.mark(
                student_id,
                subject=request.form.get("subject"),
                date=request.form.get("date"),
                status=request.form.get("status"),
            )
            flash(f"Saved {record.status} for {record.date}.", "success")
            return redirect(url_for("index"))

        student = container.student_service.get_student(student_id)
        return render_template(
            "mark_student_attendance.html",
            student=student,
            subjects=container.subjects,
            statuses=statuses,
            today=today_iso(),
            active_page="index",
        )

    @app.route("/records/<int:student_id>", endpoint="student_records")
    def student_records(student_id: int):
        subject = request.args.get("subject") or None
        student, sections = container.attendance_service.records_ui(student_id, subject=subject)
        return render_template(
            "records.html",
            student=student,
            sections=sections,
            subject=subject,
            active_page="index",
        )

    @app.route("/edit-attendance/<int:student_id>", methods=["GET", "POST"], endpoint="edit_attendance")
    def edit_attendance(student_id: int):
        source = request.form if request.method == "POST" else request.args
        subject = source.get("subject")
        index = parse_int(source.get("index"), "index")

        if request.method == "POST":
            container.attendance_service.edit(
                student_id,
                subject=subject,
                index=index,
                status=request.form.get("status"),
            )
            flash("Attendance record updated.", "success")
            return redirect(url_for("student_records", student_id=student_id, subject=subject))

        student = container.student_service.get_student(student_id)
        record = container.attendance_service.get_record(student_id, subject=subject, index=index)
        return render_template(
            "edit_attendance.html",
            student=student,
            subject=subject,
            index=index,
            record=record,
            statuses=statuses,
            active_page="index",
        )
