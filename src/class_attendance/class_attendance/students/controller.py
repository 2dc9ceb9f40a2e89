from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/", endpoint="index")
    def index():
        students = container.student_service.list_students()
        return render_template(
            "index.html",
            students=students,
            subjects=container.subjects,
            active_page="index",
        )

    @app.route("/add-student", methods=["GET", "POST"], endpoint="add_student")
    @app.route("/add", methods=["GET", "POST"], endpoint="add_student_short")
    def add_student():
        if request.method == "POST":
            student = container.student_service.add_student(request.form.get("name"))
            flash(f"Added {student.name} (id {student.student_id}).", "success")
            return redirect(url_for("index"))

        return render_template("add_student.html", active_page="add_student")

    @app.route("/edit/<int:student_id>", methods=["GET", "POST"], endpoint="edit_student")
    def edit_student(student_id: int):
        if request.method == "POST":
            student = container.student_service.rename_student(student_id, request.form.get("name"))
            flash(f"Renamed student {student_id} to {student.name}.", "success")
            return redirect(url_for("index"))

        student = container.student_service.get_student(student_id)
        return render_template("edit_student.html", student=student, active_page="index")

    @app.route("/delete/<int:student_id>", endpoint="delete_student")
    def delete_student(student_id: int):
        container.student_service.delete_student(student_id)
        flash(f"Deleted student {student_id}.", "info")
        return redirect(url_for("index"))
