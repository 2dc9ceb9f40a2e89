"""Class Attendance package.

Organized by feature modules (students, attendance, reports) with a thin Flask
controller layer over service functions and a JSON-file record store.
"""
