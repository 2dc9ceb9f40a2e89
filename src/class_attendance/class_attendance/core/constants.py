"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

DEFAULT_SUBJECTS = ("DS", "LINUX", "AJVA")
DEFAULT_STUDENTS_FILE = "students.json"
DEFAULT_PORT = 2727

PRESENT = "Present"
ABSENT = "Absent"

INVALID_SUBJECT_MESSAGE = "Invalid subject selection."
