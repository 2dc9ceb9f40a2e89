import os

from config import parse_subjects

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STUDENTS_FILE = os.getenv("STUDENTS_FILE", "students.json")
SUBJECTS = parse_subjects(os.getenv("SUBJECTS", "DS,LINUX,AJVA"))
STORE_MISSING_OK = bool(int(os.getenv("STORE_MISSING_OK", "1")))

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "2727"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
