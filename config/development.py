import os

from config import parse_subjects

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Backing JSON file for the student store
STUDENTS_FILE = os.getenv("STUDENTS_FILE", "students.json")
# Deployment-specific subject keys every new student starts with
SUBJECTS = parse_subjects(os.getenv("SUBJECTS", "DS,LINUX,AJVA"))
# If enabled, a missing store file reads as an empty student list
STORE_MISSING_OK = bool(int(os.getenv("STORE_MISSING_OK", "1")))

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "2727"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
