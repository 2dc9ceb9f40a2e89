import os

SECRET_KEY = "test-secret"

STUDENTS_FILE = os.getenv("STUDENTS_FILE", "students.test.json")
SUBJECTS = ("DS", "LINUX", "AJVA")
STORE_MISSING_OK = True

HOST = "127.0.0.1"
PORT = 2727

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
