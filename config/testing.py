import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_test"),
}

LOGIN_URL = "/login"

ADMIN_RECORD_LIMIT = 500

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True
