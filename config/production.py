import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
}

LOGIN_URL = os.getenv("LOGIN_URL", "/login")

ADMIN_RECORD_LIMIT = int(os.getenv("ADMIN_RECORD_LIMIT", "500"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False
