import os
from pathlib import Path

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Static JSON data set shipped with the repository
DATA_DIR = os.getenv("DATA_DIR", str(Path(__file__).resolve().parents[3] / "data"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

UPCOMING_HORIZON_DAYS = int(os.getenv("UPCOMING_HORIZON_DAYS", "30"))
DUE_SOON_DAYS = int(os.getenv("DUE_SOON_DAYS", "7"))
ATTENDANCE_WINDOW_DAYS = int(os.getenv("ATTENDANCE_WINDOW_DAYS", "7"))
TERM_MONTHS = int(os.getenv("TERM_MONTHS", "3"))
CELL_EVENT_CAP = int(os.getenv("CELL_EVENT_CAP", "3"))
RECENT_PAYMENTS_LIMIT = int(os.getenv("RECENT_PAYMENTS_LIMIT", "6"))
