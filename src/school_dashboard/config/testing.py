from pathlib import Path

SECRET_KEY = "test-secret"

DATA_DIR = str(Path(__file__).resolve().parents[3] / "data")

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
