import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Local snapshot (always written first)
DATA_DIR = os.getenv("DATA_DIR", "data")
SNAPSHOT_FILE = os.getenv("SNAPSHOT_FILE", "roster.json")

# Optional spreadsheet-backed endpoint; empty disables remote sync
REMOTE_SYNC_URL = os.getenv("REMOTE_SYNC_URL", "")
REMOTE_TIMEOUT = float(os.getenv("REMOTE_TIMEOUT", "10"))

ASSISTANT_API_KEY = os.getenv("ASSISTANT_API_KEY", "")
ASSISTANT_MODEL = os.getenv("ASSISTANT_MODEL", "gemini-2.5-flash")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
