import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DATA_DIR = os.getenv("DATA_DIR", "/var/lib/roster-manager")
SNAPSHOT_FILE = os.getenv("SNAPSHOT_FILE", "roster.json")

REMOTE_SYNC_URL = os.getenv("REMOTE_SYNC_URL", "")
REMOTE_TIMEOUT = float(os.getenv("REMOTE_TIMEOUT", "10"))

ASSISTANT_API_KEY = os.getenv("ASSISTANT_API_KEY", "")
ASSISTANT_MODEL = os.getenv("ASSISTANT_MODEL", "gemini-2.5-flash")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
