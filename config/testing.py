import os
import tempfile

SECRET_KEY = "test-secret"

DATA_DIR = os.getenv("DATA_DIR", tempfile.mkdtemp(prefix="roster-test-"))
SNAPSHOT_FILE = "roster.json"

REMOTE_SYNC_URL = ""
REMOTE_TIMEOUT = 1.0

ASSISTANT_API_KEY = ""
ASSISTANT_MODEL = "gemini-2.5-flash"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
