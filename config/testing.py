import os

FIREBASE_CREDENTIALS_FILE = "tests/serviceAccount.json"
FIREBASE_PROJECT_ID = None

REPORT_START = "2024-02-01"
REPORT_END = "2024-02-15"
SOCIETY_ID = "IDC"
REPORT_TIMEZONE = "UTC"
DISPLAY_NAME_FIELD = "full_name_heb"

CANCELLATION_MODE = "strict"
STRICT_RECORDS = True

NOVICE_RANK = "Junior"
FEEDBACK_MONTHS_LOOKBACK = 6

OUTPUT_DIR = os.getenv("OUTPUT_DIR", "output")
LOG_LEVEL = "DEBUG"
TESTING = True
