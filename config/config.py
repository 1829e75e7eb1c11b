import os


class Config:
    # Document store
    FIREBASE_CREDENTIALS_FILE = os.environ.get("FIREBASE_CREDENTIALS_FILE", "serviceAccount.json")
    FIREBASE_PROJECT_ID = os.environ.get("FIREBASE_PROJECT_ID") or None

    # Report window and cohort
    REPORT_START = os.environ.get("REPORT_START", "2024-02-01")
    REPORT_END = os.environ.get("REPORT_END", "2024-04-01")
    SOCIETY_ID = os.environ.get("SOCIETY_ID", "IDC")
    REPORT_TIMEZONE = os.environ.get("REPORT_TIMEZONE", "Asia/Jerusalem")
    DISPLAY_NAME_FIELD = os.environ.get("DISPLAY_NAME_FIELD", "full_name_heb")

    # "strict" excludes cancelled and cancelledOnTime; "cancelled_only" ignores the latter
    CANCELLATION_MODE = os.environ.get("CANCELLATION_MODE", "strict")
    STRICT_RECORDS = bool(int(os.environ.get("STRICT_RECORDS", "1")))

    # Novice feedback export
    NOVICE_RANK = os.environ.get("NOVICE_RANK", "Junior")
    FEEDBACK_MONTHS_LOOKBACK = int(os.environ.get("FEEDBACK_MONTHS_LOOKBACK", "6"))

    OUTPUT_DIR = os.environ.get("OUTPUT_DIR", "output")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
