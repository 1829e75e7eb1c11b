from .config import Config

FIREBASE_CREDENTIALS_FILE = Config.FIREBASE_CREDENTIALS_FILE
FIREBASE_PROJECT_ID = Config.FIREBASE_PROJECT_ID

REPORT_START = Config.REPORT_START
REPORT_END = Config.REPORT_END
SOCIETY_ID = Config.SOCIETY_ID
REPORT_TIMEZONE = Config.REPORT_TIMEZONE
DISPLAY_NAME_FIELD = Config.DISPLAY_NAME_FIELD

CANCELLATION_MODE = Config.CANCELLATION_MODE
STRICT_RECORDS = Config.STRICT_RECORDS

NOVICE_RANK = Config.NOVICE_RANK
FEEDBACK_MONTHS_LOOKBACK = Config.FEEDBACK_MONTHS_LOOKBACK

OUTPUT_DIR = Config.OUTPUT_DIR
LOG_LEVEL = "DEBUG"
