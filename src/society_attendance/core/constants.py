"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

WEEK_LENGTH_DAYS = 7
PERCENT_QUANTUM = "0.01"

DEFAULT_SOCIETY_ID = "IDC"
DEFAULT_TIMEZONE = "Asia/Jerusalem"
DEFAULT_DISPLAY_NAME_FIELD = "full_name_heb"
DEFAULT_ENGLISH_NAME_FIELD = "full_name_eng"
DEFAULT_NOVICE_RANK = "Junior"
DEFAULT_FEEDBACK_MONTHS_LOOKBACK = 6
FEEDBACK_BATCH_SIZE = 10

DATE_FORMAT = "%d/%m/%Y"
TIME_FORMAT = "%H:%M:%S"

# Document store layout
EVENTS_COLLECTION = "Events"
EVENT_DATA_COLLECTION = "EventData"
ASSIGNMENTS_DOCUMENT = "Assignments"
REGISTRATIONS_DOCUMENT = "Registrations"
PARTICIPANTS_COLLECTION = "Debaters"
FEEDBACKS_COLLECTION = "Feedbacks"

# Output files
EVENTS_CACHE_FILE = "events.json"
PARTICIPANTS_CACHE_FILE = "debaters.json"
WEEKLY_TSV_FILE = "dates.tsv"
PARTICIPATION_TSV_FILE = "namesToPercent.tsv"
ATTENDANCE_XLSX_FILE = "attendance.xlsx"
ROUNDS_JSON_FILE = "rounds.json"
ROUNDS_XLSX_FILE = "rounds.xlsx"
FEEDBACK_JSON_FILE = "novice_feedback.json"

NO_SESSION_TEXT = "לא היו אימונים בשבוע זה"
