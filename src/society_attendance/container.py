from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from pathlib import Path
from types import ModuleType
from typing import Optional

from .attendance.factory import RegistrationPolicyFactory
from .attendance.model import DateRange
from .attendance.service import AttendanceReportService
from .common.datetime_utils import get_timezone, parse_iso_date, start_of_day
from .common.validators import require_non_empty
from .core.constants import (
    DEFAULT_DISPLAY_NAME_FIELD,
    DEFAULT_FEEDBACK_MONTHS_LOOKBACK,
    DEFAULT_NOVICE_RANK,
    DEFAULT_SOCIETY_ID,
    DEFAULT_TIMEZONE,
)
from .core.enums import CancellationMode
from .core.exceptions import ValidationError
from .database.connection import FirestoreConfig, FirestoreConnection
from .feedback.firestore_feedback_repository import FirestoreFeedbackRepository
from .feedback.service import FeedbackReportService
from .records.firestore_record_source import FirestoreRecordSource
from .records.json_cache import JsonRecordCache
from .records.loader import RecordLoader
from .reports.service import ReportExportService
from .rounds.service import RoundsReportService


@dataclass(frozen=True)
class Settings:
    firebase: FirestoreConfig
    output_dir: Path
    report_start: str
    report_end: str
    society_id: str
    timezone: str
    display_name_field: str
    cancellation_mode: CancellationMode
    strict_records: bool
    novice_rank: str
    feedback_months_lookback: int
    log_level: str = "INFO"

    @classmethod
    def from_module(cls, settings: ModuleType) -> "Settings":
        try:
            mode = CancellationMode(getattr(settings, "CANCELLATION_MODE", CancellationMode.STRICT.value))
        except ValueError as exc:
            raise ValidationError(f"Unknown CANCELLATION_MODE {settings.CANCELLATION_MODE!r}") from exc

        return cls(
            firebase=FirestoreConfig(
                credentials_file=str(settings.FIREBASE_CREDENTIALS_FILE),
                project_id=getattr(settings, "FIREBASE_PROJECT_ID", None),
            ),
            output_dir=Path(getattr(settings, "OUTPUT_DIR", "output")),
            report_start=str(settings.REPORT_START),
            report_end=str(settings.REPORT_END),
            society_id=require_non_empty(getattr(settings, "SOCIETY_ID", DEFAULT_SOCIETY_ID), "SOCIETY_ID"),
            timezone=str(getattr(settings, "REPORT_TIMEZONE", DEFAULT_TIMEZONE)),
            display_name_field=str(getattr(settings, "DISPLAY_NAME_FIELD", DEFAULT_DISPLAY_NAME_FIELD)),
            cancellation_mode=mode,
            strict_records=bool(getattr(settings, "STRICT_RECORDS", True)),
            novice_rank=str(getattr(settings, "NOVICE_RANK", DEFAULT_NOVICE_RANK)),
            feedback_months_lookback=int(getattr(settings, "FEEDBACK_MONTHS_LOOKBACK", DEFAULT_FEEDBACK_MONTHS_LOOKBACK)),
            log_level=str(getattr(settings, "LOG_LEVEL", "INFO")),
        )

    @property
    def tz(self) -> tzinfo:
        return get_timezone(self.timezone)

    def date_range(self, *, start: Optional[str] = None, end: Optional[str] = None) -> DateRange:
        """Local midnight of `start` up to local midnight of `end` (both YYYY-MM-DD)."""
        tz = self.tz
        return DateRange(
            start=start_of_day(parse_iso_date(start or self.report_start), tz),
            end=start_of_day(parse_iso_date(end or self.report_end), tz),
        )


@dataclass(frozen=True)
class Container:
    settings: Settings
    conn: FirestoreConnection

    record_loader: RecordLoader
    attendance_service: AttendanceReportService
    rounds_service: RoundsReportService
    feedback_service: FeedbackReportService
    export_service: ReportExportService


def build_container(settings: Settings) -> Container:
    conn = FirestoreConnection.get_instance(settings.firebase)
    tz = settings.tz
    policy_factory = RegistrationPolicyFactory()

    record_loader = RecordLoader(
        FirestoreRecordSource(conn),
        JsonRecordCache(settings.output_dir),
        name_field=settings.display_name_field,
    )
    attendance_service = AttendanceReportService(
        policy_factory=policy_factory,
        cancellation_mode=settings.cancellation_mode,
        strict_records=settings.strict_records,
        tz=tz,
    )
    rounds_service = RoundsReportService(
        policy_factory=policy_factory,
        cancellation_mode=settings.cancellation_mode,
        strict_records=settings.strict_records,
        tz=tz,
    )
    feedback_service = FeedbackReportService(
        FirestoreFeedbackRepository(conn),
        novice_rank=settings.novice_rank,
        months_lookback=settings.feedback_months_lookback,
    )
    export_service = ReportExportService(settings.output_dir)

    return Container(
        settings=settings,
        conn=conn,
        record_loader=record_loader,
        attendance_service=attendance_service,
        rounds_service=rounds_service,
        feedback_service=feedback_service,
        export_service=export_service,
    )
