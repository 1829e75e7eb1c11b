class DomainError(Exception):
    """Base exception for reporting rule violations."""


class ValidationError(DomainError):
    """Raised when configuration or input parameters are invalid."""


class InvalidRecordError(DomainError):
    """Raised when a loaded record cannot be used (e.g. missing timestamp)."""

    def __init__(self, record_id: str, reason: str):
        super().__init__(f"Invalid record {record_id!r}: {reason}")
        self.record_id = record_id
        self.reason = reason


class RecordSourceError(DomainError):
    """Raised when records cannot be read from the store or the local cache."""
