from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional

from google.api_core import exceptions as google_exceptions

from ..common.datetime_utils import to_timestamp_map
from ..core.exceptions import RecordSourceError
from .connection import FirestoreConnection


@contextmanager
def store_client(conn_factory: FirestoreConnection, *, what: str) -> Iterator[Any]:
    """Yield a Firestore client; store failures surface as RecordSourceError."""
    try:
        yield conn_factory.client()
    except google_exceptions.GoogleAPIError as exc:
        raise RecordSourceError(f"Failed to read {what} from the document store: {exc}") from exc


def snapshot_to_dict(snapshot) -> Optional[Dict[str, Any]]:
    if not snapshot.exists:
        return None
    return snapshot.to_dict() or {}


def documents_with_ids(snapshots) -> List[Dict[str, Any]]:
    return [{"id": snap.id, **(snap.to_dict() or {})} for snap in snapshots]


def to_plain(value: Any) -> Any:
    """Recursively convert store values into JSON-friendly data.

    Timestamps come back from the client as datetime subclasses; they are
    written in the exported ``{"_seconds", "_nanoseconds"}`` shape.
    """

    if isinstance(value, datetime):
        return to_timestamp_map(value)
    if isinstance(value, dict):
        return {str(k): to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    return value
