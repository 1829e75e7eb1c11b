from __future__ import annotations

import logging
from typing import Sequence

from ..core.constants import (
    ASSIGNMENTS_DOCUMENT,
    EVENT_DATA_COLLECTION,
    EVENTS_COLLECTION,
    PARTICIPANTS_COLLECTION,
    REGISTRATIONS_DOCUMENT,
)
from ..database.connection import FirestoreConnection
from ..database.firestore_base import documents_with_ids, snapshot_to_dict, store_client
from .repository import RecordSource

logger = logging.getLogger(__name__)


class FirestoreRecordSource(RecordSource):
    def __init__(self, conn_factory: FirestoreConnection):
        self._conn_factory = conn_factory

    def fetch_event_documents(self) -> Sequence[dict]:
        with store_client(self._conn_factory, what="events") as db:
            docs = documents_with_ids(db.collection(EVENTS_COLLECTION).stream())
            for doc in docs:
                event_data = db.collection(EVENTS_COLLECTION).document(doc["id"]).collection(EVENT_DATA_COLLECTION)
                doc["assignments"] = snapshot_to_dict(event_data.document(ASSIGNMENTS_DOCUMENT).get()) or {}
                doc["registrations"] = snapshot_to_dict(event_data.document(REGISTRATIONS_DOCUMENT).get()) or {}
        logger.info("Fetched %d events", len(docs))
        return docs

    def fetch_participant_documents(self) -> Sequence[dict]:
        with store_client(self._conn_factory, what="participants") as db:
            docs = documents_with_ids(db.collection(PARTICIPANTS_COLLECTION).stream())
        logger.info("Fetched %d participants", len(docs))
        return docs
