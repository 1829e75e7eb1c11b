from __future__ import annotations

from typing import Optional

from ..core.constants import FEEDBACKS_COLLECTION
from ..database.connection import FirestoreConnection
from ..database.firestore_base import snapshot_to_dict, store_client
from .repository import FeedbackRepository


class FirestoreFeedbackRepository(FeedbackRepository):
    def __init__(self, conn_factory: FirestoreConnection):
        self._conn_factory = conn_factory

    def get_event_feedback(self, event_id: str) -> Optional[dict]:
        with store_client(self._conn_factory, what=f"feedback for event {event_id}") as db:
            return snapshot_to_dict(db.collection(FEEDBACKS_COLLECTION).document(event_id).get())
