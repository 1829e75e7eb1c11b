from __future__ import annotations

import logging

from ..core.constants import DEFAULT_DISPLAY_NAME_FIELD, DEFAULT_ENGLISH_NAME_FIELD
from .json_cache import JsonRecordCache
from .model import Event, Participant, RecordSet
from .repository import RecordSource

logger = logging.getLogger(__name__)


class RecordLoader:
    """Fetch raw documents into the local cache, then parse them from there.

    The remote source is only queried for files missing from the cache, unless
    a refresh is requested.
    """

    def __init__(
        self,
        source: RecordSource,
        cache: JsonRecordCache,
        *,
        name_field: str = DEFAULT_DISPLAY_NAME_FIELD,
        english_name_field: str = DEFAULT_ENGLISH_NAME_FIELD,
    ):
        self._source = source
        self._cache = cache
        self._name_field = name_field
        self._english_name_field = english_name_field

    def retrieve(self, *, refresh: bool = False) -> None:
        if refresh or not self._cache.has_events():
            logger.info("Retrieving events...")
            self._cache.save_events(self._source.fetch_event_documents())
        if refresh or not self._cache.has_participants():
            logger.info("Retrieving debaters...")
            self._cache.save_participants(self._source.fetch_participant_documents())
        logger.info("Data retrieval complete")

    def load(self, *, refresh: bool = False) -> RecordSet:
        self.retrieve(refresh=refresh)
        events = tuple(Event.from_document(doc) for doc in self._cache.load_events())
        participants = tuple(
            Participant.from_document(
                doc,
                name_field=self._name_field,
                english_name_field=self._english_name_field,
            )
            for doc in self._cache.load_participants()
        )
        logger.info("Loaded %d events and %d participants", len(events), len(participants))
        return RecordSet(events=events, participants=participants)
