from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Sequence

from ..core.constants import EVENTS_CACHE_FILE, PARTICIPANTS_CACHE_FILE
from ..core.exceptions import RecordSourceError
from ..database.firestore_base import to_plain

logger = logging.getLogger(__name__)


class JsonRecordCache:
    """Local JSON copy of the store, kept in the output directory."""

    def __init__(self, directory: Path):
        self._directory = Path(directory)

    @property
    def events_path(self) -> Path:
        return self._directory / EVENTS_CACHE_FILE

    @property
    def participants_path(self) -> Path:
        return self._directory / PARTICIPANTS_CACHE_FILE

    def has_events(self) -> bool:
        return self.events_path.exists()

    def has_participants(self) -> bool:
        return self.participants_path.exists()

    def load_events(self) -> list[dict]:
        return self._read(self.events_path)

    def load_participants(self) -> list[dict]:
        return self._read(self.participants_path)

    def save_events(self, docs: Sequence[dict]) -> None:
        self._write(self.events_path, docs)

    def save_participants(self, docs: Sequence[dict]) -> None:
        self._write(self.participants_path, docs)

    def _read(self, path: Path) -> list[dict]:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise RecordSourceError(f"Error loading JSON file {path}: {exc}") from exc
        if not isinstance(data, list):
            raise RecordSourceError(f"Expected a list of documents in {path}")
        return data

    def _write(self, path: Path, docs: Sequence[dict]) -> None:
        self._directory.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump(to_plain(list(docs)), f, ensure_ascii=False)
        logger.debug("Wrote %d documents to %s", len(docs), path)
