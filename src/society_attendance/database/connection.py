from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import firebase_admin
from firebase_admin import credentials, firestore
from google.auth import exceptions as google_auth_exceptions

from ..core.exceptions import RecordSourceError


@dataclass
class FirestoreConfig:
    credentials_file: str
    project_id: Optional[str] = None


class FirestoreConnection:
    """Singleton-like Firestore client factory.

    Note: The firebase app is initialized lazily on first use, so building the
    container never touches the network or the credentials file.
    """

    _instance: Optional["FirestoreConnection"] = None

    def __init__(self, config: FirestoreConfig):
        self._config = config
        self._client: Any = None

    @classmethod
    def get_instance(cls, config: FirestoreConfig) -> "FirestoreConnection":
        if cls._instance is None:
            cls._instance = FirestoreConnection(config)
        return cls._instance

    def client(self):
        if self._client is None:
            try:
                if not firebase_admin._apps:
                    cred = credentials.Certificate(self._config.credentials_file)
                    options = {"projectId": self._config.project_id} if self._config.project_id else None
                    firebase_admin.initialize_app(cred, options)
                self._client = firestore.client()
            except (OSError, ValueError, google_auth_exceptions.GoogleAuthError) as exc:
                raise RecordSourceError(
                    f"Cannot connect to the document store with {self._config.credentials_file!r}: {exc}"
                ) from exc
        return self._client
