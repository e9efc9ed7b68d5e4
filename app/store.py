# app/store.py
from __future__ import annotations
import logging
import threading
from typing import Callable, Optional

from fastapi import Request
from google.cloud import firestore

from app.settings import get_settings

log = logging.getLogger("uvicorn")

INDOOR_COLLECTION = "Indoor_Climbs"
OUTDOOR_COLLECTION = "Outdoor_Climbs"
FINGERBOARD_COLLECTION = "Fingerboard_Sessions"
COMPETITION_COLLECTION = "Competition_Sessions"
GYM_COLLECTION = "Gym_Sessions"


class StoreUnavailable(RuntimeError):
    """The Firestore client could not be created."""


class ClientOnce:
    """
    Runs `factory` at most once per process.

    Concurrent first callers block on the lock and all observe the single
    attempt: the same client, or the same StoreUnavailable. A failure is
    cached and replayed, never retried.
    """
    def __init__(self, factory: Callable[[str], firestore.Client]):
        self._factory = factory
        self._lock = threading.Lock()
        self._done = False
        self._client: Optional[firestore.Client] = None
        self._error: Optional[StoreUnavailable] = None

    def get(self, project_id: str) -> firestore.Client:
        if not self._done:
            with self._lock:
                if not self._done:
                    try:
                        self._client = self._factory(project_id)
                    except Exception as e:
                        log.exception("firestore client init failed project=%s", project_id)
                        err = StoreUnavailable(str(e))
                        err.__cause__ = e
                        self._error = err
                    self._done = True
        if self._error is not None:
            raise self._error
        return self._client


def _connect(project_id: str) -> firestore.Client:
    settings = get_settings()
    return firestore.Client(project=project_id or None, database=settings.FIRESTORE_DATABASE)


_client_once = ClientOnce(_connect)


def get_client(project_id: str) -> firestore.Client:
    return _client_once.get(project_id)


def get_collection(client: firestore.Client, name: str) -> firestore.CollectionReference:
    return client.collection(name)


# Dependency for FastAPI routes; the client is attached by the gate middleware
def get_db(request: Request) -> firestore.Client:
    return request.state.firestore
