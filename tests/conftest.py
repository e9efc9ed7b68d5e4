"""
In-memory stand-in for the Firestore client so tests run without a project.
Installed for every test in place of app.store.get_client.
"""
import copy
import os
import uuid
from datetime import datetime, timezone

os.environ["APP_SECRET_PASSWORD"] = "test-secret"
os.environ["GCP_PROJECT_ID"] = "test-project"

import pytest
from google.api_core.exceptions import ServiceUnavailable, NotFound

from app import store
from app.settings import get_settings

get_settings.cache_clear()

API_KEY = "test-secret"

_OPS = {
    "==": lambda a, b: a == b,
    ">=": lambda a, b: a >= b,
    "<=": lambda a, b: a <= b,
    ">": lambda a, b: a > b,
    "<": lambda a, b: a < b,
}


class FakeSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return copy.deepcopy(self._data)


class FakeDocRef:
    def __init__(self, col, doc_id):
        self.col = col
        self.id = doc_id

    def get(self):
        self.col.db.check("get")
        return FakeSnapshot(self.id, self.col.docs.get(self.id))

    def update(self, updates):
        self.col.db.check("update")
        if self.id not in self.col.docs:
            raise NotFound(f"No document to update: {self.id}")
        self.col.docs[self.id].update(copy.deepcopy(updates))

    def delete(self):
        self.col.db.check("delete")
        self.col.docs.pop(self.id, None)


class FakeQuery:
    def __init__(self, col, order=None, filters=()):
        self.col = col
        self.order = order
        self.filters = tuple(filters)

    def where(self, *, filter):
        return FakeQuery(self.col, self.order, self.filters + (filter,))

    def stream(self):
        self.col.db.check("stream")
        self.col.db.queries.append(self)
        field, direction = self.order
        rows = [(k, v) for k, v in self.col.docs.items() if field in v]
        for f in self.filters:
            rows = [(k, v) for k, v in rows if _OPS[f.op_string](v[f.field_path], f.value)]
        rows.sort(key=lambda kv: kv[1][field], reverse=direction == "DESCENDING")
        for k, v in rows:
            yield FakeSnapshot(k, copy.deepcopy(v))


class FakeCollection:
    def __init__(self, db, name):
        self.db = db
        self.name = name
        self.docs = {}

    def document(self, doc_id):
        return FakeDocRef(self, doc_id)

    def add(self, data):
        self.db.check("add")
        doc_id = uuid.uuid4().hex[:20]
        self.docs[doc_id] = copy.deepcopy(data)
        return datetime.now(timezone.utc), FakeDocRef(self, doc_id)

    def order_by(self, field, direction="ASCENDING"):
        return FakeQuery(self, (field, direction))


class FakeFirestore:
    def __init__(self):
        self.collections = {}
        self.failing = set()  # operation names that raise a store error
        self.error = None     # raised instead of ServiceUnavailable when set
        self.queries = []

    def collection(self, name):
        return self.collections.setdefault(name, FakeCollection(self, name))

    def check(self, op):
        if op in self.failing:
            raise self.error or ServiceUnavailable(f"{op} unavailable")


@pytest.fixture(autouse=True)
def fake_db(monkeypatch):
    db = FakeFirestore()
    monkeypatch.setattr(store, "get_client", lambda project_id: db)
    return db


@pytest.fixture
def clock(monkeypatch):
    """Deterministic, strictly increasing timestamps for repository writes."""
    from app.repositories import base
    ticks = iter(datetime(2024, 1, 1, 12, 0, s, tzinfo=timezone.utc) for s in range(60))
    monkeypatch.setattr(base, "utcnow", lambda: next(ticks))
