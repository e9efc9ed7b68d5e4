# app/repositories/base.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import ClassVar, Generic, Optional, TypeVar

from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter
from pydantic import BaseModel, ValidationError

from app.store import get_collection

log = logging.getLogger("uvicorn")

RecordT = TypeVar("RecordT", bound=BaseModel)  # stored record + id/timestamps
InputT = TypeVar("InputT", bound=BaseModel)    # create/update body


class RecordDecodeError(Exception):
    """A stored document does not match the record schema."""


@dataclass(slots=True, frozen=True)
class DateRange:
    """Query descriptor for list endpoints: inclusive, string-compared bounds."""
    start: Optional[str] = None
    end: Optional[str] = None
    order_key: str = "date"
    direction: str = firestore.Query.DESCENDING

    def apply(self, col: firestore.CollectionReference):
        query = col.order_by(self.order_key, direction=self.direction)
        if self.start:
            query = query.where(filter=FieldFilter(self.order_key, ">=", self.start))
        if self.end:
            query = query.where(filter=FieldFilter(self.order_key, "<=", self.end))
        return query


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DocumentRepository(Generic[RecordT, InputT]):
    """CRUD over one Firestore collection, typed by a record and an input model."""
    collection_name: ClassVar[str]
    record_model: ClassVar[type[BaseModel]]
    input_model: ClassVar[type[BaseModel]]

    def __init__(self, db: firestore.Client):
        self.db = db
        self.col = get_collection(db, self.collection_name)

    def decode(self, snap) -> RecordT:
        try:
            return self.record_model.model_validate({**(snap.to_dict() or {}), "id": snap.id})
        except ValidationError as e:
            raise RecordDecodeError(f"{self.collection_name}/{snap.id}") from e

    # READS
    def list(self, date_range: DateRange | None = None) -> list[RecordT]:
        date_range = date_range or DateRange()
        items: list[RecordT] = []
        for snap in date_range.apply(self.col).stream():
            try:
                items.append(self.decode(snap))
            except RecordDecodeError:
                log.warning("skipping undecodable document %s/%s", self.collection_name, snap.id)
        return items

    def get(self, doc_id: str) -> Optional[RecordT]:
        snap = self.col.document(doc_id).get()
        if not snap.exists:
            return None
        return self.decode(snap)

    def exists(self, doc_id: str) -> bool:
        return self.col.document(doc_id).get().exists

    # WRITES
    def create(self, payload: InputT) -> RecordT:
        now = utcnow()
        data = payload.model_dump(by_alias=True)
        data["createdAt"] = now
        data["updatedAt"] = now
        _, ref = self.col.add(data)
        return self.record_model.model_validate({**data, "id": ref.id})

    def update(self, doc_id: str, payload: InputT) -> Optional[RecordT]:
        """Overwrite every resource field; createdAt and the id stay untouched."""
        updates = payload.model_dump(by_alias=True)
        updates["updatedAt"] = utcnow()
        self.col.document(doc_id).update(updates)
        return self.get(doc_id)

    def delete(self, doc_id: str) -> None:
        self.col.document(doc_id).delete()
