"""Record operations over a JSON document of named collections.

Every operation loads the document fresh from its :class:`DocumentStore`, and every
mutating operation saves the whole document back. Nothing is cached between calls.

There is no locking. Two inserts that run concurrently can both compute
the same next id, and two writers can overwrite each other's save.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..exceptions import DocumentParseError, NotFoundError
from ..utils.ids import Number, normalize_number, parse_id, record_id
from .json_store import Document, DocumentStore, loads_strict

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


def parse_record(body: str | bytes) -> Record:
    """Parse a request body into a record, rejecting anything but a JSON object."""
    try:
        record = loads_strict(body)
    except ValueError as e:
        raise DocumentParseError(f"invalid JSON body: {e}") from e
    if not isinstance(record, dict):
        raise DocumentParseError("record body must be a JSON object")
    return record


def _collection(doc: Document, name: str) -> Optional[List[Any]]:
    """The named collection, or None if it is absent. Non-array members are not found."""
    if name not in doc:
        return None
    records = doc[name]
    if not isinstance(records, list):
        raise NotFoundError(f"{name!r} is not a collection")
    return records


def _locate(records: Optional[List[Any]], rid: Number) -> Optional[int]:
    for index, record in enumerate(records or []):
        if record_id(record) == rid:
            return index
    return None


def _next_id(records: Optional[List[Any]]) -> Number:
    return normalize_number(max((record_id(r) for r in records or []), default=0) + 1)


def _with_id(record: Record, rid: Number) -> Record:
    body = dict(record)
    body.pop("id", None)
    return {"id": rid, **body}


class RecordStore:
    def __init__(self, store: DocumentStore):
        self.store = store

    def document(self) -> Document:
        return self.store.load()

    def list_collection(self, name: str) -> List[Record]:
        records = _collection(self.store.load(), name)
        if records is None:
            raise NotFoundError(f"no collection {name!r}")
        return records

    def find_by_id(self, name: str, id_: str) -> Record:
        rid = parse_id(id_)
        records = _collection(self.store.load(), name)
        index = _locate(records, rid)
        if index is None:
            raise NotFoundError(f"no record found for id {rid} in {name!r}")
        return records[index]

    def next_id(self, name: str) -> Number:
        return _next_id(_collection(self.store.load(), name))

    def insert(self, name: str, body: str | bytes) -> Record:
        record = parse_record(body)
        doc = self.store.load()
        records = _collection(doc, name)
        record = _with_id(record, _next_id(records))
        if records is None:
            records = doc[name] = []
        records.append(record)
        self.store.save(doc)
        logger.debug("Inserted %s/%s", name, record["id"])
        return record

    def replace_by_id(self, name: str, id_: str, body: str | bytes) -> Record:
        """Replace the record wholesale; fields absent from ``body`` are dropped."""
        rid = parse_id(id_)
        record = _with_id(parse_record(body), rid)
        doc = self.store.load()
        records = _collection(doc, name)
        index = _locate(records, rid)
        if index is None:
            raise NotFoundError(f"no record found for id {rid} in {name!r}")
        records[index] = record
        self.store.save(doc)
        logger.debug("Replaced %s/%s", name, rid)
        return record

    def delete_by_id(self, name: str, id_: str) -> Record:
        rid = parse_id(id_)
        doc = self.store.load()
        records = _collection(doc, name)
        index = _locate(records, rid)
        if index is None:
            raise NotFoundError(f"no record found for id {rid} in {name!r}")
        removed = records.pop(index)
        self.store.save(doc)
        logger.debug("Deleted %s/%s", name, rid)
        return removed
