from pathlib import Path
import json
import logging
from typing import Any, Dict, Protocol

from ..exceptions import DocumentParseError, StorageIOError

logger = logging.getLogger(__name__)

Document = Dict[str, Any]


class DocumentStore(Protocol):
    """A whole JSON document that is loaded and saved in one piece."""

    def load(self) -> Document: ...

    def save(self, doc: Document) -> None: ...


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def loads_strict(text):
    """json.loads without the NaN, Infinity and -Infinity extensions."""
    return json.loads(text, parse_constant=_reject_constant)


def parse_document(text: str) -> Document:
    try:
        doc = loads_strict(text)
    except ValueError as e:
        raise DocumentParseError(f"invalid JSON document: {e}") from e
    if not isinstance(doc, dict):
        raise DocumentParseError("document root must be a JSON object")
    return doc


class JsonStore:
    """Single JSON document on disk, re-read on every load and rewritten in full on save."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Document:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            raise StorageIOError(f"cannot read {self.path}: {e}") from e
        logger.debug("Loaded %d bytes from %s", len(text), self.path)
        return parse_document(text)

    def save(self, doc: Document):
        # Truncating write, a crash mid-write leaves a partial file.
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(doc, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise StorageIOError(f"cannot write {self.path}: {e}") from e
        logger.debug("Saved document to %s", self.path)
