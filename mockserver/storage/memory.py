"""In-memory document store."""

from __future__ import annotations

import copy
from typing import Any, Dict, Optional


class MemoryStore:
    """In-memory store with the same load/save contract as JsonStore. Good for tests."""

    def __init__(self, doc: Optional[Dict[str, Any]] = None) -> None:
        self._doc: Dict[str, Any] = copy.deepcopy(doc) if doc is not None else {}
        self.saves = 0

    def load(self) -> Dict[str, Any]:
        return copy.deepcopy(self._doc)

    def save(self, doc: Dict[str, Any]) -> None:
        self._doc = copy.deepcopy(doc)
        self.saves += 1
