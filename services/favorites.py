"""
Saved properties kept in a string key-value store.

The store mirrors browser localStorage: one key holding a JSON list of
records, newest last, capped at the ten most recent saves.

The API itself is stateless and never calls this; it is the serialization
adapter for whatever external key-value store keeps a user's favorites
(the form page at "/" does the same thing in JavaScript against
localStorage, with the same record layout).
"""

import json
import logging
import time
from typing import List, MutableMapping, Optional

from models import ApartmentData, SavedProperty

logger = logging.getLogger(__name__)

STORAGE_KEY = "savedProperties"
MAX_SAVED = 10


class SavedPropertyStore:
    def __init__(self, backend: MutableMapping[str, str], key: str = STORAGE_KEY, limit: int = MAX_SAVED):
        self.backend = backend
        self.key = key
        self.limit = limit

    def load(self) -> List[dict]:
        raw = self.backend.get(self.key)
        if not raw:
            return []
        return json.loads(raw)

    def _write(self, records: List[dict]):
        self.backend[self.key] = json.dumps(records, ensure_ascii=False)

    def save(self, listing: ApartmentData, analysis: dict, now_ms: Optional[int] = None) -> dict:
        """Append a listing with its analysis and drop the oldest beyond the limit."""
        now_ms = now_ms if now_ms is not None else int(time.time() * 1000)

        record = SavedProperty(
            **listing.model_dump(),
            id=str(now_ms),
            analysis=analysis,
            timestamp=now_ms,
        ).to_wire()

        records = (self.load() + [record])[-self.limit:]
        self._write(records)
        logger.info(f"Saved property {record['id']} ({len(records)}/{self.limit})")
        return record

    def delete(self, property_id: str) -> bool:
        records = self.load()
        remaining = [r for r in records if r.get("id") != property_id]
        self._write(remaining)
        return len(remaining) != len(records)
