"""Process-wide in-memory data store.

One map per collection plus one id counter per collection. Counters only
ever move forward, so an id is never handed out twice during the lifetime
of a store, even after the entity holding it is deleted.
"""

import itertools
import logging
from typing import Any

logger = logging.getLogger(__name__)

COLLECTIONS = (
    "users",
    "categories",
    "photos",
    "notes",
    "warranties",
    "maintenance_events",
)


class InMemoryStore:
    """Holds every collection for the in-memory adapter."""

    def __init__(self) -> None:
        self._tables: dict[str, dict[int, Any]] = {}
        self._counters: dict[str, itertools.count] = {}
        self.reset()

    def table(self, name: str) -> dict[int, Any]:
        """Return the live map for a collection (id → entity)."""
        try:
            return self._tables[name]
        except KeyError:
            raise ValueError(f"Unknown collection '{name}'") from None

    def next_id(self, name: str) -> int:
        self.table(name)
        return next(self._counters[name])

    def reset(self) -> None:
        """Drop every entity and restart all id counters at 1."""
        self._tables = {name: {} for name in COLLECTIONS}
        self._counters = {name: itertools.count(1) for name in COLLECTIONS}
        logger.debug("In-memory store reset")
