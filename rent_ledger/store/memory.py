"""In-memory property store."""

import copy
import logging
import uuid

from rent_ledger.store.base import Row

logger = logging.getLogger(__name__)


class InMemoryPropertyStore:
    """Property store backed by a dict, preserving insertion order."""

    def __init__(self, rows: list[Row] | None = None) -> None:
        self._rows: dict[str, Row] = {}
        for row in rows or []:
            self.insert(row)

    def list_all(self) -> list[Row]:
        return [copy.deepcopy(row) for row in self._rows.values()]

    def insert(self, row: Row) -> Row:
        stored = copy.deepcopy(row)
        stored["id"] = stored.get("id") or uuid.uuid4().hex
        self._rows[stored["id"]] = stored
        logger.debug("Inserted row %s", stored["id"])
        return copy.deepcopy(stored)

    def update(self, property_id: str, partial_row: Row) -> Row | None:
        stored = self._rows.get(property_id)
        if stored is None:
            return None
        changes = {k: v for k, v in partial_row.items() if k != "id"}
        stored.update(copy.deepcopy(changes))
        return copy.deepcopy(stored)

    def delete(self, property_id: str) -> None:
        self._rows.pop(property_id, None)

    def __len__(self) -> int:
        return len(self._rows)
