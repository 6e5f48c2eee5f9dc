"""JSON file property store."""

import json
import logging
import os
import tempfile
import uuid
from pathlib import Path

from rent_ledger.exceptions import StoreError
from rent_ledger.store.base import Row

logger = logging.getLogger(__name__)


class JsonFilePropertyStore:
    """Keep every property row in a single JSON array on disk.

    The whole file is rewritten on each mutation through a temporary file
    and an atomic rename, so a failed write leaves the previous contents.
    """

    def __init__(self, path: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file store.

        Parameters
        ----------
        path : str | Path
            File holding the rows; created on first write.
        pretty : bool
            Pretty-print JSON output.
        """
        self.path = Path(path)
        self.pretty = pretty

    def list_all(self) -> list[Row]:
        return self._read()

    def insert(self, row: Row) -> Row:
        rows = self._read()
        stored = dict(row)
        stored["id"] = stored.get("id") or uuid.uuid4().hex
        rows.append(stored)
        self._write(rows)
        return stored

    def update(self, property_id: str, partial_row: Row) -> Row | None:
        rows = self._read()
        for stored in rows:
            if stored.get("id") == property_id:
                stored.update({k: v for k, v in partial_row.items() if k != "id"})
                self._write(rows)
                return stored
        return None

    def delete(self, property_id: str) -> None:
        rows = self._read()
        remaining = [row for row in rows if row.get("id") != property_id]
        if len(remaining) != len(rows):
            self._write(remaining)

    def _read(self) -> list[Row]:
        if not self.path.exists():
            return []
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            # ValueError covers JSONDecodeError and UnicodeDecodeError
            raise StoreError(f"Cannot read {self.path}: {exc}") from exc
        if not isinstance(data, list):
            raise StoreError(f"{self.path} does not contain a JSON array")
        for index, row in enumerate(data):
            if not isinstance(row, dict):
                raise StoreError(f"{self.path}: row {index} is not a JSON object")
        return data

    def _write(self, rows: list[Row]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        except OSError as exc:
            raise StoreError(f"Cannot write {self.path}: {exc}") from exc
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(rows, f, indent=2, ensure_ascii=False, default=str)
                else:
                    json.dump(rows, f, ensure_ascii=False, default=str)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            os.unlink(tmp_name)
            raise StoreError(f"Cannot write {self.path}: {exc}") from exc
        logger.debug("Wrote %d rows to %s", len(rows), self.path)
