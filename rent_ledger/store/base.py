"""Record-storage contract the ledger consumes."""

from typing import Any, Protocol

Row = dict[str, Any]


class PropertyStore(Protocol):
    """Durable storage for property rows.

    Rows use the flattened column names in ``rent_ledger.store.mapping``.
    Every method raises ``StoreError`` when the backend fails.
    """

    def list_all(self) -> list[Row]:
        """Return every stored row."""
        ...

    def insert(self, row: Row) -> Row:
        """Store a row without an id and return it with its generated id."""
        ...

    def update(self, property_id: str, partial_row: Row) -> Row | None:
        """Overwrite the given columns; return the full row, or None if no row matched."""
        ...

    def delete(self, property_id: str) -> None:
        """Remove a row; removing a missing id is not an error."""
        ...
