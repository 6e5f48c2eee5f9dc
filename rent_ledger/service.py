"""Portfolio service: the single writable handle to the property collection."""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from datetime import date
from typing import Any, Callable, Iterator

from rent_ledger.exceptions import StoreError
from rent_ledger.ledger import engine
from rent_ledger.models import PaymentFilter, Property, PropertyInput, PropertyPatch
from rent_ledger.portfolio.aggregator import PortfolioSummary, filter_properties, summarize
from rent_ledger.store.base import PropertyStore
from rent_ledger.store.mapping import changes_to_row, property_to_row, row_to_property

logger = logging.getLogger(__name__)


class PortfolioService:
    """Apply ledger operations through a property store.

    Every mutation is written to the store first; the in-memory collection
    only changes once the store has returned the persisted row. When the
    store fails, the error is logged and re-raised and the collection keeps
    its last known-good state.

    Unknown ids are silent no-ops: the methods return ``None``.

    Parameters
    ----------
    store : PropertyStore
        Backend that owns the durable rows.
    today : Callable[[], date] | None
        Clock used to date payments (defaults to ``date.today``).
    """

    def __init__(
        self,
        store: PropertyStore,
        today: Callable[[], date] | None = None,
    ) -> None:
        self.store = store
        self._today = today or date.today
        self._properties: list[Property] = []
        # One lock per id currently in the collection
        self._locks: dict[str, threading.Lock] = {}
        # Guards the lock map and list replacement across different ids
        self._guard = threading.Lock()

    @property
    def properties(self) -> tuple[Property, ...]:
        """Read-only snapshot of the collection."""
        return tuple(self._properties)

    def load(self) -> list[Property]:
        """Replace the collection with the store's current rows."""
        rows = self._call_store("load properties", self.store.list_all)
        loaded = [row_to_property(row) for row in rows]
        with self._guard:
            self._properties = loaded
            ids = {prop.id for prop in loaded}
            self._locks = {pid: lock for pid, lock in self._locks.items() if pid in ids}
        logger.info("Loaded %d properties", len(self._properties))
        return list(self._properties)

    def get(self, property_id: str) -> Property | None:
        """Return a property by id, or None."""
        for prop in self._properties:
            if prop.id == property_id:
                return prop
        return None

    def add_property(self, data: PropertyInput) -> Property:
        """Validate and persist a new property.

        Raises
        ------
        ValidationError
            If the input is rejected; the store is not called.
        StoreError
            If the store fails; the collection is unchanged.
        """
        draft = engine.create(data)
        row = self._call_store("add property", self.store.insert, property_to_row(draft))
        created = row_to_property(row)
        with self._guard:
            self._properties.append(created)
        logger.info("Added property %s (%s %s)", created.id, created.apartment_name, created.house_number)
        return created

    def update_property(self, property_id: str, patch: PropertyPatch) -> Property | None:
        """Overwrite the fields set in ``patch``."""
        with self._locked(property_id) as current:
            if current is None:
                return None
            changes = engine.coerce_patch(patch)
            if not changes:
                return current
            return self._persist(property_id, changes, "update property")

    def record_payment(self, property_id: str, amount: Any) -> Property | None:
        """Record a payment against a property's debt.

        Raises
        ------
        ValidationError
            If the amount is not a finite positive number.
        StoreError
            If the store fails; the collection is unchanged.
        """
        with self._locked(property_id) as current:
            if current is None:
                return None
            updated = engine.record_payment(current, amount, today=self._today())
            changes = {
                "debt": updated.debt,
                "is_paid": updated.is_paid,
                "payment_history": updated.payment_history,
            }
            return self._persist(property_id, changes, "record payment")

    def toggle_paid(self, property_id: str) -> Property | None:
        """Flip the paid flag of a property; debt and history are untouched."""
        with self._locked(property_id) as current:
            if current is None:
                return None
            updated = engine.toggle_paid(current)
            return self._persist(property_id, {"is_paid": updated.is_paid}, "toggle paid flag")

    def delete_property(self, property_id: str) -> None:
        """Delete a property permanently; unknown ids are ignored."""
        with self._locked(property_id) as current:
            if current is None:
                return
            self._call_store("delete property", self.store.delete, property_id)
            with self._guard:
                self._properties = [p for p in self._properties if p.id != property_id]
                self._locks.pop(property_id, None)
        logger.info("Deleted property %s", property_id, extra={"property_id": property_id})

    def filter(
        self,
        query: str = "",
        payment_filter: PaymentFilter | str = PaymentFilter.ALL,
    ) -> list[Property]:
        """Search the collection by name, unit or tenant and paid status."""
        return filter_properties(self._properties, query, payment_filter)

    def summary(self) -> PortfolioSummary:
        """Dashboard statistics for the whole collection."""
        return summarize(self._properties)

    def _persist(self, property_id: str, changes: dict[str, Any], action: str) -> Property | None:
        row = self._call_store(action, self.store.update, property_id, changes_to_row(changes))
        if row is None:
            # Store no longer has it; keep the local view untouched.
            logger.warning("Cannot %s: %s not found in store", action, property_id)
            return None
        updated = row_to_property(row)
        with self._guard:
            self._properties = [updated if p.id == property_id else p for p in self._properties]
        logger.info(
            "%s: %s", action.capitalize(), property_id,
            extra={"property_id": property_id, "action": action},
        )
        return updated

    def _call_store(self, action: str, func: Callable[..., Any], *args: Any) -> Any:
        try:
            return func(*args)
        except StoreError:
            logger.error("Failed to %s", action, exc_info=True)
            raise

    @contextmanager
    def _locked(self, property_id: str) -> Iterator[Property | None]:
        """Hold the id's lock and yield its current record, or None if unknown."""
        with self._guard:
            lock = None
            if self.get(property_id) is not None:
                lock = self._locks.setdefault(property_id, threading.Lock())
        if lock is None:
            yield None
            return
        with lock:
            yield self.get(property_id)

