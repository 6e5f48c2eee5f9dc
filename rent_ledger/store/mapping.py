"""Two-way mapping between store rows and domain records.

Rows are JSON-ready: amounts are decimal strings and dates ISO strings.
Reading a row never lets ``None`` or a missing column through; each field
falls back to its zero value.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any

from rent_ledger.ledger.engine import parse_bool, parse_or_zero
from rent_ledger.models import Payment, Property
from rent_ledger.serialization import serialize_value
from rent_ledger.store.base import Row

logger = logging.getLogger(__name__)

TEXT_COLUMNS = ("apartment_name", "house_number", "tenant_name", "phone_number")
AMOUNT_COLUMNS = ("rent_amount", "debt")


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _parse_date(value: Any) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value:
        try:
            return date.fromisoformat(value[:10])
        except ValueError:
            return None
    return None


def row_to_payment(entry: Any) -> Payment | None:
    """Map a history entry, or return None if it has no usable date."""
    if not isinstance(entry, dict):
        return None
    paid_on = _parse_date(entry.get("date"))
    if paid_on is None:
        return None
    return Payment(date=paid_on, amount=parse_or_zero(entry.get("amount")))


def row_to_property(row: Row) -> Property:
    """Build a Property from a store row, defaulting missing fields."""
    history = []
    for entry in row.get("payment_history") or []:
        payment = row_to_payment(entry)
        if payment is None:
            logger.warning("Skipping malformed payment entry on %s: %r", row.get("id"), entry)
            continue
        history.append(payment)

    return Property(
        id=_text(row.get("id")),
        apartment_name=_text(row.get("apartment_name")),
        house_number=_text(row.get("house_number")),
        tenant_name=_text(row.get("tenant_name")),
        phone_number=_text(row.get("phone_number")),
        rent_amount=parse_or_zero(row.get("rent_amount")),
        debt=parse_or_zero(row.get("debt")),
        is_paid=parse_bool(row.get("is_paid")),
        payment_history=tuple(history),
    )


def payment_to_row(payment: Payment) -> Row:
    return {"date": payment.date.isoformat(), "amount": serialize_value(payment.amount)}


def property_to_row(prop: Property) -> Row:
    """Map a new property to an insertable row (no id column)."""
    row: Row = {name: getattr(prop, name) for name in TEXT_COLUMNS}
    row.update({name: serialize_value(getattr(prop, name)) for name in AMOUNT_COLUMNS})
    row["is_paid"] = prop.is_paid
    row["payment_history"] = [payment_to_row(p) for p in prop.payment_history]
    return row


def changes_to_row(changes: dict[str, Any]) -> Row:
    """Map coerced domain field changes to a partial row."""
    row: Row = {}
    for name, value in changes.items():
        if name == "payment_history":
            row[name] = [payment_to_row(p) for p in value]
        else:
            row[name] = serialize_value(value)
    return row
