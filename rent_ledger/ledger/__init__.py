"""Ledger rules for individual properties."""

from rent_ledger.ledger.engine import (
    create,
    parse_amount,
    parse_bool,
    parse_or_zero,
    record_payment,
    toggle_paid,
    update,
)
from rent_ledger.ledger.history import (
    build_receipt,
    preview_remaining_debt,
    sorted_history,
    suggested_amounts,
    total_paid,
)

__all__ = [
    "build_receipt",
    "create",
    "parse_amount",
    "parse_bool",
    "parse_or_zero",
    "preview_remaining_debt",
    "record_payment",
    "sorted_history",
    "suggested_amounts",
    "toggle_paid",
    "total_paid",
    "update",
]
