"""Domain models for the rental ledger."""

from rent_ledger.models.enums import PaymentFilter
from rent_ledger.models.property import (
    UNSET,
    Payment,
    Property,
    PropertyInput,
    PropertyPatch,
    Receipt,
    ReceiptLine,
    SuggestedAmount,
)

__all__ = [
    "UNSET",
    "Payment",
    "PaymentFilter",
    "Property",
    "PropertyInput",
    "PropertyPatch",
    "Receipt",
    "ReceiptLine",
    "SuggestedAmount",
]
