"""Rental property models."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any

UNSET: Any = object()  # Marker for patch fields the caller did not supply


@dataclass(frozen=True)
class Payment:
    """A single recorded rent payment."""

    date: date
    amount: Decimal


@dataclass(frozen=True)
class Property:
    """Rental unit with its tenant, rent obligation and payment ledger."""

    id: str
    apartment_name: str
    house_number: str
    tenant_name: str
    phone_number: str
    rent_amount: Decimal
    debt: Decimal
    is_paid: bool  # Display flag, can be toggled independently of debt
    payment_history: tuple[Payment, ...] = ()


@dataclass
class PropertyInput:
    """Fields supplied by the caller when adding a property.

    Numeric fields accept raw form values (``str``, ``int``, ``float`` or
    ``Decimal``); they are validated strictly on creation.
    """

    apartment_name: str
    house_number: str
    tenant_name: str
    phone_number: str
    rent_amount: Any = Decimal("0")
    debt: Any = Decimal("0")
    is_paid: bool = False


@dataclass
class PropertyPatch:
    """Partial overwrite of a property; unset fields are left untouched."""

    apartment_name: Any = UNSET
    house_number: Any = UNSET
    tenant_name: Any = UNSET
    phone_number: Any = UNSET
    rent_amount: Any = UNSET
    debt: Any = UNSET
    is_paid: Any = UNSET

    def set_fields(self) -> dict[str, Any]:
        """Return only the fields the caller supplied."""
        return {
            name: value
            for name, value in vars(self).items()
            if value is not UNSET
        }


@dataclass(frozen=True)
class ReceiptLine:
    """A numbered payment on a receipt; the oldest payment is number 1."""

    number: int
    date: date
    amount: Decimal


@dataclass
class Receipt:
    """Receipt data for a property's payment history."""

    property_id: str
    tenant_name: str
    apartment_name: str
    house_number: str
    phone_number: str
    rent_amount: Decimal
    debt: Decimal
    total_paid: Decimal
    currency: str
    generated_on: date
    payment_count: int = 0
    payments: list[ReceiptLine] = field(default_factory=list)  # Newest first


@dataclass(frozen=True)
class SuggestedAmount:
    """Quick-pick amount offered when recording a payment."""

    label: str
    amount: Decimal
    disabled: bool = False
