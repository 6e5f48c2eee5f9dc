"""Next-state rules for a single property's ledger.

Every function here is pure: it takes a ``Property`` and returns a new one,
leaving the input untouched. Persistence is the caller's concern.

Two numeric parsing policies coexist and must not be mixed:

- ``parse_amount`` is strict and raises ``ValidationError``. It guards
  property creation and payments.
- ``parse_or_zero`` is lenient and turns anything unparseable into zero.
  It is only applied to edits.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

from rent_ledger.exceptions import ValidationError
from rent_ledger.models import Payment, Property, PropertyInput, PropertyPatch

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

REQUIRED_TEXT_FIELDS = ("apartment_name", "house_number", "tenant_name", "phone_number")
NUMERIC_FIELDS = ("rent_amount", "debt")
FALSE_STRINGS = frozenset({"", "0", "false", "no", "off", "n", "f"})


def _to_decimal(value: Any) -> Decimal | None:
    """Convert a raw value to a finite Decimal, or None if impossible."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            return None
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            return None
    else:
        return None
    return result if result.is_finite() else None


def parse_amount(value: Any, field_name: str = "amount") -> Decimal:
    """Parse a monetary value strictly.

    Parameters
    ----------
    value : Any
        Raw value (``Decimal``, ``int``, ``float`` or numeric ``str``).
    field_name : str
        Name used in the error message.

    Returns
    -------
    Decimal
        Parsed amount.

    Raises
    ------
    ValidationError
        If the value is not a finite number.
    """
    result = _to_decimal(value)
    if result is None:
        raise ValidationError(f"{field_name} must be a finite number, got {value!r}")
    return result


def parse_or_zero(value: Any) -> Decimal:
    """Parse a monetary value, falling back to zero for anything unparseable."""
    result = _to_decimal(value)
    return ZERO if result is None else result


def parse_bool(value: Any) -> bool:
    """Read a paid flag from a form or row value.

    Strings are read by their text: the entries of ``FALSE_STRINGS``
    (case-insensitive) are False and any other text is True.
    """
    if isinstance(value, str):
        return value.strip().lower() not in FALSE_STRINGS
    return bool(value)


def create(data: PropertyInput) -> Property:
    """Validate caller input and build a new property.

    The returned property has an empty id and an empty payment history;
    the store assigns the id on insert.

    Raises
    ------
    ValidationError
        If a required text field is empty, or rent/debt is negative or
        not a finite number.
    """
    for name in REQUIRED_TEXT_FIELDS:
        text = getattr(data, name)
        if not isinstance(text, str) or not text.strip():
            raise ValidationError(f"{name} is required")

    amounts = {}
    for name in NUMERIC_FIELDS:
        amount = parse_amount(getattr(data, name), name)
        if amount < 0:
            raise ValidationError(f"{name} must not be negative, got {amount}")
        amounts[name] = amount

    return Property(
        id="",
        apartment_name=data.apartment_name,
        house_number=data.house_number,
        tenant_name=data.tenant_name,
        phone_number=data.phone_number,
        rent_amount=amounts["rent_amount"],
        debt=amounts["debt"],
        is_paid=parse_bool(data.is_paid),
        payment_history=(),
    )


def coerce_patch(patch: PropertyPatch) -> dict[str, Any]:
    """Return the set fields of a patch with their types coerced."""
    changes = patch.set_fields()
    for name, value in changes.items():
        if name in NUMERIC_FIELDS:
            changes[name] = parse_or_zero(value)
        elif name == "is_paid":
            changes[name] = parse_bool(value)
        else:
            changes[name] = "" if value is None else str(value)
    return changes


def update(prop: Property, patch: PropertyPatch) -> Property:
    """Overwrite the fields set in ``patch``.

    ``id`` and ``payment_history`` are not part of a patch and never change.
    Numeric fields use the lenient parse-or-zero policy.
    """
    return replace(prop, **coerce_patch(patch))


def record_payment(prop: Property, amount: Any, today: date | None = None) -> Property:
    """Apply a payment to the property's debt and history.

    Parameters
    ----------
    prop : Property
        Current state.
    amount : Any
        Payment amount; must be a finite number greater than zero.
    today : date | None
        Payment date (defaults to ``date.today()``).

    Returns
    -------
    Property
        New state with ``debt = max(0, debt - amount)``, the payment appended
        to the history and ``is_paid`` set when the debt reaches zero.

    Raises
    ------
    ValidationError
        If the amount is not a finite positive number.
    """
    value = parse_amount(amount)
    if value <= 0:
        raise ValidationError(f"Payment amount must be greater than zero, got {value}")

    new_debt = max(ZERO, prop.debt - value)
    payment = Payment(date=today or date.today(), amount=value)
    logger.debug(
        "Payment of %s on %s: debt %s -> %s", value, prop.id, prop.debt, new_debt
    )
    return replace(
        prop,
        debt=new_debt,
        is_paid=new_debt == 0,
        payment_history=prop.payment_history + (payment,),
    )


def toggle_paid(prop: Property) -> Property:
    """Flip the paid flag without touching debt or history."""
    return replace(prop, is_paid=not prop.is_paid)
