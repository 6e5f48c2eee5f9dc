"""Read-only views over a property's payment history."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any

from rent_ledger.exceptions import ValidationError
from rent_ledger.ledger.engine import ZERO, parse_amount
from rent_ledger.models import Payment, Property, Receipt, ReceiptLine, SuggestedAmount


def sorted_history(prop: Property) -> list[Payment]:
    """Return payments newest first; same-day payments keep insertion order."""
    return sorted(prop.payment_history, key=lambda p: p.date, reverse=True)


def total_paid(prop: Property) -> Decimal:
    """Sum of every recorded payment."""
    return sum((p.amount for p in prop.payment_history), ZERO)


def suggested_amounts(prop: Property) -> list[SuggestedAmount]:
    """Quick-pick amounts for the payment form.

    ``Full Debt`` is disabled when nothing is owed.
    """
    return [
        SuggestedAmount("Full Rent", prop.rent_amount),
        SuggestedAmount("Half Rent", prop.rent_amount / 2),
        SuggestedAmount("Full Debt", prop.debt, disabled=prop.debt == 0),
    ]


def preview_remaining_debt(prop: Property, amount: Any) -> Decimal:
    """Debt left after paying ``amount``, without recording anything.

    Raises
    ------
    ValidationError
        If the amount is not a finite positive number.
    """
    value = parse_amount(amount)
    if value <= 0:
        raise ValidationError(f"Payment amount must be greater than zero, got {value}")
    return max(ZERO, prop.debt - value)


def build_receipt(
    prop: Property,
    currency: str = "KES",
    generated_on: date | None = None,
) -> Receipt:
    """Collect the data a printable receipt shows.

    Parameters
    ----------
    prop : Property
        Property whose history is summarised.
    currency : str
        Currency code printed next to amounts.
    generated_on : date | None
        Receipt date (defaults to today).

    Returns
    -------
    Receipt
        Receipt with payments ordered newest first and numbered from the
        oldest, so the newest line carries ``payment_count``.
    """
    payments = sorted_history(prop)
    count = len(payments)
    return Receipt(
        property_id=prop.id,
        tenant_name=prop.tenant_name,
        apartment_name=prop.apartment_name,
        house_number=prop.house_number,
        phone_number=prop.phone_number,
        rent_amount=prop.rent_amount,
        debt=prop.debt,
        total_paid=total_paid(prop),
        currency=currency,
        generated_on=generated_on or date.today(),
        payment_count=count,
        payments=[
            ReceiptLine(number=count - index, date=p.date, amount=p.amount)
            for index, p in enumerate(payments)
        ],
    )
