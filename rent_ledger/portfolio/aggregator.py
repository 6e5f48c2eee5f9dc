"""Filters and summary statistics over a property collection.

Collected and outstanding totals are per-period buckets of ``rent_amount``
gated by the ``is_paid`` flag. They are not derived from payments or debt.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Sequence

from rent_ledger.exceptions import ValidationError
from rent_ledger.models import PaymentFilter, Property

ZERO = Decimal("0")
ONE_PLACE = Decimal("0.1")

SEARCH_FIELDS = ("apartment_name", "house_number", "tenant_name")


@dataclass(frozen=True)
class PortfolioSummary:
    """Dashboard statistics for a set of properties."""

    total_properties: int
    unpaid_count: int
    total_rent: Decimal
    total_collected: Decimal
    total_outstanding: Decimal
    total_debt: Decimal
    collection_rate: Decimal  # Percent, one decimal place


def parse_payment_filter(value: PaymentFilter | str) -> PaymentFilter:
    """Resolve a filter name, raising ValidationError for unknown names."""
    try:
        return PaymentFilter(value)
    except ValueError as exc:
        choices = ", ".join(f.value for f in PaymentFilter)
        raise ValidationError(f"Unknown payment filter {value!r}; expected one of: {choices}") from exc


def matches_query(prop: Property, query: str) -> bool:
    """Case-insensitive substring match on name, unit or tenant."""
    needle = (query or "").lower()
    return any(
        needle in (getattr(prop, name, None) or "").lower()
        for name in SEARCH_FIELDS
    )


def matches_payment_filter(prop: Property, payment_filter: PaymentFilter | str) -> bool:
    """Check a property's paid flag against a filter."""
    payment_filter = parse_payment_filter(payment_filter)
    if payment_filter == PaymentFilter.PAID:
        return prop.is_paid
    if payment_filter == PaymentFilter.UNPAID:
        return not prop.is_paid
    return True


def filter_properties(
    collection: Iterable[Property],
    query: str = "",
    payment_filter: PaymentFilter | str = PaymentFilter.ALL,
) -> list[Property]:
    """Return the properties matching both the search query and filter.

    Parameters
    ----------
    collection : Iterable[Property]
        Properties to filter; never modified.
    query : str
        Search text; empty matches everything.
    payment_filter : PaymentFilter | str
        ``all``, ``paid`` or ``unpaid``.

    Returns
    -------
    list[Property]
        Matching properties in their original order.

    Raises
    ------
    ValidationError
        If ``payment_filter`` is not a known filter.
    """
    payment_filter = parse_payment_filter(payment_filter)
    return [
        prop
        for prop in collection
        if matches_query(prop, query) and matches_payment_filter(prop, payment_filter)
    ]


def collection_rate(total_collected: Decimal, total_rent: Decimal) -> Decimal:
    """Collected share of expected rent as a percentage, 0 when no rent is due."""
    if total_rent == 0:
        return ZERO.quantize(ONE_PLACE)
    rate = total_collected / total_rent * 100
    return rate.quantize(ONE_PLACE, rounding=ROUND_HALF_UP)


def summarize(collection: Sequence[Property]) -> PortfolioSummary:
    """Compute portfolio statistics in a single pass."""
    unpaid_count = 0
    total_rent = ZERO
    total_collected = ZERO
    total_outstanding = ZERO
    total_debt = ZERO

    for prop in collection:
        total_rent += prop.rent_amount
        total_debt += prop.debt
        if prop.is_paid:
            total_collected += prop.rent_amount
        else:
            unpaid_count += 1
            total_outstanding += prop.rent_amount

    return PortfolioSummary(
        total_properties=len(collection),
        unpaid_count=unpaid_count,
        total_rent=total_rent,
        total_collected=total_collected,
        total_outstanding=total_outstanding,
        total_debt=total_debt,
        collection_rate=collection_rate(total_collected, total_rent),
    )
