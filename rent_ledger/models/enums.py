"""Enumeration types for the rental ledger."""

from enum import Enum


class PaymentFilter(str, Enum):
    ALL = "all"
    PAID = "paid"
    UNPAID = "unpaid"
