"""Synthetic portfolio generators for demos and tests."""

from rent_ledger.generators.property import PropertyGenerator

__all__ = ["PropertyGenerator"]
