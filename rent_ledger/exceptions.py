"""Custom exception hierarchy for rent-ledger."""


class RentLedgerError(Exception):
    """Base exception for all rent-ledger errors."""


class ValidationError(RentLedgerError):
    """Raised when caller-supplied input fails a precondition."""


class StoreError(RentLedgerError):
    """Raised when the property store rejects or fails an operation."""


class ConfigurationError(RentLedgerError):
    """Raised when configuration is invalid or missing."""
