"""Configuration management for rent-ledger."""

from dataclasses import dataclass, field
from pathlib import Path

from rent_ledger.exceptions import ConfigurationError

STORE_BACKENDS = ("memory", "json")


@dataclass
class StoreConfig:
    """Property store configuration."""

    backend: str = "memory"
    path: Path | None = None

    def validate(self) -> None:
        """Raise ConfigurationError if the backend cannot be built."""
        if self.backend not in STORE_BACKENDS:
            raise ConfigurationError(
                f"Unknown store backend {self.backend!r}, expected one of {STORE_BACKENDS}"
            )
        if self.backend == "json" and self.path is None:
            raise ConfigurationError("JSON store requires a path")


@dataclass
class DisplayConfig:
    """How amounts are labelled on receipts and summaries."""

    currency: str = "KES"


@dataclass
class LedgerConfig:
    """Main configuration for rent-ledger."""

    store: StoreConfig = field(default_factory=StoreConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    log_level: str = "INFO"
    log_format: str = "standard"
    seed: int | None = None

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        import os

        store_path = os.getenv("RENT_LEDGER_STORE_PATH")
        store = StoreConfig(
            backend=os.getenv("RENT_LEDGER_STORE_BACKEND", "memory").lower(),
            path=Path(store_path) if store_path else None,
        )
        store.validate()

        display = DisplayConfig(
            currency=os.getenv("RENT_LEDGER_CURRENCY", "KES"),
        )

        seed = os.getenv("SEED")
        try:
            parsed_seed = int(seed) if seed else None
        except ValueError as exc:
            raise ConfigurationError(f"SEED must be an integer, got {seed!r}") from exc

        return cls(
            store=store,
            display=display,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            seed=parsed_seed,
        )
