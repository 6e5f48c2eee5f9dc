"""Property store contract and reference backends."""

from rent_ledger.config import StoreConfig
from rent_ledger.store.base import PropertyStore, Row
from rent_ledger.store.json_file import JsonFilePropertyStore
from rent_ledger.store.memory import InMemoryPropertyStore


def build_store(config: StoreConfig) -> PropertyStore:
    """Create the store selected by configuration."""
    config.validate()
    if config.backend == "json":
        return JsonFilePropertyStore(config.path)
    return InMemoryPropertyStore()


__all__ = [
    "InMemoryPropertyStore",
    "JsonFilePropertyStore",
    "PropertyStore",
    "Row",
    "build_store",
]
