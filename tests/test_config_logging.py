"""Tests for config and logging."""

import io
import json
import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from rent_ledger.config import DisplayConfig, LedgerConfig, StoreConfig
from rent_ledger.exceptions import ConfigurationError
from rent_ledger.logging import JsonFormatter, LedgerFormatter, configure_logging, setup_logging


class TestStoreConfig:
    """Tests for StoreConfig."""

    def test_default_values(self) -> None:
        config = StoreConfig()

        assert config.backend == "memory"
        assert config.path is None
        config.validate()

    def test_json_with_path(self) -> None:
        StoreConfig(backend="json", path=Path("local/properties.json")).validate()

    def test_json_without_path(self) -> None:
        with pytest.raises(ConfigurationError, match="requires a path"):
            StoreConfig(backend="json").validate()

    def test_unknown_backend(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown store backend 'supabase'"):
            StoreConfig(backend="supabase").validate()


class TestDisplayConfig:
    """Tests for DisplayConfig."""

    def test_default_currency(self) -> None:
        assert DisplayConfig().currency == "KES"


class TestLedgerConfig:
    """Tests for LedgerConfig."""

    def test_default_values(self) -> None:
        config = LedgerConfig()

        assert isinstance(config.store, StoreConfig)
        assert isinstance(config.display, DisplayConfig)
        assert config.log_level == "INFO"
        assert config.log_format == "standard"
        assert config.seed is None

    def test_from_env_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = LedgerConfig.from_env()

        assert config.store.backend == "memory"
        assert config.store.path is None
        assert config.display.currency == "KES"
        assert config.seed is None

    def test_from_env_custom(self) -> None:
        env = {
            "RENT_LEDGER_STORE_BACKEND": "JSON",
            "RENT_LEDGER_STORE_PATH": "/tmp/rent/properties.json",
            "RENT_LEDGER_CURRENCY": "USD",
            "LOG_LEVEL": "DEBUG",
            "LOG_FORMAT": "json",
            "SEED": "42",
        }
        with patch.dict(os.environ, env, clear=True):
            config = LedgerConfig.from_env()

        assert config.store.backend == "json"
        assert config.store.path == Path("/tmp/rent/properties.json")
        assert config.display.currency == "USD"
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"
        assert config.seed == 42

    def test_from_env_json_without_path(self) -> None:
        with patch.dict(os.environ, {"RENT_LEDGER_STORE_BACKEND": "json"}, clear=True):
            with pytest.raises(ConfigurationError):
                LedgerConfig.from_env()

    def test_from_env_bad_seed(self) -> None:
        with patch.dict(os.environ, {"SEED": "abc"}, clear=True):
            with pytest.raises(ConfigurationError, match="SEED must be an integer"):
                LedgerConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging."""

    def teardown_method(self) -> None:
        root = logging.getLogger()
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        root.setLevel(logging.WARNING)

    def test_standard_format(self) -> None:
        setup_logging(level="DEBUG")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, LedgerFormatter)
        assert logging.getLogger("rent_ledger").level == logging.DEBUG
        assert logging.getLogger("faker").level == logging.WARNING

    def test_json_format(self) -> None:
        setup_logging(level="INFO", format_type="json")

        assert isinstance(logging.getLogger().handlers[0].formatter, JsonFormatter)

    def test_unknown_level_falls_back_to_info(self) -> None:
        setup_logging(level="LOUD")

        assert logging.getLogger().level == logging.INFO

    def test_replaces_existing_handlers(self) -> None:
        setup_logging()
        setup_logging()

        assert len(logging.getLogger().handlers) == 1

    def test_configure_from_config(self) -> None:
        stream = io.StringIO()
        configure_logging(LedgerConfig(log_level="WARNING", log_format="json"), stream=stream)

        logging.getLogger("rent_ledger.service").warning("Cannot update property: p1 not found")

        data = json.loads(stream.getvalue())
        assert data["level"] == "WARNING"
        assert logging.getLogger().level == logging.WARNING

    def test_standard_format_appends_context(self) -> None:
        stream = io.StringIO()
        setup_logging(level="INFO", stream=stream)

        logging.getLogger("rent_ledger.service").info(
            "Record payment: p1", extra={"property_id": "p1", "action": "record payment"}
        )
        logging.getLogger("rent_ledger.service").info("Loaded 3 properties")

        first, second = stream.getvalue().splitlines()
        assert first.endswith("Record payment: p1 | property_id=p1 action=record payment")
        assert second.endswith("Loaded 3 properties")


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs) -> logging.LogRecord:
        return logging.LogRecord(
            name="rent_ledger.service",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="Record payment: %s",
            args=("prop-001",),
            exc_info=kwargs.get("exc_info"),
        )

    def test_basic_fields(self) -> None:
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "rent_ledger.service"
        assert data["message"] == "Record payment: prop-001"
        assert "timestamp" in data
        assert "exception" not in data

    def test_property_id_extra(self) -> None:
        record = self._record()
        record.property_id = "prop-001"

        data = json.loads(JsonFormatter().format(record))

        assert data["property_id"] == "prop-001"

    def test_context_fields_skip_missing(self) -> None:
        record = self._record()
        record.action = "toggle paid flag"

        data = json.loads(JsonFormatter().format(record))

        assert data["action"] == "toggle paid flag"
        assert "property_id" not in data

    def test_exception(self) -> None:
        try:
            raise ValueError("boom")
        except ValueError:
            import sys

            record = self._record(exc_info=sys.exc_info())

        data = json.loads(JsonFormatter().format(record))

        assert "ValueError: boom" in data["exception"]

