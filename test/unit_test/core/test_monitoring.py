"""
Unit tests for the Logfire monitoring module.

This test suite covers:
- Environment variable parsing
- Initialization gating on the enabled flag and the token
- Instrumentation of SQLAlchemy, HTTPX and FastAPI
- Graceful degradation of the logging helpers
"""

import importlib
import os
from unittest.mock import MagicMock, patch

import pytest

import vendorlink.core.monitoring as monitoring


@pytest.fixture
def reload_monitoring():
    """Reload the module under a patched environment and restore it afterwards."""

    def _reload(env: dict):
        with patch.dict(os.environ, env, clear=True):
            return importlib.reload(monitoring)

    yield _reload
    importlib.reload(monitoring)


class TestEnvironmentConfiguration:
    def test_disabled_by_default(self, reload_monitoring):
        """Test that Logfire is disabled without configuration."""
        module = reload_monitoring({})

        assert module.LOGFIRE_ENABLED is False
        assert module.LOGFIRE_SERVICE_NAME == "vendorlink-api"

    @pytest.mark.parametrize("value", ["true", "1", "yes", "TRUE"])
    def test_enabled_values(self, reload_monitoring, value):
        assert reload_monitoring({"LOGFIRE_ENABLED": value}).LOGFIRE_ENABLED is True


class TestInitializeLogfire:
    def test_disabled_returns_false(self):
        with patch.object(monitoring, "LOGFIRE_ENABLED", False):
            assert monitoring.initialize_logfire() is False

    def test_missing_token_returns_false(self):
        """Test that enabling without a token does not configure Logfire."""
        with patch.object(monitoring, "LOGFIRE_ENABLED", True), patch.object(monitoring, "LOGFIRE_TOKEN", ""):
            assert monitoring.initialize_logfire() is False

    def test_configures_and_instruments(self):
        """Test that all three instrumentations are applied when enabled."""
        fake_logfire = MagicMock()
        app = MagicMock()
        with (
            patch.object(monitoring, "LOGFIRE_ENABLED", True),
            patch.object(monitoring, "LOGFIRE_TOKEN", "token"),
            patch.dict("sys.modules", {"logfire": fake_logfire}),
        ):
            assert monitoring.initialize_logfire(app) is True

        fake_logfire.configure.assert_called_once()
        assert fake_logfire.configure.call_args.kwargs["token"] == "token"
        fake_logfire.instrument_sqlalchemy.assert_called_once()
        fake_logfire.instrument_httpx.assert_called_once()
        fake_logfire.instrument_fastapi.assert_called_once_with(app=app)

    def test_failed_instrumentation_is_not_fatal(self):
        """Test that one failing instrumentation does not stop initialization."""
        fake_logfire = MagicMock()
        fake_logfire.instrument_sqlalchemy.side_effect = RuntimeError("no engine")
        with (
            patch.object(monitoring, "LOGFIRE_ENABLED", True),
            patch.object(monitoring, "LOGFIRE_TOKEN", "token"),
            patch.dict("sys.modules", {"logfire": fake_logfire}),
        ):
            assert monitoring.initialize_logfire() is True

        fake_logfire.instrument_httpx.assert_called_once()


class TestLoggingHelpers:
    def test_business_event_is_logged(self, caplog):
        """Test that business events reach the standard logger."""
        fake_logfire = MagicMock()
        with patch.dict("sys.modules", {"logfire": fake_logfire}), caplog.at_level("INFO"):
            monitoring.log_business_event("order.created", order_id="o1")

        assert "order.created" in caplog.text
        fake_logfire.info.assert_called_once_with("order.created", order_id="o1")

    def test_helpers_swallow_logfire_failures(self):
        """Test that a failing Logfire call never reaches the caller."""
        fake_logfire = MagicMock()
        fake_logfire.info.side_effect = RuntimeError("down")
        fake_logfire.error.side_effect = RuntimeError("down")
        with patch.dict("sys.modules", {"logfire": fake_logfire}):
            monitoring.log_api_request("GET", "/api/products", 200, 1.0)
            monitoring.log_business_event("order.created")
            monitoring.log_error("ValueError", "bad", {"path": "/api"})
