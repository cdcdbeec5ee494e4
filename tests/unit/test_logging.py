"""
Unit tests for the logging subsystem.

Covers contextual fields (LogContext, set/clear), the JSON formatter and the
setup/shutdown lifecycle.
"""

import json
import logging

import pytest

from realms_mechanics.core.logging import (
    LogContext,
    clear_log_context,
    get_log_context,
    get_logger,
    get_logging_health,
    set_log_context,
    setup_logging,
    shutdown_logging,
)
from realms_mechanics.core.logging.logger import ContextFilter, JSONFormatter


@pytest.fixture
def root_logger_state():
    """
    Restore the root logger after a test installs the engine's handlers.

    Scope: function
    """
    root = logging.getLogger()
    level = root.level
    yield root
    shutdown_logging()
    root.setLevel(level)


@pytest.fixture(autouse=True)
def clean_context():
    clear_log_context()
    yield
    clear_log_context()


@pytest.mark.unit
class TestLogContext:
    """Test LogContext and the context helpers."""

    def test_context_scoped_to_block(self):
        # Act
        with LogContext(creator="power", document_id=12, operation="recompute"):
            inside = get_log_context()

        # Assert
        assert inside["creator"] == "power"
        assert inside["document_id"] == "12"
        assert inside["operation"] == "recompute"
        assert len(inside["correlation_id"]) == 8
        assert get_log_context() == {}

    def test_explicit_correlation_id(self):
        with LogContext(correlation_id="abc123", tier="rare") as ctx:
            assert ctx.context["request_id"] == "abc123"
            assert get_log_context()["tier"] == "rare"

    def test_set_and_clear(self):
        set_log_context(creator="item", request_id="req-1")
        set_log_context(operation="display")

        context = get_log_context()
        assert context == {
            "creator": "item",
            "request_id": "req-1",
            "correlation_id": "req-1",
            "operation": "display",
        }

        clear_log_context()
        assert get_log_context() == {}


@pytest.mark.unit
class TestFormatting:
    """Test ContextFilter and JSONFormatter."""

    def _record(self, **extra):
        record = logging.LogRecord(
            name="realms_mechanics.modules.power.calculator",
            level=logging.DEBUG,
            pathname=__file__,
            lineno=1,
            msg="Unresolved power part",
            args=(),
            exc_info=None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_json_includes_context_and_extra(self):
        # Arrange
        record = self._record(part_id=9999)

        # Act
        with LogContext(creator="power", document_id="pw-1"):
            ContextFilter().filter(record)
        data = json.loads(JSONFormatter().format(record))

        # Assert
        assert data["level"] == "DEBUG"
        assert data["message"] == "Unresolved power part"
        assert data["creator"] == "power"
        assert data["document_id"] == "pw-1"
        assert data["component"] == "realms_mechanics"
        assert data["extra"]["part_id"] == 9999

    def test_missing_context_is_omitted(self):
        record = self._record()

        ContextFilter().filter(record)
        data = json.loads(JSONFormatter().format(record))

        assert "creator" not in data
        assert "correlation_id" not in data


@pytest.mark.unit
class TestLifecycle:
    """Test setup_logging() / shutdown_logging()."""

    def test_get_logger(self):
        assert get_logger("realms_mechanics.test").name == "realms_mechanics.test"

    def test_setup_is_idempotent(self, root_logger_state):
        # Act
        setup_logging()
        handler_count = len(root_logger_state.handlers)
        setup_logging()

        # Assert
        assert handler_count == 1
        assert len(root_logger_state.handlers) == 1
        assert get_logging_health().initialized is True

    def test_shutdown(self, root_logger_state):
        setup_logging()

        shutdown_logging()

        health = get_logging_health()
        assert health.initialized is False
        assert health.queue_max_size == 0
        assert root_logger_state.handlers == []

    def test_shutdown_without_setup_is_noop(self):
        shutdown_logging()

        assert get_logging_health().initialized is False
