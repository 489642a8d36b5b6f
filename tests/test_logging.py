"""
Unit tests for logging setup.
"""

import json
import logging

import pytest
import structlog

from gremlin_dsl import g
from gremlin_dsl.core.config import Settings
from gremlin_dsl.core.logging import ROOT_LOGGER_NAME, get_logger, setup_logging
from gremlin_dsl.core.logging.setup import add_error_type, build_processors


@pytest.fixture(autouse=True)
def reset_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    structlog.contextvars.clear_contextvars()
    yield
    structlog.reset_defaults()
    root.handlers = handlers
    root.setLevel(level)
    structlog.contextvars.clear_contextvars()


def read_records(capsys) -> list[dict]:
    return [json.loads(line) for line in capsys.readouterr().out.strip().splitlines()]


class TestPackageLogger:
    """Tests for the loggers handed out before any setup"""

    def test_package_namespace_has_null_handler(self):
        handlers = logging.getLogger(ROOT_LOGGER_NAME).handlers

        assert any(isinstance(handler, logging.NullHandler) for handler in handlers)

    def test_logger_wraps_stdlib_logger(self, caplog):
        caplog.set_level(logging.INFO, logger="gremlin_dsl.tests")

        get_logger("gremlin_dsl.tests").info("hello")

        assert [record.name for record in caplog.records] == ["gremlin_dsl.tests"]

    def test_unconfigured_logging_is_silent(self, capsys):
        get_logger("gremlin_dsl.tests").warning("nobody listens")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""


class TestSetupLogging:
    """Tests for setup_logging"""

    def test_sets_root_level(self):
        setup_logging(Settings(_env_file=None, log_level="WARNING"))

        assert logging.getLogger().level == logging.WARNING

    def test_debug_mode_logs_sent_traversal(self, capsys):
        setup_logging(Settings(_env_file=None, debug=True, log_json=True))

        g().V().send(lambda traversal, query: None)

        sent = [record for record in read_records(capsys) if record["event"] == "Sending traversal"]
        assert sent and sent[0]["query"] == "g.V()"
        assert sent[0]["logger"] == "gremlin_dsl.traversal.builder"

    def test_bound_contextvars_merged_into_records(self, capsys):
        setup_logging(Settings(_env_file=None, log_json=True))
        structlog.contextvars.bind_contextvars(request_id="r1")

        get_logger("gremlin_dsl.tests").info("hello", step="V")

        record = read_records(capsys)[-1]
        assert record["event"] == "hello"
        assert record["request_id"] == "r1"
        assert record["step"] == "V"

    def test_stdlib_records_rendered_by_same_chain(self, capsys):
        setup_logging(Settings(_env_file=None, log_json=True))

        logging.getLogger("some.library").warning("from stdlib")

        record = read_records(capsys)[-1]
        assert record["event"] == "from stdlib"
        assert record["logger"] == "some.library"
        assert record["level"] == "warning"

    def test_debug_records_filtered_at_info(self, capsys):
        setup_logging(Settings(_env_file=None, log_level="INFO", log_json=True))

        get_logger(__name__).debug("hidden")

        assert "hidden" not in capsys.readouterr().out

    def test_logfire_processor_only_when_enabled(self):
        processors = build_processors(Settings(_env_file=None))

        assert not any(type(p).__name__ == "LogfireProcessor" for p in processors)

    def test_add_error_type(self):
        event = add_error_type(None, "error", {"error": KeyError("k")})

        assert event["error_type"] == "KeyError"
