"""Structured logging: JSON lines with extras, idempotent setup."""

import json
import logging

import pytest

from datadip_mock.infrastructure.observability import JSONFormatter, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "datadip_mock.api", logging.INFO, __file__, 1,
        "Processing %s...", ("/GetAccountByAccountNumber",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_core_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["logger"] == "datadip_mock.api"
    assert out["message"] == "Processing /GetAccountByAccountNumber..."
    assert "timestamp" in out


def test_json_formatter_surfaces_extras():
    out = json.loads(JSONFormatter().format(
        _record(route="/GetAccountByAccountNumber", method="POST", status_code=200),
    ))
    assert out["route"] == "/GetAccountByAccountNumber"
    assert out["method"] == "POST"
    assert out["status_code"] == 200
    assert "error_code" not in out


def test_setup_logging_is_idempotent(restore_root_logger):
    setup_logging("DEBUG", "json")
    setup_logging("WARNING", "text")
    named = [h for h in restore_root_logger.handlers if h.get_name() == "datadip_mock"]
    assert len(named) == 1
    assert not isinstance(named[0].formatter, JSONFormatter)
    assert restore_root_logger.level == logging.WARNING


def test_setup_logging_routes_uvicorn_through_root(restore_root_logger):
    setup_logging("INFO", "json")
    uv = logging.getLogger("uvicorn.error")
    assert uv.handlers == []
    assert uv.propagate is True
