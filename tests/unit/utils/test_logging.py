"""Unit tests for the structured logging setup.

Tests cover:
- get_logger returns a structlog logger that keeps its name
- JSON output carries timestamp, level, logger and event
- Context binding
- Catalogue events emitted during build and lookups
- Console output written to stderr
"""

import io
import json
import logging

import pytest

from work_catalog.catalog import build_catalog, get_catalog
from work_catalog.utils.logging import _configure_structlog, bind_context, get_logger


def _events(caplog: pytest.LogCaptureFixture) -> list:
    parsed = []
    for record in caplog.records:
        try:
            parsed.append(json.loads(record.message))
        except ValueError:
            continue
    return parsed


@pytest.mark.unit
def test_get_logger_returns_bound_logger() -> None:
    logger = get_logger("test_module")

    assert hasattr(logger, "bind")
    assert hasattr(logger, "info")


@pytest.mark.unit
def test_json_output_structure(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    get_logger("my_test_logger").info("test_event", answer=42)

    log_data = json.loads(caplog.records[-1].message)
    assert log_data["event"] == "test_event"
    assert log_data["logger"] == "my_test_logger"
    assert log_data["level"] == "info"
    assert log_data["answer"] == 42
    assert "timestamp" in log_data


@pytest.mark.unit
def test_context_binding_persists(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    logger = bind_context(command="export")
    logger.info("first_event")
    logger.info("second_event")

    events = [e for e in _events(caplog) if e.get("event") in {"first_event", "second_event"}]
    assert len(events) == 2
    assert all(e["command"] == "export" for e in events)


@pytest.mark.unit
def test_catalog_build_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    build_catalog()

    built = [e for e in _events(caplog) if e.get("event") == "catalog.built"]
    assert built
    assert built[-1]["work_count"] == 5
    assert built[-1]["categories"] == {"products": 5, "uiux": 0, "3d": 0}


@pytest.mark.unit
def test_lookup_miss_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    catalog = get_catalog()
    caplog.set_level(logging.DEBUG)

    assert catalog.get_by_slug("does-not-exist") is None

    misses = [e for e in _events(caplog) if e.get("event") == "catalog.lookup_miss"]
    assert misses[-1]["slug"] == "does-not-exist"
    assert misses[-1]["level"] == "debug"


@pytest.mark.unit
def test_catalog_build_logs_environment(
    caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("ENVIRONMENT", "staging")
    caplog.set_level(logging.INFO)

    build_catalog()

    built = [e for e in _events(caplog) if e.get("event") == "catalog.built"]
    assert built[-1]["environment"] == "staging"



@pytest.mark.unit
def test_console_output_goes_to_stderr(monkeypatch: pytest.MonkeyPatch) -> None:
    fake_stdout, fake_stderr = io.StringIO(), io.StringIO()
    monkeypatch.setattr("sys.stdout", fake_stdout)
    monkeypatch.setattr("sys.stderr", fake_stderr)
    try:
        _configure_structlog()
        get_logger("stream_check").warning("stream_event")
    finally:
        monkeypatch.undo()
        _configure_structlog()

    assert "stream_event" in fake_stderr.getvalue()
    assert fake_stdout.getvalue() == ""
