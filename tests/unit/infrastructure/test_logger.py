import logging

import structlog
from structlog.testing import capture_logs

from mqtt_service.config import Settings
from mqtt_service.infrastructure.observability import logger as logger_module
from mqtt_service.infrastructure.observability import (
    bind_context,
    clear_context,
    configure_logging_from_settings,
    get_logger,
)


def _capture_configure(monkeypatch):
    calls = {}
    monkeypatch.setattr(structlog, "configure", lambda **kw: calls.update(kw))
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(basic=kw))
    return calls


def test_configure_logging_json_renderer(monkeypatch):
    calls = _capture_configure(monkeypatch)
    logger_module.configure_logging(log_level="warning", json_logs=True)
    assert calls["basic"]["level"] == logging.WARNING
    assert isinstance(calls["processors"][-1], structlog.processors.JSONRenderer)
    assert calls["wrapper_class"] is structlog.stdlib.BoundLogger


def test_configure_logging_console_renderer(monkeypatch):
    calls = _capture_configure(monkeypatch)
    logger_module.configure_logging(log_level="DEBUG", json_logs=False)
    assert isinstance(calls["processors"][-1], structlog.dev.ConsoleRenderer)


def test_configure_from_settings(monkeypatch):
    calls = _capture_configure(monkeypatch)
    configure_logging_from_settings(Settings(environment="prod", log_level="ERROR", json_logs=True))
    assert calls["basic"]["level"] == logging.ERROR
    assert isinstance(calls["processors"][-1], structlog.processors.JSONRenderer)


def test_sql_echo_follows_debug_flag(monkeypatch):
    _capture_configure(monkeypatch)
    engine_logger = logging.getLogger("sqlalchemy.engine")
    monkeypatch.setattr(engine_logger, "level", engine_logger.level)
    configure_logging_from_settings(Settings(debug=True))
    assert engine_logger.level == logging.INFO
    configure_logging_from_settings(Settings(debug=False))
    assert engine_logger.level == logging.WARNING


def test_bound_context_is_merged_and_cleared():
    log = get_logger("test")
    bind_context(device_id="strip-1")
    try:
        context = structlog.contextvars.get_contextvars()
        assert context == {"device_id": "strip-1"}
        with capture_logs() as logs:
            log.info("switched")
        assert logs[0]["event"] == "switched"
    finally:
        clear_context()
    assert structlog.contextvars.get_contextvars() == {}
