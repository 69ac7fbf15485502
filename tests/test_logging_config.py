"""Tests for shared logging setup."""

import logging

from chatresponder.core.common.logging_config import configure_logging


def test_http_client_loggers_are_quieted(monkeypatch, tmp_path):
    monkeypatch.setenv("LOG_DIR", str(tmp_path))

    configure_logging(service_name="chatresponder-test")

    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING
