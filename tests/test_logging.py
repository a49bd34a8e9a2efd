"""Tests for the shared logging setup."""

import logging
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from arena_ai.utils.logging import LOG_FORMAT, setup_logging


@pytest.fixture(autouse=True)
def _restore_loggers():
    names = ("", "uvicorn", "uvicorn.error", "uvicorn.access")
    saved = {
        n: (list(logging.getLogger(n).handlers), logging.getLogger(n).level, logging.getLogger(n).propagate)
        for n in names
    }
    yield
    for n, (handlers, level, propagate) in saved.items():
        lg = logging.getLogger(n)
        lg.handlers[:] = handlers
        lg.setLevel(level)
        lg.propagate = propagate


class TestSetupLogging:

    def test_single_stderr_handler(self):
        setup_logging("DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        handler = root.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr
        assert handler.formatter._fmt == LOG_FORMAT

    def test_unknown_level_falls_back_to_info(self):
        setup_logging("chatty")
        assert logging.getLogger().level == logging.INFO

    def test_uvicorn_routed_through_root(self):
        uv = logging.getLogger("uvicorn.error")
        uv.addHandler(logging.NullHandler())
        uv.propagate = False
        setup_logging("INFO")
        assert uv.handlers == []
        assert uv.propagate

    def test_access_log_muted_by_default(self):
        setup_logging("INFO")
        assert logging.getLogger("uvicorn.access").level == logging.WARNING
        setup_logging("INFO", access_log=True)
        assert logging.getLogger("uvicorn.access").level == logging.INFO

    def test_policy_lines_use_service_format(self, capsys):
        setup_logging("INFO")
        logging.getLogger("arena_ai.engine.registry").info("Registered policy %r as bot %d", "kiter", 3)
        err = capsys.readouterr().err
        assert "INFO    arena_ai.engine.registry | Registered policy 'kiter' as bot 3" in err
