"""Tests for the uvicorn entry point."""
import logging

import event_service.__main__ as entry
from event_service.config import Settings


def test_main_runs_uvicorn_on_configured_port(monkeypatch, caplog):
    calls = []
    monkeypatch.setattr(entry, "get_settings", lambda: Settings(host="127.0.0.1", port=9000))
    monkeypatch.setattr(entry, "configure_logging", lambda level: None)
    monkeypatch.setattr(entry.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
    caplog.set_level(logging.INFO, logger="event_service.__main__")

    entry.main()

    assert calls == [
        (
            ("event_service.main:app",),
            {"host": "127.0.0.1", "port": 9000, "log_config": None},
        )
    ]
    assert "Events app starting on http://127.0.0.1:9000" in caplog.messages
