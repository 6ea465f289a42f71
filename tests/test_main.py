import logging

import pytest

from sportscast import app as app_module
from sportscast import config


def test_main_exits_without_api_key(monkeypatch, caplog):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.setattr(config, "_CACHED_SETTINGS", None)

    def _no_server(*args, **kwargs):
        raise AssertionError("server must not start without a credential")

    monkeypatch.setattr(app_module.uvicorn, "run", _no_server)

    with caplog.at_level(logging.CRITICAL, logger="sportscast"):
        with pytest.raises(SystemExit) as excinfo:
            app_module.main()

    assert excinfo.value.code == 1
    assert any(
        r.levelno == logging.CRITICAL and "OPENAI_API_KEY is not defined" in r.getMessage()
        for r in caplog.records
    )
