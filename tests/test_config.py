import logging

from hello_di.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("HELLO_DI_LOG_LEVEL", raising=False)
    s = Settings(_env_file=None)
    assert s.log_level == "INFO"
    assert s.get_log_level() == logging.INFO


def test_log_level_from_env(monkeypatch):
    monkeypatch.setenv("HELLO_DI_LOG_LEVEL", "debug")
    assert Settings(_env_file=None).get_log_level() == logging.DEBUG


def test_unknown_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("HELLO_DI_LOG_LEVEL", "chatty")
    assert Settings(_env_file=None).get_log_level() == logging.INFO
