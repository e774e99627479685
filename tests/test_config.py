"""Tests for environment-driven settings and the store factory."""

import importlib
import logging

import dotenv
import pytest

import recordstore
from recordstore import Record, Settings, config, create_store, get_settings, setup_logging


def test_defaults():
    settings = get_settings()
    assert settings.RECORDSTORE_LOG_LEVEL == "INFO"
    assert settings.RECORDSTORE_THREAD_SAFE is True


@pytest.mark.parametrize("raw,expected", [
    ("0", False), ("false", False), ("No", False), (" off ", False),
    ("1", True), ("TRUE", True), ("yes", True), ("on", True),
])
def test_thread_safe_flag_parsing(monkeypatch, raw, expected):
    monkeypatch.setenv("RECORDSTORE_THREAD_SAFE", raw)
    assert Settings().RECORDSTORE_THREAD_SAFE is expected


def test_unknown_thread_safe_value_falls_back_with_warning(monkeypatch, caplog):
    monkeypatch.setenv("RECORDSTORE_THREAD_SAFE", "maybe")
    with caplog.at_level(logging.WARNING, logger="recordstore.config"):
        settings = Settings()
    assert settings.RECORDSTORE_THREAD_SAFE is True
    assert "RECORDSTORE_THREAD_SAFE" in caplog.text


def test_log_level_normalized_and_validated(monkeypatch):
    monkeypatch.setenv("RECORDSTORE_LOG_LEVEL", "debug")
    assert Settings().RECORDSTORE_LOG_LEVEL == "DEBUG"
    monkeypatch.setenv("RECORDSTORE_LOG_LEVEL", "loud")
    assert Settings().RECORDSTORE_LOG_LEVEL == "INFO"


def test_create_store_takes_thread_safe_from_settings(monkeypatch):
    created = []
    monkeypatch.setattr(recordstore, "InMemoryRecordStore", lambda **kw: created.append(kw))
    monkeypatch.setenv("RECORDSTORE_THREAD_SAFE", "0")

    create_store()
    create_store(thread_safe=True)

    assert created == [
        {"key": None, "thread_safe": False},
        {"key": None, "thread_safe": True},
    ]


def test_unlocked_store_from_settings_still_reads_and_writes(monkeypatch):
    monkeypatch.setenv("RECORDSTORE_THREAD_SAFE", "off")
    store = create_store()
    store.set(Record(id="1"))
    assert store.get("1") == Record(id="1")
    assert "1" in store


def test_dotenv_is_loaded_by_get_settings_not_on_import(monkeypatch):
    """Importing the library leaves os.environ alone; .env is read on demand."""
    calls = []
    monkeypatch.setattr(dotenv, "load_dotenv", lambda: calls.append(True))
    try:
        importlib.reload(config)
        assert calls == []

        config.get_settings()
        assert calls == [True]
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_create_store_returns_new_instances():
    assert create_store() is not create_store()


def test_setup_logging_applies_level(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    monkeypatch.setenv("RECORDSTORE_LOG_LEVEL", "WARNING")
    setup_logging()
    assert calls == [{"level": logging.WARNING}]
