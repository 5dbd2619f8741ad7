"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from rtasks.config import Settings, get_settings


def test_defaults(monkeypatch):
    for name in ("LOG_LEVEL", "HASH_CHUNK_SIZE", "XML_INDENT", "DEFAULT_ENCODING"):
        monkeypatch.delenv(f"RTASKS_{name}", raising=False)
    s = Settings(_env_file=None)
    assert s.log_level == "WARNING"
    assert s.hash_chunk_size == 65536
    assert s.xml_indent == "  "
    assert s.default_encoding == "utf-8"


def test_env_override(monkeypatch):
    monkeypatch.setenv("RTASKS_LOG_LEVEL", "debug")
    monkeypatch.setenv("RTASKS_HASH_CHUNK_SIZE", "1024")
    s = get_settings()
    assert s.log_level == "DEBUG"
    assert s.hash_chunk_size == 1024


def test_settings_cached():
    assert get_settings() is get_settings()


def test_chunk_size_must_be_positive(monkeypatch):
    monkeypatch.setenv("RTASKS_HASH_CHUNK_SIZE", "0")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
