"""RuntimeSettings tests."""

import pytest
from pydantic import ValidationError

from variantfilters.config.runtime import RuntimeSettings


def test_defaults(monkeypatch):
    monkeypatch.delenv("VARIANT_FILTERS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("VARIANT_FILTERS_JSON_INDENT", raising=False)
    settings = RuntimeSettings(_env_file=None)
    assert settings.log_level == "INFO"
    assert settings.json_indent == 2


def test_reads_prefixed_env(monkeypatch):
    monkeypatch.setenv("VARIANT_FILTERS_LOG_LEVEL", "debug")
    monkeypatch.setenv("VARIANT_FILTERS_JSON_INDENT", "4")
    settings = RuntimeSettings(_env_file=None)
    assert settings.log_level == "DEBUG"
    assert settings.json_indent == 4


def test_unknown_log_level_rejected(monkeypatch):
    monkeypatch.setenv("VARIANT_FILTERS_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError, match="log_level"):
        RuntimeSettings(_env_file=None)


def test_indent_out_of_range_rejected(monkeypatch):
    monkeypatch.setenv("VARIANT_FILTERS_JSON_INDENT", "12")
    with pytest.raises(ValidationError):
        RuntimeSettings(_env_file=None)
