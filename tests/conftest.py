"""Shared fixtures: isolate the process-wide indentation configuration."""

import pytest

from to_yaml import config, encoder, indentation


def _clear_defaults():
    indentation.default_indenter.cache_clear()
    encoder.default_encoder.cache_clear()


@pytest.fixture
def fresh_config(monkeypatch):
    """Unlocked default configuration, restored after the test."""
    monkeypatch.setattr(config, "_active", config.IndentConfig())
    monkeypatch.setattr(config, "_locked", False)
    _clear_defaults()
    yield
    _clear_defaults()
