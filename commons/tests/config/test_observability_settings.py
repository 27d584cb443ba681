from __future__ import annotations

import pytest
from pydantic import ValidationError

from pressf_commons.config.observability import ObservabilitySettings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)

    settings = ObservabilitySettings()

    assert settings.log_level == "INFO"
    assert settings.log_format == "auto"


def test_level_is_normalised_and_format_is_read(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", " warning ")
    monkeypatch.setenv("LOG_FORMAT", "json")

    settings = ObservabilitySettings()

    assert settings.log_level == "WARNING"
    assert settings.log_format == "json"


def test_unknown_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError):
        ObservabilitySettings()
