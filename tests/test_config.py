from __future__ import annotations

import pytest
from pydantic import ValidationError

from typed_events import EmitterSettings, LoggerOptions


def test_logger_options_defaults() -> None:
    options = LoggerOptions()
    assert options.namespace == "APP"
    assert options.env == []
    assert options.env_var == "APP_ENV"


def test_logger_options_normalise_namespace() -> None:
    assert LoggerOptions(namespace="worker").namespace == "WORKER"
    assert LoggerOptions(namespace="").namespace == "APP"


def test_logger_options_reject_blank_env_var() -> None:
    with pytest.raises(ValidationError):
        LoggerOptions(env_var="  ")


def test_emitter_settings_defaults() -> None:
    assert EmitterSettings().validate_types is False
    assert EmitterSettings(validate_types=True).validate_types is True
