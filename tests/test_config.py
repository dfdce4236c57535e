import os
from pathlib import Path

import pytest

from json_classifier.classifier import ConfigurationError
from json_classifier.config import DEFAULT_CLASSIFIER_MODEL, ClassifierSettings, load_env, require_env


def test_settings_read_api_key_and_default_model() -> None:
    settings = ClassifierSettings.from_env({"API_KEY": "key-123"})
    assert settings == ClassifierSettings(api_key="key-123", model=DEFAULT_CLASSIFIER_MODEL)


def test_settings_fall_back_to_gemini_key_and_model_override() -> None:
    settings = ClassifierSettings.from_env({"GEMINI_API_KEY": "gem-456", "CLASSIFIER_MODEL": "gemini-2.5-pro"})
    assert settings.api_key == "gem-456"
    assert settings.model == "gemini-2.5-pro"


@pytest.mark.parametrize("environ", [{}, {"API_KEY": ""}, {"API_KEY": "   ", "GEMINI_API_KEY": ""}])
def test_missing_key_is_a_configuration_error(environ) -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        ClassifierSettings.from_env(environ)
    assert "API_KEY" in excinfo.value.message


def test_require_env_returns_first_non_empty_value() -> None:
    assert require_env("A", "B", environ={"A": "", "B": "second"}) == "second"


def test_load_env_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so teardown removes whatever load_env writes
    monkeypatch.setenv("CLASSIFIER_MODEL", "unset")
    monkeypatch.delenv("CLASSIFIER_MODEL")
    env_file = tmp_path / ".env"
    env_file.write_text("CLASSIFIER_MODEL=gemini-from-dotenv\n")

    assert load_env(env_file) is True
    assert os.environ["CLASSIFIER_MODEL"] == "gemini-from-dotenv"


def test_load_env_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "absent.env"
    assert load_env(missing) is False
    with pytest.raises(FileNotFoundError):
        load_env(missing, required=True)
