"""Tests for settings and YAML configuration."""

from pathlib import Path

import pytest

from betterheart.core.config import MessagesConfig, Settings, load_config
from betterheart.core.exceptions import ConfigurationError
from betterheart.core.types import Step
from betterheart.persistence.store import StaticIdentityProvider
from betterheart.session.assessment import AssessmentSession


class TestMessagesConfig:
    """Tests for notice texts."""

    def test_defaults(self):
        messages = MessagesConfig()

        assert messages.validation_failed == "Please fill in all required fields"
        assert messages.save_succeeded == "Assessment saved successfully!"
        assert messages.save_failed == "Failed to save assessment"

    def test_yaml_overrides(self, tmp_path):
        path = tmp_path / "messages.yaml"
        path.write_text("messages:\n  save_failed: Could not save\n")

        messages = MessagesConfig(path)

        assert messages.save_failed == "Could not save"
        assert messages.save_succeeded == "Assessment saved successfully!"

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "messages.yaml"
        path.write_text("")

        assert MessagesConfig(path).validation_failed == "Please fill in all required fields"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            MessagesConfig(tmp_path / "missing.yaml")

    def test_unknown_config_type(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config("thresholds")

        assert exc_info.value.config_key == "thresholds"


class TestSettings:
    """Tests for environment settings."""

    def test_env_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("BETTERHEART_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("BETTERHEART_SAVE_ASSESSMENTS", "false")
        monkeypatch.setenv("BETTERHEART_LOG_LEVEL", "debug")

        settings = Settings()

        assert settings.data_dir == Path(tmp_path).resolve()
        assert settings.save_assessments is False
        assert settings.log_level == "DEBUG"

    def test_assessments_dir_created(self, monkeypatch, tmp_path):
        monkeypatch.setenv("BETTERHEART_DATA_DIR", str(tmp_path))

        path = Settings().assessments_dir

        assert path == Path(tmp_path).resolve() / "assessments"
        assert path.is_dir()

    def test_saving_disabled(self, monkeypatch, identity, recording_store, scenario_a_form):
        monkeypatch.setenv("BETTERHEART_SAVE_ASSESSMENTS", "false")

        with AssessmentSession(
            identity_provider=StaticIdentityProvider(identity),
            store=recording_store,
            settings=Settings(),
        ) as session:
            for field, value in scenario_a_form.items():
                session.set_answer(field, value)
            while session.current_step < Step.RESULTS:
                session.advance()

        assert recording_store.records == []
