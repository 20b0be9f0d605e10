"""Unit tests for Settings validation and the logging setup."""
import pytest
import structlog
from pydantic import ValidationError

from faithprofile.config import Settings, get_settings
from faithprofile.logging_config import configure_logging


class TestSettings:
    """Defaults, environment overrides and validators."""

    def test_defaults(self, settings):
        assert settings.MATCH_DECAY_RATE == 0.5
        assert settings.SECONDARY_MATCH_THRESHOLD == 15.0
        assert settings.RECALIBRATION_THRESHOLD == 500
        assert settings.TIE_BREAK_POLICY == "catalog_order"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("MATCH_DECAY_RATE", "0.8")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        settings = Settings(_env_file=None)
        assert settings.MATCH_DECAY_RATE == 0.8
        assert settings.LOG_LEVEL == "DEBUG"

    def test_rejects_non_positive_stddev(self, settings):
        params = {k: dict(v) for k, v in settings.POPULATION_PARAMS.items()}
        params["ai_openness"]["stddev"] = 0.0
        with pytest.raises(ValidationError):
            Settings(_env_file=None, POPULATION_PARAMS=params)

    def test_rejects_sensitivity_above_one(self, settings):
        sensitivity = dict(settings.BIAS_SENSITIVITY, religiosity=1.5)
        with pytest.raises(ValidationError):
            Settings(_env_file=None, BIAS_SENSITIVITY=sensitivity)

    def test_rejects_non_positive_decay(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, MATCH_DECAY_RATE=0.0)

    def test_rejects_threshold_outside_percentage(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, SECONDARY_MATCH_THRESHOLD=120.0)

    def test_rejects_unknown_tie_break(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, TIE_BREAK_POLICY="random")

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()


class TestLogging:
    """structlog configuration."""

    def test_configure_logging_accepts_unknown_level(self):
        configure_logging("verbose")
        assert structlog.is_configured()

    def test_configure_logging_json(self, capsys):
        configure_logging("DEBUG")
        structlog.get_logger("faithprofile.test").info("test.event", answer=42)
        out = capsys.readouterr().out
        assert '"event": "test.event"' in out
        assert '"answer": 42' in out
