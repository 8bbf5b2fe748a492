"""Tests for the configuration system."""

import pytest
import structlog

from fairshare_core import DEFAULT_SCHEDULE, ConfigurationError, FairShareConfig, configure_logging


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove FAIRSHARE_ variables set outside the test."""
    for name in (
        "FAIRSHARE_ENV",
        "FAIRSHARE_LOG_LEVEL",
        "FAIRSHARE_JSON_LOGS",
        "FAIRSHARE_SCHEDULE_PATH",
        "FAIRSHARE_CLAMP_INCOME",
        "FAIRSHARE_DEFAULT_STATE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def reset_structlog():
    """Restore structlog defaults after a test configures it."""
    yield
    structlog.reset_defaults()


class TestFairShareConfig:
    """Test suite for FairShareConfig."""

    def test_default_values(self):
        """FairShareConfig should have sensible defaults."""
        config = FairShareConfig()

        assert config.env == "development"
        assert config.log_level == "INFO"
        assert config.json_logs is False
        assert config.schedule_path is None
        assert config.clamp_income is True
        assert config.default_state == "AL"

    def test_environment_variables(self, monkeypatch, tmp_path):
        """Values should load from FAIRSHARE_ variables."""
        monkeypatch.setenv("FAIRSHARE_ENV", "production")
        monkeypatch.setenv("FAIRSHARE_LOG_LEVEL", "debug")
        monkeypatch.setenv("FAIRSHARE_CLAMP_INCOME", "false")
        monkeypatch.setenv("FAIRSHARE_SCHEDULE_PATH", str(tmp_path / "al.csv"))

        config = FairShareConfig()

        assert config.is_production
        assert config.is_debug
        assert config.clamp_income is False
        assert config.schedule_path == tmp_path / "al.csv"

    def test_env_validation(self):
        """Unknown environments are rejected."""
        with pytest.raises(ValueError):
            FairShareConfig(env="qa")

    def test_log_level_validation(self):
        """Unknown log levels are rejected."""
        with pytest.raises(ValueError):
            FairShareConfig(log_level="LOUD")

    def test_state_normalized(self):
        """State codes are upper-cased."""
        assert FairShareConfig(default_state=" al ").default_state == "AL"

    def test_state_length(self):
        """State codes have two letters."""
        with pytest.raises(ValueError):
            FairShareConfig(default_state="ALA")


class TestLoadSchedule:
    """Tests for FairShareConfig.load_schedule."""

    def test_bundled_schedule(self):
        """Without a path the bundled schedule is used."""
        schedule = FairShareConfig().load_schedule()

        assert schedule.brackets == DEFAULT_SCHEDULE.brackets
        assert schedule.clamp is True

    def test_clamp_setting(self):
        """clamp_income controls the edge policy."""
        assert FairShareConfig(clamp_income=False).load_schedule().clamp is False

    def test_schedule_file(self, tmp_path):
        """A configured file is loaded."""
        path = tmp_path / "al_2024.csv"
        DEFAULT_SCHEDULE.to_csv(path)

        schedule = FairShareConfig(schedule_path=path).load_schedule()

        assert schedule.version == "al_2024"
        assert schedule.get(11706, 4) == 3467

    def test_missing_schedule_file(self, tmp_path):
        """A missing file raises ConfigurationError."""
        config = FairShareConfig(schedule_path=tmp_path / "missing.csv")

        with pytest.raises(ConfigurationError):
            config.load_schedule()


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_configures_structlog(self, reset_structlog):
        """configure_logging should leave structlog configured."""
        configure_logging(FairShareConfig(log_level="WARNING", json_logs=True))

        assert structlog.is_configured()

    def test_json_logs_written_to_stderr(self, reset_structlog, capsys):
        """JSON log lines go to stderr."""
        configure_logging(FairShareConfig(json_logs=True))

        structlog.get_logger().info("test_event", value=1)

        captured = capsys.readouterr()
        assert captured.out == ""
        assert '"event": "test_event"' in captured.err

    def test_level_filters_events(self, reset_structlog, capsys):
        """Events below the configured level are dropped."""
        configure_logging(FairShareConfig(log_level="ERROR", json_logs=True))

        structlog.get_logger().warning("quiet_event")

        assert "quiet_event" not in capsys.readouterr().err
