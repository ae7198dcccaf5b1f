"""
Tests for environment-driven settings.
"""
import logging

import pytest

from query_builder import SelectQuery, config
from query_builder.config import (
    Settings,
    configure_logging,
    get_settings,
    load_settings,
    reset_settings,
)

pytestmark = pytest.mark.config


class TestLoadSettings:
    """Test reading settings from the environment."""

    def test_defaults(self):
        s = load_settings(dotenv=False)
        assert s == Settings()
        assert s.strict_identifiers is True
        assert s.max_limit is None

    def test_env_values(self, monkeypatch):
        monkeypatch.setenv("QUERY_BUILDER_STRICT_IDENTIFIERS", "off")
        monkeypatch.setenv("QUERY_BUILDER_MAX_LIMIT", "500")
        monkeypatch.setenv("QUERY_BUILDER_LOG_LEVEL", "debug")
        s = load_settings(dotenv=False)
        assert s.strict_identifiers is False
        assert s.max_limit == 500
        assert s.log_level == "DEBUG"

    @pytest.mark.parametrize("raw", ["abc", "-1"])
    def test_bad_max_limit(self, monkeypatch, raw):
        monkeypatch.setenv("QUERY_BUILDER_MAX_LIMIT", raw)
        with pytest.raises(ValueError):
            load_settings(dotenv=False)

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("QUERY_BUILDER_MAX_LIMIT=25\nQUERY_BUILDER_STRICT_IDENTIFIERS=0\n")
        s = load_settings(env_file=env_file)
        assert s.max_limit == 25
        assert s.strict_identifiers is False

    def test_environment_beats_env_file(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("QUERY_BUILDER_MAX_LIMIT=25\n")
        monkeypatch.setenv("QUERY_BUILDER_MAX_LIMIT", "40")
        assert load_settings(env_file=env_file).max_limit == 40

    def test_env_file_found_from_cwd(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("QUERY_BUILDER_MAX_LIMIT=9\n")
        monkeypatch.chdir(tmp_path)
        assert load_settings().max_limit == 9


class TestSettingsCache:
    """Test the cached settings used by builders."""

    def test_reset_rereads_environment(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("QUERY_BUILDER_MAX_LIMIT", "10")
        reset_settings()
        assert config._settings is None
        assert get_settings().max_limit == 10
        assert get_settings() is get_settings()

    def test_builders_use_cached_settings(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("QUERY_BUILDER_MAX_LIMIT", "10")
        reset_settings()
        q = SelectQuery.select(["user"]).from_("users").limit(50)
        assert q.as_string() == "SELECT user FROM users LIMIT 10"


class TestConfigureLogging:
    """Test applying the configured log level."""

    def test_sets_package_level(self):
        logger = logging.getLogger("query_builder")
        previous = logger.level
        try:
            configure_logging(Settings(log_level="DEBUG"))
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(previous)

    def test_no_level_leaves_logger_alone(self):
        logger = logging.getLogger("query_builder")
        previous = logger.level
        configure_logging(Settings())
        assert logger.level == previous

    def test_clamp_is_logged(self, capped_settings, caplog):
        q = SelectQuery.select(["user"], settings=capped_settings).from_("users")
        with caplog.at_level(logging.WARNING, logger="query_builder"):
            q.limit(1000)
        assert "clamped" in caplog.text
