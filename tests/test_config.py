"""
Tests for configuration loading.
"""

import pytest

from equify.config import get_config, reload_config


@pytest.fixture
def env(monkeypatch):
    yield monkeypatch
    monkeypatch.undo()
    reload_config()


class TestAppConfig:
    """Test environment-driven settings."""

    def test_defaults(self, env):
        env.delenv("DASHBOARD_WINDOW_DAYS", raising=False)
        env.delenv("INSIGHTS_RECENT_WINDOW_DAYS", raising=False)

        config = reload_config()

        assert config.insights.recent_window_days == 7
        assert config.dashboard.window_days == 7

    def test_dashboard_window_independent_of_insights(self, env):
        env.setenv("DASHBOARD_WINDOW_DAYS", "3")
        env.delenv("INSIGHTS_RECENT_WINDOW_DAYS", raising=False)

        config = reload_config()

        assert config.dashboard.window_days == 3
        assert config.insights.recent_window_days == 7

    def test_insights_window_does_not_move_dashboard(self, env):
        env.setenv("INSIGHTS_RECENT_WINDOW_DAYS", "2")
        env.delenv("DASHBOARD_WINDOW_DAYS", raising=False)

        config = reload_config()

        assert config.insights.recent_window_days == 2
        assert config.dashboard.window_days == 7

    def test_log_level_normalized(self, env):
        env.setenv("LOG_LEVEL", "debug")

        assert reload_config().log_level == "DEBUG"
        assert get_config() is get_config()
