"""
Tests for equifyctl.
"""

import json
from datetime import datetime, timedelta, timezone

import pytest

from equify.cli.equifyctl import main
from equify.config import reload_config

from .conftest import favor_dict


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestInsightsCommand:
    """Test equifyctl insights."""

    def test_prints_response(self, tmp_path, capsys):
        when = datetime.now(timezone.utc) - timedelta(days=1)
        request = write_json(
            tmp_path / "request.json",
            {
                "userId": "user-1",
                "relationships": [{"id": "alex", "name": "Alex", "importance_level": 3}],
                "favors": [
                    favor_dict("alex", "given", when),
                    favor_dict("alex", "received", when),
                ],
            },
        )

        exit_code = main(["insights", request])

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["success"] is True
        assert output["overallHealthScore"] == 70

    def test_failure_exit_code(self, tmp_path, capsys):
        request = write_json(tmp_path / "request.json", {"userId": "user-1"})

        exit_code = main(["insights", request])

        assert exit_code == 1
        output = json.loads(capsys.readouterr().out)
        assert output["success"] is False
        assert output["insights"] == []

    def test_missing_file(self, tmp_path):
        assert main(["insights", str(tmp_path / "missing.json")]) == 1


class TestStatsCommand:
    """Test equifyctl stats."""

    def test_prints_stats(self, tmp_path, capsys):
        snapshot = write_json(
            tmp_path / "snapshot.json",
            {
                "relationships": [{"id": "alex", "name": "Alex"}],
                "favors": [],
                "activity": [],
            },
        )

        exit_code = main(["stats", snapshot])

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["totalRelationships"] == 1
        assert output["weeklyGrowth"] == 0

    def test_invalid_snapshot(self, tmp_path):
        snapshot = write_json(tmp_path / "snapshot.json", {"relationships": [{"id": 1}]})

        assert main(["stats", snapshot]) == 1


class TestVersionCommand:
    """Test equifyctl version."""

    def test_version(self, capsys):
        assert main(["version"]) == 0
        assert "equifyctl version" in capsys.readouterr().out

    def test_no_command(self, capsys):
        assert main([]) == 0


class TestStatsWindow:
    """Test the dashboard week length used by equifyctl stats."""

    @pytest.fixture
    def snapshot(self, tmp_path):
        now = datetime.now(timezone.utc)
        return write_json(
            tmp_path / "snapshot.json",
            {
                "relationships": [],
                "favors": [],
                "activity": [
                    {"id": "a1", "created_at": (now - timedelta(days=1)).isoformat()},
                    {"id": "a2", "created_at": (now - timedelta(days=5)).isoformat()},
                ],
            },
        )

    @pytest.fixture
    def env(self, monkeypatch):
        yield monkeypatch
        monkeypatch.undo()
        reload_config()

    def test_uses_dashboard_window(self, env, snapshot, capsys):
        env.setenv("DASHBOARD_WINDOW_DAYS", "3")
        env.delenv("INSIGHTS_RECENT_WINDOW_DAYS", raising=False)
        reload_config()

        assert main(["stats", snapshot]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["recentActivity"] == 1
        assert output["weeklyGrowth"] == 0

    def test_ignores_insights_window(self, env, snapshot, capsys):
        env.setenv("INSIGHTS_RECENT_WINDOW_DAYS", "2")
        env.delenv("DASHBOARD_WINDOW_DAYS", raising=False)
        reload_config()

        assert main(["stats", snapshot]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["recentActivity"] == 2
