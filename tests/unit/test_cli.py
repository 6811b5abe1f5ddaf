"""
Tests for skillmatch.cli: Typer commands against the seeded memory directory.
"""

import json

import pytest
from typer.testing import CliRunner

from skillmatch.cli import app

runner = CliRunner()


class TestMatchesCommand:
    def test_json_output(self):
        result = runner.invoke(app, ["matches", "user-1", "--json"])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert [m["user"]["id"] for m in payload] == ["user-2", "user-3", "user-5", "user-4"]
        assert payload[0]["compatibilityScore"] == 70
        assert all("password" not in m["user"] for m in payload)

    def test_defaults_to_first_demo_user(self):
        result = runner.invoke(app, ["matches", "--json"])

        assert result.exit_code == 0
        assert "user-1" not in [m["user"]["id"] for m in json.loads(result.stdout)]

    def test_min_score_and_top(self):
        result = runner.invoke(app, ["matches", "user-1", "--min-score", "60", "--json"])
        assert [m["user"]["id"] for m in json.loads(result.stdout)] == ["user-2", "user-3"]

        result = runner.invoke(app, ["matches", "user-1", "--top", "1", "--json"])
        assert len(json.loads(result.stdout)) == 1

    def test_top_above_roster_returns_everyone(self):
        result = runner.invoke(app, ["matches", "user-1", "--top", "50", "--json"])
        assert len(json.loads(result.stdout)) == 4

    @pytest.mark.parametrize("top", ["0", "-1"])
    def test_non_positive_top_is_rejected(self, top):
        result = runner.invoke(app, ["matches", "user-1", "--top", top, "--json"])

        assert result.exit_code == 2
        assert not result.stdout.lstrip().startswith("[")

    def test_skill_filter(self):
        result = runner.invoke(app, ["matches", "user-1", "--skill", "ui", "--json"])
        assert [m["user"]["id"] for m in json.loads(result.stdout)] == ["user-3"]

    def test_table_output(self):
        result = runner.invoke(app, ["matches", "user-1"])

        assert result.exit_code == 0
        assert "Priya Patel" in result.stdout
        assert "Skills on offer" in result.stdout

    def test_unknown_user(self):
        result = runner.invoke(app, ["matches", "nobody"])

        assert result.exit_code == 1
        assert "User not found" in result.stdout

    def test_no_results_after_filtering(self):
        result = runner.invoke(app, ["matches", "user-1", "--search", "quantum"])

        assert result.exit_code == 0
        assert "No matches found" in result.stdout


class TestDirectoryCommands:
    def test_list_users(self):
        result = runner.invoke(app, ["list-users"])

        assert result.exit_code == 0
        assert "user-1" in result.stdout
        assert "user-5" in result.stdout

    def test_list_users_rejects_zero_limit(self):
        assert runner.invoke(app, ["list-users", "--limit", "0"]).exit_code == 2

    def test_show_user_hides_password(self):
        result = runner.invoke(app, ["show-user", "user-2"])

        assert result.exit_code == 0
        assert "Priya Patel" in result.stdout
        assert "demo123" not in result.stdout

    def test_show_unknown_user(self):
        result = runner.invoke(app, ["show-user", "nobody"])
        assert result.exit_code == 1

    def test_search(self):
        result = runner.invoke(app, ["search", "design", "--exclude", "user-1"])

        assert result.exit_code == 0
        assert "Sam Okafor" in result.stdout
        assert "Alex Chen" not in result.stdout

    def test_seed_skips_existing_users(self):
        assert "Seeded 0 demo user(s)" in runner.invoke(app, ["seed"]).stdout
        assert "Seeded 5 demo user(s)" in runner.invoke(app, ["seed", "--overwrite"]).stdout

    def test_health_check(self):
        result = runner.invoke(app, ["health-check"])

        assert result.exit_code == 0
        assert "5 users" in result.stdout

    def test_init_db_requires_mongodb(self):
        result = runner.invoke(app, ["init-db"])

        assert result.exit_code == 1
        assert "DIRECTORY_BACKEND=mongodb" in result.stdout


class TestInfoCommands:
    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.stdout

    def test_info(self):
        result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "memory" in result.stdout
