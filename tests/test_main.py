"""Unit tests for the CLI entry point.

Tests the main() function including:
- Free-text, structured, JSON and URL output
- Configuration loading with priority (CLI > env > config)
- Alias table validation mode
- Exit code handling for configuration and input errors
"""

import json
import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from jobsearch.config.environment import EnvironmentConfig
from jobsearch.config.models import AppConfig, LoggingConfig
from jobsearch.main import load_runtime_config, main

ENV_VARS = ("LOG_LEVEL", "LOG_FORMAT", "ALIAS_TABLE_PATH", "JOBS_URL", "ENVIRONMENT")


@pytest.fixture(autouse=True)
def isolated_cli(tmp_path, monkeypatch):
    """Run each test in an empty directory with no overrides and restore the root logger."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)

    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def alias_file(tmp_path):
    path = tmp_path / "aliases.yaml"
    path.write_text(
        """
entries:
  - canonical_term: "site reliability engineer"
    surface_forms: ["site reliability engineer", "sre", "ops"]
  - canonical_term: "devops engineer"
    surface_forms: ["devops engineer", "devops", "ops"]
"""
    )
    return path


class TestLoadRuntimeConfig:
    """Test suite for load_runtime_config helper."""

    def test_log_level_priority(self):
        """Test log level priority: CLI > env > config."""
        with patch("jobsearch.main.load_config") as mock_load:
            app_config = AppConfig(logging=LoggingConfig(level="WARNING"))
            env_config = EnvironmentConfig(log_level="INFO")
            mock_load.return_value = (app_config, env_config)

            _, resolved = load_runtime_config(None, "DEBUG")
            assert resolved.log_level == "DEBUG"

            env_config.log_level = "INFO"
            _, resolved = load_runtime_config(None, None)
            assert resolved.log_level == "INFO"

            env_config.log_level = None
            _, resolved = load_runtime_config(None, None)
            assert resolved.log_level == "WARNING"

    def test_log_format_from_config_when_env_unset(self):
        with patch("jobsearch.main.load_config") as mock_load:
            mock_load.return_value = (
                AppConfig(logging=LoggingConfig(format="json")),
                EnvironmentConfig(),
            )

            _, env_config = load_runtime_config(None, None)

            assert env_config.log_format == "json"

    def test_alias_path_priority(self, tmp_path):
        """Test alias table priority: CLI > env > config."""
        cli_path = tmp_path / "cli.yaml"
        env_path = tmp_path / "env.yaml"
        config_path = tmp_path / "config.yaml"

        with patch("jobsearch.main.load_config") as mock_load:
            mock_load.side_effect = lambda _: (
                AppConfig.model_validate({"aliases": {"path": str(config_path)}}),
                EnvironmentConfig(alias_table_path=env_path),
            )

            app_config, _ = load_runtime_config(None, None, cli_path)
            assert app_config.aliases.path == cli_path

            app_config, _ = load_runtime_config(None, None)
            assert app_config.aliases.path == env_path

    def test_jobs_url_from_environment(self):
        with patch("jobsearch.main.load_config") as mock_load:
            mock_load.return_value = (
                AppConfig(),
                EnvironmentConfig(jobs_url="https://jobs.example.com/jobs"),
            )

            app_config, _ = load_runtime_config(None, None)

            assert app_config.search.jobs_url == "https://jobs.example.com/jobs"


class TestMainOutput:
    """Test suite for main() output modes."""

    def test_free_text_prints_canonical_term(self, capsys):
        assert main(["intrn"]) == 0
        assert capsys.readouterr().out == "intern\n"

    def test_structured_query_prints_fields(self, capsys):
        assert main(["Google in Bangalore"]) == 0

        assert capsys.readouterr().out.splitlines() == [
            "pattern: two_field",
            "company: Google",
            "location: Bangalore",
        ]

    def test_json_output(self, capsys):
        assert main(["--json", "intrn"]) == 0

        payload = json.loads(capsys.readouterr().out)
        assert payload["result"] == "intern"
        assert payload["stage"] == "exact"
        assert payload["surface_form"] == "intrn"
        assert payload["truncated"] is False

    def test_json_output_structured(self, capsys):
        assert main(["--json", "SRE at Google in Dublin"]) == 0

        payload = json.loads(capsys.readouterr().out)
        assert payload["stage"] == "three_field"
        assert payload["result"]["company"] == "Google"
        assert "surface_form" not in payload

    def test_url_output(self, capsys):
        assert main(["--url", "intrn", "--location", "Berlin"]) == 0

        assert capsys.readouterr().out.strip() == (
            "http://localhost:3000/jobs?search=intern&location=Berlin"
        )

    def test_url_uses_jobs_url_env(self, capsys, monkeypatch):
        monkeypatch.setenv("JOBS_URL", "https://jobs.example.com/jobs")

        assert main(["--url", "intrn"]) == 0

        assert capsys.readouterr().out.strip() == "https://jobs.example.com/jobs?search=intern"

    def test_custom_alias_table(self, capsys, alias_file):
        assert main(["--aliases", str(alias_file), "SRE"]) == 0
        assert capsys.readouterr().out == "site reliability engineer\n"

    def test_logs_go_to_stderr(self, capsys):
        assert main(["--log-level", "INFO", "intrn"]) == 0

        captured = capsys.readouterr()
        assert captured.out == "intern\n"
        assert "search.query.canonicalized" in captured.err


class TestValidateAliases:
    """Test suite for --validate-aliases."""

    def test_reports_shared_forms(self, capsys, alias_file):
        assert main(["--validate-aliases", str(alias_file)]) == 0

        output = capsys.readouterr().out
        assert "Alias table OK" in output
        assert "2 entries" in output
        assert (
            "warning: Surface form 'ops' resolves to 'site reliability engineer' "
            "and is shadowed for: devops engineer"
        ) in output

    def test_invalid_table(self, capsys, tmp_path):
        bad_file = tmp_path / "bad.yaml"
        bad_file.write_text('entries:\n  - canonical_term: "sre"\n    surface_forms: ["ops"]\n')

        assert main(["--validate-aliases", str(bad_file)]) == 1
        assert "Alias table validation failed" in capsys.readouterr().err


class TestMainErrors:
    """Test suite for main() exit codes on errors."""

    def test_missing_query(self, capsys):
        assert main([]) == 1
        assert "Search query must not be empty" in capsys.readouterr().err

    def test_url_without_query_or_location(self, capsys):
        assert main(["--url"]) == 1
        assert "Provide a search query or a location" in capsys.readouterr().err

    def test_missing_config_file(self, capsys, tmp_path):
        assert main(["--config", str(tmp_path / "missing.yaml"), "intrn"]) == 1
        assert "Configuration Error" in capsys.readouterr().err

    def test_invalid_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "xml")

        assert main(["intrn"]) == 1
        assert "Invalid LOG_FORMAT" in capsys.readouterr().err

    def test_unexpected_error(self, capsys):
        with patch(
            "jobsearch.main.SearchQueryNormalizer.from_config",
            side_effect=RuntimeError("boom"),
        ):
            assert main(["intrn"]) == 1

        assert "Fatal error: boom" in capsys.readouterr().err
