"""Unit tests for the 'appconfigr vars' command."""

from pathlib import Path
from typing import Any

from click.testing import CliRunner

from appconfigr.cli.main import main


class TestVarsCommand:
    """Tests for listing placeholders and their resolution status."""

    def test_all_resolved(
        self, cli_runner: CliRunner, config_file: Path, monkeypatch: Any
    ) -> None:
        """Test listing when every variable resolves."""
        monkeypatch.setenv("APP_PORT", "8080")
        result = cli_runner.invoke(
            main, ["vars", str(config_file), "-D", "greeting=hello"]
        )
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines == ["ok  greeting", "ok  APP_PORT"]

    def test_show_values(
        self, cli_runner: CliRunner, config_file: Path, monkeypatch: Any
    ) -> None:
        """Test that --show-values prints resolved values."""
        monkeypatch.setenv("APP_PORT", "8080")
        result = cli_runner.invoke(
            main, ["vars", str(config_file), "-D", "greeting=hello", "--show-values"]
        )
        assert result.exit_code == 0, result.output
        assert "ok  greeting  hello" in result.output
        assert "ok  APP_PORT  8080" in result.output

    def test_missing_variable_exits_1(
        self, cli_runner: CliRunner, config_file: Path, monkeypatch: Any
    ) -> None:
        """Test that unresolved variables are listed with their diagnostic."""
        monkeypatch.delenv("APP_PORT", raising=False)
        result = cli_runner.invoke(
            main, ["vars", str(config_file), "-D", "greeting=hello"]
        )
        assert result.exit_code == 1
        assert "missing  APP_PORT  [APP_PORT] can not be resolved" in result.output
        assert "1 of 2 variable(s) unresolved" in result.output

    def test_duplicates_listed_once(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that repeated placeholders appear once."""
        path = tmp_path / "dup.conf"
        path.write_text("a: ${app.name}\nb: ${app.name}\n")
        result = cli_runner.invoke(main, ["vars", str(path), "-D", "app.name=x"])
        assert result.exit_code == 0, result.output
        assert result.output.count("app.name") == 1

    def test_no_placeholders(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test a file without variables."""
        path = tmp_path / "plain.conf"
        path.write_text("a: 1\n")
        result = cli_runner.invoke(main, ["vars", str(path)])
        assert result.exit_code == 0
        assert "No placeholders found" in result.output

    def test_missing_directory(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test a --dir that does not exist."""
        result = cli_runner.invoke(
            main, ["vars", "app.conf", "--dir", str(tmp_path / "nope")]
        )
        assert result.exit_code == 2
        assert "Configuration Error" in result.output

    def test_invalid_utf8_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that an undecodable file is reported without a traceback."""
        path = tmp_path / "binary.conf"
        path.write_bytes(b"${A}: \xff\n")
        result = cli_runner.invoke(main, ["vars", str(path)])
        assert result.exit_code == 2
        assert "Configuration Error: cannot read binary.conf" in result.output
