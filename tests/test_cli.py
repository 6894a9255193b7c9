"""Tests for CLI commands."""

from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner
from tinywiki.cli import cli
from tinywiki.store import StoreError


class TestServeCommand:
    """Tests for the serve command."""

    def test__config_file__passed_to_server(self, tmp_path: Path) -> None:
        config_file = tmp_path / "tinywiki.toml"
        config_file.write_text('[server]\nport = 9000\n\n[store]\nbackend = "file"')

        runner = CliRunner()
        with patch("tinywiki.server.run_server") as run_server:
            result = runner.invoke(cli, ["serve", "-c", str(config_file)])

        assert result.exit_code == 0
        config = run_server.call_args.args[0]
        assert config.server.port == 9000
        assert config.server.ephemeral is False
        assert config.store.backend == "file"
        assert "Starting server on 0.0.0.0:9000" in result.output
        assert f"File store: {tmp_path / 'data'}" in result.output

    def test__addr_flag__enables_ephemeral_mode(self, tmp_path: Path) -> None:
        config_file = tmp_path / "tinywiki.toml"
        config_file.write_text("")

        runner = CliRunner()
        with patch("tinywiki.server.run_server") as run_server:
            result = runner.invoke(cli, ["serve", "-c", str(config_file), "--addr"])

        assert result.exit_code == 0
        config = run_server.call_args.args[0]
        assert config.server.ephemeral is True
        assert "final-port.txt" in result.output

    def test__overrides__applied(self, tmp_path: Path) -> None:
        config_file = tmp_path / "tinywiki.toml"
        config_file.write_text("")

        runner = CliRunner()
        with patch("tinywiki.server.run_server") as run_server:
            result = runner.invoke(
                cli,
                [
                    "serve",
                    "-c",
                    str(config_file),
                    "--port",
                    "8181",
                    "--backend",
                    "sqlite",
                    "--database",
                    str(tmp_path / "other.db"),
                ],
            )

        assert result.exit_code == 0
        config = run_server.call_args.args[0]
        assert config.server.port == 8181
        assert config.store.database == tmp_path / "other.db"

    def test__startup_failure__exits_with_error(self, tmp_path: Path) -> None:
        config_file = tmp_path / "tinywiki.toml"
        config_file.write_text("")

        runner = CliRunner()
        with patch(
            "tinywiki.server.run_server",
            side_effect=StoreError("cannot initialize wiki.db"),
        ):
            result = runner.invoke(cli, ["serve", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "Error: cannot initialize wiki.db" in result.output

    def test__invalid_config__exits_with_error(self, tmp_path: Path) -> None:
        config_file = tmp_path / "tinywiki.toml"
        config_file.write_text('[store]\nbackend = "redis"')

        runner = CliRunner()
        result = runner.invoke(cli, ["serve", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "store.backend must be one of" in result.output

    def test__missing_config__fails(self, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["serve", "--config", str(tmp_path / "nonexistent.toml")],
        )

        assert result.exit_code != 0

    def test__unknown_backend_option__fails(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["serve", "--backend", "redis"])

        assert result.exit_code == 2
