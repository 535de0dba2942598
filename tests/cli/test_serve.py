"""Tests for cmakeplane serve command."""

from unittest.mock import patch

from click.testing import CliRunner

from cmakeplane.cli.main import cli
from tests.conftest import CMakeProject

runner = CliRunner()


class TestServeCommand:
    def test_runs_server_with_project_config(self, configured_project: CMakeProject) -> None:
        with patch("cmakeplane.mcp.server.run_server") as run_server:
            result = runner.invoke(cli, ["serve", str(configured_project.source_dir)])

        assert result.exit_code == 0, result.output
        source_dir, config = run_server.call_args.args
        assert source_dir == configured_project.source_dir
        assert config.server.transport == "stdio"

    def test_transport_options_override_config(self, configured_project: CMakeProject) -> None:
        with patch("cmakeplane.mcp.server.run_server") as run_server:
            result = runner.invoke(
                cli,
                ["serve", str(configured_project.source_dir), "--transport", "http", "--port", "9001"],
            )

        assert result.exit_code == 0, result.output
        config = run_server.call_args.args[1]
        assert config.server.transport == "http"
        assert config.server.port == 9001

    def test_writes_missing_query(self, cmake_project: CMakeProject) -> None:
        with patch("cmakeplane.mcp.server.run_server"):
            result = runner.invoke(cli, ["serve", str(cmake_project.source_dir)])

        assert result.exit_code == 0, result.output
        assert (cmake_project.build_dir / ".cmake" / "api" / "v1" / "query" / "codemodel-v2").exists()

    def test_invalid_port_fails(self, cmake_project: CMakeProject) -> None:
        with patch("cmakeplane.mcp.server.run_server") as run_server:
            result = runner.invoke(cli, ["serve", str(cmake_project.source_dir), "--port", "70000"])

        assert result.exit_code == 1
        assert "Invalid value" in result.output
        run_server.assert_not_called()
