"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from cmakeplane.config.models import (
    CmakePlaneConfig,
    LogOutputConfig,
    ProjectConfig,
    ServerConfig,
)


class TestLogOutputConfig:
    @pytest.mark.parametrize("destination", ["stderr", "stdout"])
    def test_stream_destinations(self, destination: str) -> None:
        assert LogOutputConfig(destination=destination).destination == destination

    def test_relative_file_rejected(self) -> None:
        with pytest.raises(ValidationError, match="absolute"):
            LogOutputConfig(destination="logs/server.log")

    def test_absolute_file_accepted(self) -> None:
        assert LogOutputConfig(destination="/var/log/x.log").destination == "/var/log/x.log"


class TestServerConfig:
    def test_defaults(self) -> None:
        config = ServerConfig()

        assert config.name == "cmakeplane"
        assert config.transport == "stdio"
        assert config.port == 7655

    @pytest.mark.parametrize("port", [-1, 65536])
    def test_port_range(self, port: int) -> None:
        with pytest.raises(ValidationError, match="Port must be"):
            ServerConfig(port=port)

    def test_unknown_transport_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ServerConfig(transport="websocket")  # type: ignore[arg-type]


class TestProjectConfig:
    def test_values_stripped(self) -> None:
        assert ProjectConfig(build_dir="  out ").build_dir == "out"

    @pytest.mark.parametrize("field", ["build_dir", "cache_file"])
    def test_blank_rejected(self, field: str) -> None:
        with pytest.raises(ValidationError, match="must not be empty"):
            ProjectConfig(**{field: "   "})


class TestCmakePlaneConfig:
    def test_sections_default(self) -> None:
        config = CmakePlaneConfig()

        assert config.logging.level == "INFO"
        assert [o.destination for o in config.logging.outputs] == ["stderr"]
        assert config.project.build_dir == "build"
