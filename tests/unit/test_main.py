"""Unit tests for command-line parsing and StageConfig."""

import pytest

from choreo.core.config import StageConfig
from choreo.main import parse_arguments


class TestStageConfig:
    """Tests for stage configuration validation."""

    def test_defaults(self):
        config = StageConfig()
        assert (config.width, config.height, config.grid_size, config.radius) == (1000, 600, 40, 22)

    @pytest.mark.parametrize("kwargs", [
        {"width": 0},
        {"height": -10},
        {"grid_size": 0},
        {"radius": 0},
        {"radius": 301},
    ])
    def test_rejects_impossible_stage(self, kwargs):
        with pytest.raises(ValueError):
            StageConfig(**kwargs)


class TestParseArguments:
    """Tests for parse_arguments."""

    def test_no_arguments_uses_defaults(self):
        assert parse_arguments([]) == StageConfig()

    def test_custom_stage(self):
        config = parse_arguments(["--width", "800", "--height", "400", "--grid", "20", "--radius", "15"])
        assert config == StageConfig(width=800, height=400, grid_size=20, radius=15)

    def test_invalid_stage_exits(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            parse_arguments(["--width", "-5"])
        assert excinfo.value.code == 1
        assert "Error:" in capsys.readouterr().out
