"""Tests for [tool.pipework] configuration."""

import pytest

from pipework.config import ConfigError, PipeworkConfig, find_pyproject_toml, load_config


def write_pyproject(tmp_path, text):
    path = tmp_path / "pyproject.toml"
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadConfig:
    def test_defaults_without_section(self, tmp_path):
        path = write_pyproject(tmp_path, '[project]\nname = "x"\n')

        config = load_config(path)

        assert config == PipeworkConfig()
        assert config.project_root == tmp_path

    def test_full_section(self, tmp_path):
        path = write_pyproject(
            tmp_path,
            '[tool.pipework]\ngofmt = ["gofmt", "-s"]\ndot = "dot"\ngo = "go1.22"\ntimeout = 5\n',
        )

        config = load_config(path)

        assert config.gofmt == ("gofmt", "-s")
        assert config.dot == ("dot",)
        assert config.go == "go1.22"
        assert config.timeout == 5.0

    def test_unknown_key(self, tmp_path):
        path = write_pyproject(tmp_path, "[tool.pipework]\ngofmpt = 'gofmt'\n")

        with pytest.raises(ConfigError, match="gofmpt"):
            load_config(path)

    @pytest.mark.parametrize("value", ["0", "-1", "true", "'soon'"])
    def test_bad_timeout(self, tmp_path, value):
        path = write_pyproject(tmp_path, f"[tool.pipework]\ntimeout = {value}\n")

        with pytest.raises(ConfigError, match="timeout"):
            load_config(path)

    def test_bad_command(self, tmp_path):
        path = write_pyproject(tmp_path, "[tool.pipework]\ngofmt = []\n")

        with pytest.raises(ConfigError, match="gofmt"):
            load_config(path)

    def test_invalid_toml(self, tmp_path):
        path = write_pyproject(tmp_path, "[tool.pipework\n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(path)


def test_find_pyproject_walks_up(tmp_path):
    path = write_pyproject(tmp_path, "")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert find_pyproject_toml(nested) == path.resolve()
