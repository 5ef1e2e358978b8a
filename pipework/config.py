"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path


class ConfigError(Exception):
    """Error in pipework configuration."""


@dataclass(slots=True, frozen=True)
class PipeworkConfig:
    """Commands and deadline for the external tools.

    Loaded from the ``[tool.pipework]`` table of pyproject.toml.
    """

    gofmt: tuple[str, ...] = ("gofmt",)
    dot: tuple[str, ...] = ("dot", "-Tsvg")
    go: str = "go"
    timeout: float = 10.0
    project_root: Path | None = field(default=None, compare=False)


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Return the nearest pyproject.toml in start_dir (default: cwd) or above it."""
    start = (start_dir or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def _parse_command(key: str, value: object) -> tuple[str, ...]:
    if isinstance(value, str):
        value = [value]
    if (
        not isinstance(value, list)
        or not value
        or not all(isinstance(part, str) and part for part in value)
    ):
        msg = f"Invalid [tool.pipework].{key}: expected a command string or list of strings"
        raise ConfigError(msg)
    return tuple(value)


def load_config(pyproject_path: Path) -> PipeworkConfig:
    """Load and validate [tool.pipework] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed PipeworkConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("pipework", {})
    if not section:
        return PipeworkConfig(project_root=project_root)

    unknown = set(section) - {"gofmt", "dot", "go", "timeout"}
    if unknown:
        msg = "Unknown [tool.pipework] key(s): " + ", ".join(sorted(unknown))
        raise ConfigError(msg)

    defaults = PipeworkConfig()
    gofmt = _parse_command("gofmt", section["gofmt"]) if "gofmt" in section else defaults.gofmt
    dot = _parse_command("dot", section["dot"]) if "dot" in section else defaults.dot

    go = section.get("go", defaults.go)
    if not isinstance(go, str) or not go:
        msg = "Invalid [tool.pipework].go: expected a command string"
        raise ConfigError(msg)

    timeout = section.get("timeout", defaults.timeout)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        msg = "Invalid [tool.pipework].timeout: expected a positive number of seconds"
        raise ConfigError(msg)

    return PipeworkConfig(
        gofmt=gofmt,
        dot=dot,
        go=go,
        timeout=float(timeout),
        project_root=project_root,
    )


def get_config() -> PipeworkConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        PipeworkConfig (defaults if no pyproject.toml or no [tool.pipework] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return PipeworkConfig()
    return load_config(pyproject_path)
