"""Run external tools on rendered text, each under a deadline.

These calls never touch a live graph; callers pass text taken from a
``Snapshot``.
"""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from ..config import PipeworkConfig

logger = logging.getLogger(__name__)


class CollaboratorError(Exception):
    """Raised when an external tool is missing or fails."""

    def __init__(self, message: str, stderr: str | None = None):
        self.stderr = stderr
        super().__init__(message)


class CollaboratorTimeoutError(CollaboratorError):
    """Raised when an external tool runs past its deadline."""

    def __init__(self, command: str, timeout: float):
        self.command = command
        self.timeout = timeout
        super().__init__(f"{command} did not finish within {timeout:g}s")


def run_tool(
    args: Sequence[str],
    stdin: str | None = None,
    timeout: float = 10.0,
    cwd: Path | str | None = None,
) -> str:
    """Run a command, feeding it stdin and returning its stdout.

    Raises:
        CollaboratorTimeoutError: If the command outlives ``timeout``.
        CollaboratorError: If the command is missing or exits non-zero.
    """
    command = args[0]
    logger.debug(f"Running {' '.join(args)} (timeout {timeout:g}s)")
    try:
        completed = subprocess.run(
            list(args),
            input=stdin,
            capture_output=True,
            text=True,
            encoding="utf-8",
            timeout=timeout,
            cwd=str(cwd) if cwd is not None else None,
        )
    except subprocess.TimeoutExpired as e:
        raise CollaboratorTimeoutError(command, timeout) from e
    except FileNotFoundError as e:
        raise CollaboratorError(f"{command} is not installed or not on PATH") from e

    if completed.returncode != 0:
        raise CollaboratorError(
            f"{command} exited with status {completed.returncode}: "
            f"{completed.stderr.strip()}",
            stderr=completed.stderr,
        )
    return completed.stdout


def format_go(source: str, config: PipeworkConfig | None = None) -> str:
    """Canonicalise Go source with gofmt."""
    config = config or PipeworkConfig()
    return run_tool(config.gofmt, stdin=source, timeout=config.timeout)


def dot_to_svg(dot: str, config: PipeworkConfig | None = None) -> str:
    """Lay out a dot description as SVG."""
    config = config or PipeworkConfig()
    return run_tool(config.dot, stdin=dot, timeout=config.timeout)


def build_package(
    directory: Path | str, binary: str, config: PipeworkConfig | None = None
) -> Path:
    """Run ``go build`` in a directory holding generated main.go.

    Returns:
        Path to the built binary.
    """
    config = config or PipeworkConfig()
    directory = Path(directory)
    run_tool(
        [config.go, "build", "-o", binary, "."],
        timeout=config.timeout,
        cwd=directory,
    )
    logger.info(f"Built {directory / binary}")
    return directory / binary
