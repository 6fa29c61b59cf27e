"""Helpers for running external commands."""

import shlex
import subprocess
from pathlib import Path
from typing import Any

import structlog
import typer

from flutter_deps_manager.exceptions import ExternalCommandError, MissingToolError

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def run_visibly(command: list[str], cwd: Path) -> None:
    """Run a command that mutates the project, echoing it first.

    Output goes straight to the terminal so the operator can follow along.

    Raises:
        ExternalCommandError: If the command exits with a non-zero status.
    """
    typer.echo(f"+ {shlex.join(command)}")
    logger.debug("Running command", command=command, cwd=str(cwd))
    result = _run(command, cwd=cwd)
    if result.returncode != 0:
        raise ExternalCommandError(command, result.returncode)


def run_captured(command: list[str], cwd: Path, allowed_returncodes: tuple[int, ...] = (0,)) -> subprocess.CompletedProcess[str]:
    """Run a command quietly and capture its output.

    Args:
        command: The command and its arguments.
        cwd: Directory to run the command in.
        allowed_returncodes: Exit statuses that are not treated as failures.

    Returns:
        subprocess.CompletedProcess: The finished process, with text stdout and stderr.

    Raises:
        ExternalCommandError: If the command exits with a status not in allowed_returncodes.
    """
    logger.debug("Running command", command=command, cwd=str(cwd))
    result = _run(command, cwd=cwd, capture_output=True, text=True)
    if result.returncode not in allowed_returncodes:
        logger.error("Command failed", command=command, returncode=result.returncode, stderr=result.stderr)
        raise ExternalCommandError(command, result.returncode, result.stderr)
    return result


def _run(command: list[str], **kwargs: Any) -> subprocess.CompletedProcess[Any]:
    try:
        return subprocess.run(command, **kwargs)
    except FileNotFoundError as exc:
        raise MissingToolError(command[0], "Install it, or point the matching *_COMMAND setting at it.") from exc
