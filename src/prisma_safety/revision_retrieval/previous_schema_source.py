"""Retrieval of schema text from a git revision or an alternate file path."""

from __future__ import annotations

import logging
import os
import re
import shlex
import subprocess
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Captured outcome of one child process."""

    returncode: int
    stdout: str
    stderr: str


CommandRunner = Callable[[tuple[str, ...], Path], CommandResult]


class RevisionLookupError(Exception):
    """Raised when schema text cannot be read from git or decoded from disk."""


def sanitize_revision(revision: str) -> str:
    """Strip every non-word character so the revision cannot smuggle git options."""
    return re.sub(r"\W", "", revision)


def read_schema_at_revision(
    schema_path: Path | str,
    revision: str,
    *,
    cwd: Path | None = None,
    run_command: CommandRunner | None = None,
) -> str:
    """Return the schema text stored at `revision` using `git show`.

    Raises:
      RevisionLookupError: If the revision is empty after sanitizing, git cannot be
        started, git exits non-zero, or git writes anything to stderr.
    """
    command_runner = run_command or _run_captured_command
    working_dir = (cwd or Path.cwd()).resolve()
    safe_revision = sanitize_revision(revision)
    if not safe_revision:
        raise RevisionLookupError(f"Invalid base revision: {revision!r}")

    command = ("git", "show", f"{safe_revision}:{_revision_path(Path(schema_path), working_dir)}")
    logger.debug("Reading previous schema with: %s", shlex.join(command))
    result = command_runner(command, working_dir)
    if result.returncode != 0:
        raise RevisionLookupError(
            f"git show failed with exit code {result.returncode}: {result.stderr.strip()}"
        )
    if result.stderr != "":
        raise RevisionLookupError(f"Unexpected stderr: {result.stderr}")
    return result.stdout


def read_schema_file(schema_path: Path | str) -> str:
    """Return the text of a schema file on disk."""
    path = Path(schema_path)
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise RevisionLookupError(f"Schema file {path} is not valid UTF-8: {exc.reason}") from exc


def _revision_path(schema_path: Path, working_dir: Path) -> str:
    relative = schema_path
    if schema_path.is_absolute():
        relative = Path(os.path.relpath(schema_path, working_dir))
    return f"./{relative.as_posix()}"


def _run_captured_command(command: tuple[str, ...], cwd: Path) -> CommandResult:
    try:
        completed = subprocess.run(
            list(command),
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=False,
        )
    except FileNotFoundError as exc:
        raise RevisionLookupError(f"Command not found: {shlex.join(command)}") from exc
    except UnicodeDecodeError as exc:
        raise RevisionLookupError(
            f"Output of {shlex.join(command)} is not valid UTF-8: {exc.reason}"
        ) from exc
    return CommandResult(
        returncode=completed.returncode,
        stdout=completed.stdout,
        stderr=completed.stderr,
    )
