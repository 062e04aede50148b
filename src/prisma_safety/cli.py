"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import click

from prisma_safety.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from prisma_safety.run_execution import (
    SafetyCheckError,
    SafetyCheckRequest,
    execute_schema_safety_check,
)
from prisma_safety.safety_evaluation import render_safety_issues

UNSAFE_CHANGE_EXIT_CODE = 1
SETUP_FAILURE_EXIT_CODE = 2

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="prisma-safety")
def cli() -> None:
    """A safe migration checker for Prisma schema files."""


@cli.command(name="check")
@click.argument("base_revision", required=False)
@click.option(
    "-s",
    "--schema",
    "schema_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the Prisma schema file (overrides project configuration).",
)
@click.option(
    "--previous-schema",
    "previous_schema_path",
    required=False,
    type=click.Path(path_type=str),
    help="Compare against this schema file instead of a git revision.",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help=f"Project configuration file (default: search for {DEFAULT_CONFIG_FILENAME}).",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log resolution details.")
def check(
    base_revision: str | None,
    schema_path: str | None,
    previous_schema_path: str | None,
    config_path: str | None,
    verbose: bool,
) -> None:
    """Fail when columns or tables were removed without being ignored first.

    BASE_REVISION is the git commit to diff the current schema against.
    """
    try:
        with _verbose_logging(verbose):
            outcome = execute_schema_safety_check(
                SafetyCheckRequest(
                    base_revision=base_revision,
                    previous_schema_path=previous_schema_path,
                    schema_path=schema_path,
                    config_path=config_path,
                )
            )
    except SafetyCheckError as exc:
        raise CliError(str(exc)) from exc

    if not outcome.is_safe:
        click.echo(render_safety_issues(outcome.issues), err=True)
        click.get_current_context().exit(UNSAFE_CHANGE_EXIT_CODE)
    click.echo(f"No unsafe changes detected in {outcome.schema_location.path}")


@cli.command(name="init-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML project configuration to write",
)
def init_config(output_path: str) -> None:
    """Generate a project configuration file with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


class _ClickEchoHandler(logging.Handler):
    """Write log records to stderr through click so runners can capture them."""

    def emit(self, record: logging.LogRecord) -> None:
        click.echo(self.format(record), err=True)


@contextmanager
def _verbose_logging(verbose: bool) -> Iterator[None]:
    """Route package debug logs to stderr for the duration of one command."""
    if not verbose:
        yield
        return
    package_logger = logging.getLogger("prisma_safety")
    previous_level = package_logger.level
    handler = _ClickEchoHandler()
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    package_logger.setLevel(logging.DEBUG)
    package_logger.addHandler(handler)
    try:
        yield
    finally:
        package_logger.removeHandler(handler)
        package_logger.setLevel(previous_level)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        result = cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return SETUP_FAILURE_EXIT_CODE
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return SETUP_FAILURE_EXIT_CODE
    except Exception as exc:  # pylint: disable=broad-exception-caught
        click.echo(f"Unexpected error: {exc!r}", err=True)
        return SETUP_FAILURE_EXIT_CODE
    return result if isinstance(result, int) else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
