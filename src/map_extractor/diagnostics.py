"""Reporting of unexpected errors and the optional diagnostic session.

Only the command-line boundary calls :func:`escalate`. It prints where the
failure came from and, when the run was started with ``--shell``, opens an
interactive Python console holding the run's state before the process
exits.
"""

from __future__ import annotations

import code
import os
import sys
import textwrap
import traceback
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import click

from map_extractor.datatypes import RunConfig
from map_extractor.errors import ExitCode, ToolFailedError
from map_extractor.reporting.console import log_error


WIKI_URL = "https://goo.gl/wVUKrK"
SUMMARY_WIDTH = 80

Interact = Callable[..., None]


def error_origin(exc: BaseException) -> Tuple[str, str, int]:
    """Return the failing command and the source file and line it was raised at."""
    if isinstance(exc, ToolFailedError):
        command = exc.command_line
    else:
        command = f"{type(exc).__name__}: {exc}"

    frames = traceback.extract_tb(exc.__traceback__)
    if not frames:
        return command, "<unknown>", 0
    last = frames[-1]
    return command, last.filename, last.lineno or 0


def exit_status(exc: BaseException) -> int:
    if isinstance(exc, ToolFailedError) and exc.returncode:
        # killed by a signal; report it the way a shell would
        if exc.returncode < 0:
            return 128 - exc.returncode
        return exc.returncode
    return int(ExitCode.FAILURE)


def report_unexpected_error(exc: BaseException) -> None:
    command, filename, lineno = error_origin(exc)
    log_error(f"Unexpected error executing {command} at {filename} line {lineno}")
    click.echo(
        "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
        err=True,
        nl=False,
    )


def format_summary(
    config: RunConfig,
    argv: Optional[Sequence[str]] = None,
    cwd: Optional[str] = None,
) -> List[str]:
    """Build the block shown before the diagnostic console starts."""
    argv = sys.argv if argv is None else argv
    cwd = os.getcwd() if cwd is None else cwd

    intro = textwrap.fill(
        "For instructions on map, visual map and movement map creation, please "
        f"see the TrinityCore documentation wiki at {WIKI_URL}.",
        width=SUMMARY_WIDTH,
    )
    rows = [
        ("Input WoW game client:", str(config.input_dir)),
        ("Output map data artifacts:", str(config.output_dir)),
        ("Command line is:", " ".join(argv)),
        ("Tools are in:", cwd),
    ]
    lines = [""] + [click.style(line, fg="cyan") for line in intro.splitlines()] + [""]
    for label, value in rows:
        lines.append(
            "  => " + click.style(f"{label:<27}", fg="red") + click.style(value, bold=True)
        )
    lines += [
        "",
        "Type " + click.style("dir()", fg="red", bold=True) + " to list variables, "
        "or inspect " + click.style("config", fg="red", bold=True) + " and "
        + click.style("error", fg="red", bold=True) + ".",
        "Type " + click.style("exit()", fg="red", bold=True) + " or press "
        + click.style("Control-D", fg="red", bold=True) + " to finish.",
        "",
    ]
    return lines


def drop_to_shell(
    config: RunConfig,
    exc: BaseException,
    interact: Optional[Interact] = None,
) -> None:
    """Print the run summary and start an interactive console on the run's state."""
    for line in format_summary(config):
        click.echo(line, err=True)

    namespace: Dict[str, Any] = {
        "config": config,
        "error": exc,
        "argv": list(sys.argv),
        "cwd": os.getcwd(),
        "environ": dict(os.environ),
    }
    interact = interact or code.interact
    interact(banner="", local=namespace, exitmsg="")


def escalate(
    exc: BaseException,
    config: Optional[RunConfig],
    interact: Optional[Interact] = None,
) -> int:
    """Report an unexpected error and return the status the process should exit with."""
    report_unexpected_error(exc)
    if config is not None and config.shell:
        drop_to_shell(config, exc, interact=interact)
    return exit_status(exc)
