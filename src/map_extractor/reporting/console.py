"""Coloured terminal output for the wrapper."""

from __future__ import annotations

from typing import Mapping

import click

from map_extractor.datatypes import StageResult


def log_error(message: str) -> None:
    click.secho(message, fg="red", bold=True, err=True)


def log_notice(message: str) -> None:
    click.secho(message, fg="yellow", bold=True)


def log_success(message: str) -> None:
    click.secho(message, fg="green", bold=True)


def report_stage_result(
    result: StageResult,
    messages: Mapping[str, str],
    verbose: bool = False,
) -> None:
    """Log a stage classification.

    Args:
        result: Classification produced after the stage's tools returned.
        messages: Text to print keyed by outcome.
        verbose: Also list each observed count against its threshold.
    """
    if result.succeeded:
        log_success(messages["succeeded"])
    else:
        log_notice(messages["uncertain"])

    if verbose:
        for threshold in result.thresholds:
            observed = result.observed_counts.get(threshold.subpath, 0)
            click.echo(f"  {threshold.subpath}: {observed} files (expected >= {threshold.minimum})")
