"""Command-line interface for the map extraction wrapper.

This module provides the ``map-extractor`` entry point, which drives the
TrinityCore map, vmap and mmap tools against a World of Warcraft client.
"""

import os
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import click

from map_extractor import __version__
from map_extractor.config import (
    DEFAULT_INPUT_DIR,
    DEFAULT_OUTPUT_DIR,
    format_config,
    parse_config,
)
from map_extractor.diagnostics import escalate
from map_extractor.errors import ExitCode, PreconditionError
from map_extractor.passthrough import delegate, is_executable_file
from map_extractor.pipeline import run_pipeline
from map_extractor.preflight import validate_input_dir
from map_extractor.reporting.console import log_error, log_notice


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

FOOTER = (
    "All maps, visual maps (vmaps) and movement maps (mmaps) will be extracted "
    "and generated by default. Explicitly specifying any of --maps, --vmaps or "
    "--mmaps overrides the default and extracts only those options."
)


@click.command(context_settings=CONTEXT_SETTINGS, epilog=FOOTER)
@click.version_option(__version__, "--version", prog_name="map-extractor")
@click.option('-o', '--output', type=click.Path(file_okay=False, path_type=Path),
              default=DEFAULT_OUTPUT_DIR, show_default=True,
              help='Output directory for finished map data artifacts')
@click.option('-i', '--input', 'input_dir', type=click.Path(file_okay=False, path_type=Path),
              default=DEFAULT_INPUT_DIR, show_default=True,
              help='Input directory containing WoW game client (and Data sub-directory)')
@click.option('-m', '--maps', is_flag=True, help='Extract maps (dbc, maps) from game client')
@click.option('-V', '--vmaps', is_flag=True, help='Extract visual maps (vmaps) from game client')
@click.option('-M', '--mmaps', is_flag=True, help='Generate movement maps (mmaps) from game client')
@click.option('-s', '--shell', is_flag=True, help='Drop to an interactive shell on errors')
@click.option('-v', '--verbose', is_flag=True, help='Print more verbose debugging output')
def main(
    output: Path,
    input_dir: Path,
    maps: bool,
    vmaps: bool,
    mmaps: bool,
    shell: bool,
    verbose: bool,
):
    """TrinityCore map extraction tools wrapper.

    Extract maps and DBC files, visual maps and movement maps from a World
    of Warcraft game client.
    """
    config_dict = {
        'input': input_dir, 'output': output,
        'maps': maps, 'vmaps': vmaps, 'mmaps': mmaps,
        'shell': shell, 'verbose': verbose,
    }

    try:
        cfg = parse_config(config_dict, environ=os.environ)
    except ValueError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(ExitCode.FAILURE)

    try:
        if cfg.verbose:
            for line in format_config(cfg):
                click.echo(line)

        try:
            validate_input_dir(cfg.input_dir)
        except PreconditionError as e:
            log_error(str(e))
            if e.hint:
                log_notice(e.hint)
            sys.exit(ExitCode.FAILURE)

        run_pipeline(cfg)
    except Exception as exc:
        sys.exit(escalate(exc, cfg))


def entrypoint(argv: Optional[Sequence[str]] = None) -> None:
    """Console script entry point.

    If the first argument is an executable file it is run with the remaining
    arguments and its exit status is returned; no options are parsed.
    """
    args: List[str] = list(sys.argv[1:] if argv is None else argv)
    if args and is_executable_file(args[0]):
        sys.exit(delegate(args[0], args[1:]))
    main(args=args, prog_name="map-extractor")


if __name__ == '__main__':
    entrypoint()
