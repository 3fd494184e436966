"""Configuration utilities for the map extraction wrapper.

This module turns parsed command-line options into a validated,
immutable :class:`RunConfig`.
"""

from __future__ import annotations

import os
import shlex
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from map_extractor.datatypes import RunConfig, StageSelection


DEFAULT_INPUT_DIR = Path("/World_of_Warcraft")
DEFAULT_OUTPUT_DIR = Path("/artifacts")
DEBUG_ENV_VAR = "DEBUG"


def is_directory(path: Optional[Any]) -> bool:
    """Return True if ``path`` names an existing directory."""
    if path is None or str(path) == "":
        return False
    return Path(path).is_dir()


def select_stages(maps: bool, vmaps: bool, mmaps: bool) -> StageSelection:
    """Resolve the stage toggles.

    Asking for no stage at all means "do everything"; otherwise exactly the
    requested stages run.
    """
    if not (maps or vmaps or mmaps):
        return StageSelection(maps=True, vmaps=True, mmaps=True)
    return StageSelection(maps=bool(maps), vmaps=bool(vmaps), mmaps=bool(mmaps))


def parse_config(
    args: Dict[str, Any],
    environ: Optional[Mapping[str, str]] = None,
) -> RunConfig:
    """Parse command-line arguments into a RunConfig.

    Args:
        args: Dictionary of command-line arguments.
        environ: Environment used to look up the debug signal. Defaults to
            ``os.environ``.

    Returns:
        Validated RunConfig instance.

    Raises:
        ValueError: If a directory option is missing or does not exist.
    """
    environ = os.environ if environ is None else environ

    for param in ("input", "output"):
        if param not in args or args[param] is None:
            raise ValueError(f"Required parameter '{param}' is missing")

    if not is_directory(args["output"]):
        raise ValueError(
            f"Output directory '{args['output']}' does not exist or is not a directory"
        )
    if not is_directory(args["input"]):
        raise ValueError(
            f"Input directory '{args['input']}' does not exist or is not a directory"
        )

    stages = select_stages(
        bool(args.get("maps")),
        bool(args.get("vmaps")),
        bool(args.get("mmaps")),
    )

    return RunConfig(
        # Tools run from inside output_dir, so relative paths are anchored now
        input_dir=Path(args["input"]).absolute(),
        output_dir=Path(args["output"]).absolute(),
        stages=stages,
        verbose=bool(args.get("verbose")) or bool(environ.get(DEBUG_ENV_VAR)),
        shell=bool(args.get("shell")),
    )


def format_config(config: RunConfig) -> List[str]:
    """Render the resolved configuration as ``key=value`` lines."""
    values = {
        "input": str(config.input_dir),
        "output": str(config.output_dir),
        "maps": config.stages.maps,
        "vmaps": config.stages.vmaps,
        "mmaps": config.stages.mmaps,
        "shell": config.shell,
        "verbose": config.verbose,
    }
    lines = []
    for key, value in values.items():
        if isinstance(value, bool):
            value = "true" if value else "false"
        lines.append(f"{key}={shlex.quote(value)}")
    return lines
