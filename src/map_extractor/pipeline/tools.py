"""Invocation of the external extraction binaries."""

from __future__ import annotations

import os
import subprocess
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Sequence, Union

from map_extractor.errors import ExitCode, ToolFailedError


MAP_EXTRACTOR = "mapextractor"
VMAP_EXTRACTOR = "vmap4extractor"
VMAP_ASSEMBLER = "vmap4assembler"
MMAP_GENERATOR = "mmaps_generator"


@contextmanager
def working_directory(path: Union[str, Path]) -> Iterator[Path]:
    """Change into ``path`` for the duration of the block."""
    previous = os.getcwd()
    os.chdir(path)
    try:
        yield Path(path)
    finally:
        os.chdir(previous)


def run_tool(command: Sequence[Union[str, Path]]) -> None:
    """Run an external tool in the current directory and wait for it.

    The tool inherits stdout and stderr. There is no timeout.

    Raises:
        ToolFailedError: If the tool cannot be launched or exits non-zero.
    """
    cmd = [str(part) for part in command]
    try:
        result = subprocess.run(cmd, check=False)
    except FileNotFoundError as exc:
        raise ToolFailedError(cmd, int(ExitCode.TOOL_NOT_FOUND)) from exc

    if result.returncode != 0:
        raise ToolFailedError(cmd, result.returncode)
