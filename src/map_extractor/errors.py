"""Exit codes and exceptions shared by the command line and the pipeline.

Code  Meaning
----  -------
  0   Success (uncertain stage classifications included)
  1   Configuration, precondition or unexpected runtime failure
  2   Command line usage error (reported by click)
127   An external tool could not be launched
"""

from __future__ import annotations

from enum import IntEnum
from typing import Sequence, Tuple


class ExitCode(IntEnum):
    SUCCESS = 0
    FAILURE = 1
    USAGE = 2
    TOOL_NOT_FOUND = 127


class MapExtractorError(Exception):
    """Base class for errors raised by this package."""


class PreconditionError(MapExtractorError):
    """The input tree is not usable; nothing has been extracted yet."""

    def __init__(self, message: str, hint: str = "") -> None:
        super().__init__(message)
        self.hint = hint


class ToolFailedError(MapExtractorError):
    """An external extraction tool exited with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int) -> None:
        self.command: Tuple[str, ...] = tuple(str(part) for part in command)
        self.returncode = returncode
        super().__init__(
            f"'{self.command_line}' exited with status {returncode}"
        )

    @property
    def command_line(self) -> str:
        return " ".join(self.command)
