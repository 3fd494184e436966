"""Run an arbitrary executable in place of the extraction wrapper."""

from __future__ import annotations

import os
import subprocess
from typing import Sequence


def is_executable_file(path: str) -> bool:
    """Return True if ``path`` is a regular file the current user may execute."""
    return bool(path) and os.path.isfile(path) and os.access(path, os.X_OK)


def delegate(command: str, args: Sequence[str]) -> int:
    """Run ``command`` with ``args``, wait for it and return its exit status.

    A bare file name is resolved against the working directory rather than
    ``PATH``.
    """
    if "/" not in command:
        command = f"./{command}"
    return subprocess.call([command, *args])
