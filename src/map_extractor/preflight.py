"""Checks on the game client tree performed before any extraction."""

from __future__ import annotations

from pathlib import Path

from map_extractor.errors import PreconditionError


DATA_SUBDIR = "Data"


def validate_input_dir(input_dir: Path) -> Path:
    """Return ``input_dir / Data`` or raise PreconditionError if it is missing."""
    data_dir = Path(input_dir) / DATA_SUBDIR
    if not data_dir.is_dir():
        raise PreconditionError(
            f"Could not find {DATA_SUBDIR} sub-directory inside input game client "
            f"directory '{input_dir}'.",
            hint=(
                f"Try copying the {DATA_SUBDIR} directory from your World of Warcraft "
                f"game client installation path, into {input_dir}."
            ),
        )
    return data_dir
