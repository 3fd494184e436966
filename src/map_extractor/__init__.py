"""TrinityCore map extraction wrapper.

Drives the map, visual map and movement map tools against a World of
Warcraft game client and sanity-checks what they produce.
"""

__version__ = "1.0.0"

from map_extractor.datatypes import (
    RunConfig,
    StageResult,
    StageSelection,
    Threshold,
    Stage,
    Outcome,
)

__all__ = [
    "RunConfig",
    "StageResult",
    "StageSelection",
    "Threshold",
    "Stage",
    "Outcome",
]
