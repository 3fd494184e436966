"""Core data types for the map extraction wrapper.

This module defines the records passed between the configuration layer,
the extraction pipeline and the completeness checks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Literal, Tuple


Stage = Literal["maps", "vmaps", "mmaps"]
Outcome = Literal["succeeded", "uncertain"]

# Execution order; mmaps consumes what vmaps leaves behind.
STAGE_ORDER: Tuple[Stage, ...] = ("maps", "vmaps", "mmaps")


@dataclass(frozen=True)
class StageSelection:
    """Which extraction stages are enabled for a run."""
    maps: bool
    vmaps: bool
    mmaps: bool

    def is_enabled(self, stage: Stage) -> bool:
        return bool(getattr(self, stage))

    def enabled(self) -> Tuple[Stage, ...]:
        return tuple(stage for stage in STAGE_ORDER if self.is_enabled(stage))


@dataclass(frozen=True)
class RunConfig:
    """Resolved configuration for a single run.

    Attributes:
        input_dir: Root of the game client installation (must hold ``Data``).
        output_dir: Directory receiving the extracted artifacts.
        stages: Enabled extraction stages.
        verbose: Echo the resolved configuration and per-stage file counts.
        shell: Open an interactive diagnostic session on unexpected errors.
    """
    input_dir: Path
    output_dir: Path
    stages: StageSelection
    verbose: bool
    shell: bool


@dataclass(frozen=True)
class Threshold:
    """Minimum number of files expected below ``output_dir / subpath``."""
    subpath: str
    minimum: int


@dataclass(frozen=True)
class StageResult:
    """Classification of one executed stage.

    Attributes:
        stage: The stage that ran.
        outcome: ``succeeded`` when every threshold was met, else ``uncertain``.
        observed_counts: Files counted per checked subpath.
        thresholds: The thresholds the counts were compared against.
    """
    stage: Stage
    outcome: Outcome
    observed_counts: Dict[str, int] = field(default_factory=dict)
    thresholds: Tuple[Threshold, ...] = ()

    @property
    def succeeded(self) -> bool:
        return self.outcome == "succeeded"
