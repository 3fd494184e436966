"""Shared dataclasses for extraction pipeline orchestration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Tuple

from map_extractor.datatypes import Stage, Threshold


@dataclass(frozen=True)
class PipelineContext:
    """Execution context shared across stages."""

    input_dir: Path
    output_dir: Path
    verbose: bool = False

    @property
    def data_dir(self) -> Path:
        return self.input_dir / "Data"


@dataclass(frozen=True)
class StageSpec:
    """Static description of one extraction stage."""

    name: Stage
    thresholds: Tuple[Threshold, ...]
    messages: Mapping[str, str]
