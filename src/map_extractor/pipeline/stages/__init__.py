"""Registry of extraction stage handlers."""

from __future__ import annotations

from typing import Callable, Dict

from map_extractor.datatypes import Stage, StageResult
from map_extractor.pipeline.types import PipelineContext, StageSpec

from . import maps, mmaps, vmaps

StageHandler = Callable[[PipelineContext], StageResult]

STAGE_HANDLERS: Dict[Stage, StageHandler] = {
    "maps": maps.run_stage,
    "vmaps": vmaps.run_stage,
    "mmaps": mmaps.run_stage,
}

STAGE_SPECS: Dict[Stage, StageSpec] = {
    "maps": maps.SPEC,
    "vmaps": vmaps.SPEC,
    "mmaps": mmaps.SPEC,
}

__all__ = ["STAGE_HANDLERS", "STAGE_SPECS", "StageHandler"]
