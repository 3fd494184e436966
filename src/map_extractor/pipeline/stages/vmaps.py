"""Visual map (vmap) extraction and assembly stage."""

from __future__ import annotations

from map_extractor.datatypes import StageResult, Threshold
from map_extractor.evaluation import evaluate_stage
from map_extractor.pipeline.tools import VMAP_ASSEMBLER, VMAP_EXTRACTOR, run_tool
from map_extractor.pipeline.types import PipelineContext, StageSpec


# vmap4extractor writes its raw output here, relative to the working directory
BUILDINGS_DIR = "Buildings"

SPEC = StageSpec(
    name="vmaps",
    thresholds=(Threshold("vmaps", 9800),),
    messages={
        "succeeded": "Visual map (vmap) extraction succeeded.",
        "uncertain": "Visual map (vmap) extraction may have failed.",
    },
)


def run_stage(context: PipelineContext) -> StageResult:
    """Extract raw building geometry, then assemble it into vmap tiles."""
    run_tool([VMAP_EXTRACTOR, "-l", "-d", context.data_dir])
    run_tool([
        VMAP_ASSEMBLER,
        context.output_dir / BUILDINGS_DIR,
        context.output_dir / "vmaps",
    ])
    return evaluate_stage(SPEC.name, context.output_dir, SPEC.thresholds)
