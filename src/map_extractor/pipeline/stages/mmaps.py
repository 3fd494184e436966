"""Movement map (mmap) generation stage."""

from __future__ import annotations

from map_extractor.datatypes import StageResult, Threshold
from map_extractor.evaluation import evaluate_stage
from map_extractor.pipeline.tools import MMAP_GENERATOR, run_tool
from map_extractor.pipeline.types import PipelineContext, StageSpec
from map_extractor.reporting.console import log_notice


SPEC = StageSpec(
    name="mmaps",
    thresholds=(Threshold("mmaps", 3600),),
    messages={
        "succeeded": "Movement map (mmap) generation succeeded.",
        "uncertain": "Movement map (mmap) generation may have failed.",
    },
)


def run_stage(context: PipelineContext) -> StageResult:
    """Generate navigation meshes from the vmaps in the working directory.

    The generator reads ``vmaps`` (and ``maps``) relative to its working
    directory and takes no path arguments. A missing ``vmaps`` directory
    only produces an advisory.
    """
    if not (context.output_dir / "vmaps").is_dir():
        log_notice(
            "Movement map (mmap) generation requires that visual map (vmap) "
            "generation has completed first."
        )
    run_tool([MMAP_GENERATOR])
    return evaluate_stage(SPEC.name, context.output_dir, SPEC.thresholds)
