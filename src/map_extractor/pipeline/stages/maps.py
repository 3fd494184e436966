"""Map and DBC extraction stage."""

from __future__ import annotations

from map_extractor.datatypes import StageResult, Threshold
from map_extractor.evaluation import evaluate_stage
from map_extractor.pipeline.tools import MAP_EXTRACTOR, run_tool
from map_extractor.pipeline.types import PipelineContext, StageSpec


SPEC = StageSpec(
    name="maps",
    thresholds=(Threshold("maps", 5700), Threshold("dbc", 240)),
    messages={
        "succeeded": "Map extraction succeeded.",
        "uncertain": "Map extraction may have failed.",
    },
)


def run_stage(context: PipelineContext) -> StageResult:
    run_tool([
        MAP_EXTRACTOR,
        "-i", context.input_dir,
        "-o", context.output_dir,
        "-e", "7",
        "-f", "0",
    ])
    return evaluate_stage(SPEC.name, context.output_dir, SPEC.thresholds)
