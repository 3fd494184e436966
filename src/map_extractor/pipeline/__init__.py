"""Extraction pipeline for maps, visual maps and movement maps.

Stages run strictly one after another in the order maps, vmaps, mmaps,
each driving one or more external TrinityCore tools.
"""

from .pipeline import prepare_output_tree, run_pipeline
from .types import PipelineContext, StageSpec

__all__ = [
    "PipelineContext",
    "StageSpec",
    "prepare_output_tree",
    "run_pipeline",
]
