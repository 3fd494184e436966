"""Stage-based extraction pipeline orchestration."""

from __future__ import annotations

from pathlib import Path
from typing import List, Mapping, Optional

from map_extractor.datatypes import STAGE_ORDER, RunConfig, StageResult
from map_extractor.pipeline.stages import STAGE_HANDLERS, STAGE_SPECS, StageHandler
from map_extractor.pipeline.tools import working_directory
from map_extractor.pipeline.types import PipelineContext
from map_extractor.reporting.console import report_stage_result


PREPARED_SUBDIRS = ("mmaps", "vmaps")


def prepare_output_tree(output_dir: Path) -> None:
    """Create the directories the tools expect to find under ``output_dir``."""
    for name in PREPARED_SUBDIRS:
        (Path(output_dir) / name).mkdir(parents=True, exist_ok=True)


def run_pipeline(
    config: RunConfig,
    handlers: Optional[Mapping[str, StageHandler]] = None,
) -> List[StageResult]:
    """Execute the enabled stages in order.

    Every stage runs with the output directory as working directory. A
    stage whose file counts fall short is logged as uncertain and the next
    stage still runs; a failing tool propagates as ToolFailedError.

    Args:
        config: Resolved run configuration.
        handlers: Stage handlers by name. Defaults to the built-in stages.

    Returns:
        One StageResult per executed stage, in execution order.
    """
    handlers = STAGE_HANDLERS if handlers is None else handlers
    context = PipelineContext(
        input_dir=Path(config.input_dir).absolute(),
        output_dir=Path(config.output_dir).absolute(),
        verbose=config.verbose,
    )
    prepare_output_tree(context.output_dir)

    results: List[StageResult] = []
    for stage in STAGE_ORDER:
        if not config.stages.is_enabled(stage):
            continue
        handler = handlers.get(stage)
        if handler is None:
            raise ValueError(f"Unknown stage '{stage}'")

        with working_directory(context.output_dir):
            result = handler(context)

        report_stage_result(result, STAGE_SPECS[stage].messages, verbose=context.verbose)
        results.append(result)

    return results


__all__ = ["prepare_output_tree", "run_pipeline"]
