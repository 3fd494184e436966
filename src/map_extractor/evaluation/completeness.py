"""File-count completeness checks.

The extraction tools do not reliably report failure through their exit
status, so a stage is judged by how many files it left behind. A shortfall
classifies the stage as ``uncertain``; it is never treated as an error.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Iterable, Union

from map_extractor.datatypes import Outcome, Stage, StageResult, Threshold


PathLike = Union[str, Path]


def count_files(path: PathLike) -> int:
    """Count regular files below ``path`` recursively.

    Symlinks are not counted and not followed. Missing or unreadable
    directories count as empty; a regular file counts as one.
    """
    if os.path.isfile(path) and not os.path.islink(path):
        return 1
    total = 0
    # os.walk swallows listing errors unless onerror is given
    for root, _dirs, files in os.walk(path):
        for name in files:
            candidate = os.path.join(root, name)
            if os.path.isfile(candidate) and not os.path.islink(candidate):
                total += 1
    return total


def classify(path: PathLike, minimum_count: int) -> Outcome:
    """Classify ``path`` as ``succeeded`` if it holds at least ``minimum_count`` files."""
    return "succeeded" if count_files(path) >= minimum_count else "uncertain"


def evaluate_stage(
    stage: Stage,
    output_dir: Path,
    thresholds: Iterable[Threshold],
) -> StageResult:
    """Check every threshold of a stage against the output tree.

    Args:
        stage: Stage being evaluated.
        output_dir: Root of the extracted artifacts.
        thresholds: Subpaths and minimum file counts; all must be met.

    Returns:
        StageResult carrying the outcome and the observed counts.
    """
    thresholds = tuple(thresholds)
    counts: Dict[str, int] = {}
    for threshold in thresholds:
        counts[threshold.subpath] = count_files(Path(output_dir) / threshold.subpath)

    met = all(counts[t.subpath] >= t.minimum for t in thresholds)
    return StageResult(
        stage=stage,
        outcome="succeeded" if met else "uncertain",
        observed_counts=counts,
        thresholds=thresholds,
    )
