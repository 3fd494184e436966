"""Heuristic checks on extracted artifacts."""

from .completeness import classify, count_files, evaluate_stage

__all__ = ["classify", "count_files", "evaluate_stage"]
