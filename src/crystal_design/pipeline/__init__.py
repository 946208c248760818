"""Extraction, validation, normalization and fallback for model responses."""

from .extraction import extract_json, find_json_candidates
from .fallback import diagnostic_for, synthesize_fallback
from .normalization import normalize
from .runner import TaskSpec, run_task

__all__ = [
    "TaskSpec",
    "diagnostic_for",
    "extract_json",
    "find_json_candidates",
    "normalize",
    "run_task",
    "synthesize_fallback",
]
