"""
Evaluation Harness
Prompt catalog, concurrent runner and result reporting.
"""

from .prompts import EvalPrompt, PROMPTS, filter_prompts, get_prompt
from .runner import EvalRunner, InferenceResult
from .report import EvalReport, ModelStats, PromptStats, build_report, format_report

__all__ = [
    "EvalPrompt",
    "PROMPTS",
    "filter_prompts",
    "get_prompt",
    "EvalRunner",
    "InferenceResult",
    "EvalReport",
    "ModelStats",
    "PromptStats",
    "build_report",
    "format_report",
]
