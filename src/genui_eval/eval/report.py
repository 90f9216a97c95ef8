"""Aggregation and text rendering of evaluation results."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from ..core import safe_json_dumps
from .runner import InferenceResult

PROMPT_WIDTH = 40
LATENCY_WIDTH = 20
FAILED_WIDTH = 15
ERROR_WIDTH = 20


@dataclass
class PromptStats:
    """Per-prompt statistics for one model."""

    prompt_name: str
    total_runs: int = 0
    error_runs: int = 0
    failed_runs: int = 0
    total_latency_ms: float = 0.0

    @property
    def avg_latency_ms(self) -> int:
        """Average latency rounded to whole milliseconds."""
        return round(self.total_latency_ms / self.total_runs) if self.total_runs else 0

    def add(self, result: InferenceResult) -> None:
        self.total_runs += 1
        self.total_latency_ms += result.latency_ms
        if result.tool_error:
            self.error_runs += 1
        if result.failed:
            self.failed_runs += 1

    def to_dict(self) -> dict[str, Any]:
        """Export as dictionary."""
        return {
            "prompt": self.prompt_name,
            "total_runs": self.total_runs,
            "error_runs": self.error_runs,
            "failed_runs": self.failed_runs,
            "avg_latency_ms": self.avg_latency_ms,
        }


@dataclass
class ModelStats:
    """Statistics for one model across prompts (first-seen prompt order)."""

    model_name: str
    prompts: dict[str, PromptStats] = field(default_factory=dict)

    @property
    def total_runs(self) -> int:
        return sum(stats.total_runs for stats in self.prompts.values())

    @property
    def failed_runs(self) -> int:
        return sum(stats.failed_runs for stats in self.prompts.values())

    def add(self, result: InferenceResult) -> None:
        name = result.prompt.name
        if name not in self.prompts:
            self.prompts[name] = PromptStats(name)
        self.prompts[name].add(result)


@dataclass
class EvalReport:
    """Aggregated evaluation results."""

    models: dict[str, ModelStats] = field(default_factory=dict)
    total_runs: int = 0
    tool_error_runs: int = 0
    failed_runs: int = 0
    models_with_failures: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Export as dictionary."""
        return {
            "total_runs": self.total_runs,
            "tool_error_runs": self.tool_error_runs,
            "failed_runs": self.failed_runs,
            "models_with_failures": list(self.models_with_failures),
            "models": {
                name: [stats.to_dict() for stats in model.prompts.values()]
                for name, model in self.models.items()
            },
        }


def build_report(results: Sequence[InferenceResult]) -> EvalReport:
    """Group results per model and prompt, in first-seen order."""
    report = EvalReport()
    for result in results:
        if result.model_name not in report.models:
            report.models[result.model_name] = ModelStats(result.model_name)
        report.models[result.model_name].add(result)

        report.total_runs += 1
        if result.tool_error:
            report.tool_error_runs += 1
        if result.failed:
            report.failed_runs += 1
            if result.model_name not in report.models_with_failures:
                report.models_with_failures.append(result.model_name)
    return report


def _banner(title: str) -> list[str]:
    rule = "-" * 40
    return ["", rule, title, rule]


def _format_results(results: Sequence[InferenceResult], verbose: bool) -> list[str]:
    lines = ["", "--- Generation Results ---"]
    by_model: dict[str, list[InferenceResult]] = {}
    for result in results:
        by_model.setdefault(result.model_name, []).append(result)

    for model_name, model_results in by_model.items():
        for result in model_results:
            has_output = result.component is not None
            if not (result.failed or (verbose and has_output)):
                continue

            lines.extend(_banner(f"Model: {model_name}"))
            lines.append("")
            lines.append(f"Query: {result.prompt.name} (run {result.run_number})")
            if result.tool_error:
                lines.append(f"Error generating component: {result.error}")
                continue
            if result.validation_results:
                lines.append("Validation Failures:")
                lines.extend(f"- {failure}" for failure in result.validation_results)
            if verbose:
                if result.validation_results:
                    lines.append("Generated schema:")
                lines.append(safe_json_dumps(result.component, indent=2))
    return lines


def _format_summary(report: EvalReport) -> list[str]:
    lines = ["", "--- Summary ---"]
    header = (
        f"{'Prompt Name':<{PROMPT_WIDTH}}"
        f"{'Avg Latency (ms)':<{LATENCY_WIDTH}}"
        f"{'Failed Runs':<{FAILED_WIDTH}}"
        f"{'Tool Error Runs':<{ERROR_WIDTH}}"
    )
    divider = "-" * len(header)

    for model_name, model in report.models.items():
        lines.extend(_banner(f"Model: {model_name}"))
        lines.append(header)
        lines.append(divider)
        for stats in model.prompts.values():
            failed = f"{stats.failed_runs} / {stats.total_runs}" if stats.failed_runs else ""
            errored = f"{stats.error_runs} / {stats.total_runs}" if stats.error_runs else ""
            lines.append(
                f"{stats.prompt_name:<{PROMPT_WIDTH}}"
                f"{f'{stats.avg_latency_ms}ms':<{LATENCY_WIDTH}}"
                f"{failed:<{FAILED_WIDTH}}"
                f"{errored:<{ERROR_WIDTH}}"
            )
        lines.append(divider)
        lines.append(f"Total failed runs: {model.failed_runs} / {model.total_runs}")
    return lines


def _format_overall(report: EvalReport) -> list[str]:
    lines = [
        "",
        "--- Overall Summary ---",
        f"Number of tool error runs: {report.tool_error_runs} / {report.total_runs}",
        "Number of runs with any failure (tool error or validation): "
        f"{report.failed_runs} / {report.total_runs}",
    ]
    if report.models_with_failures:
        lines.append(f"Models with at least one failure: {', '.join(report.models_with_failures)}")
    return lines


def format_report(
    report: EvalReport,
    results: Sequence[InferenceResult],
    verbose: bool = False,
) -> str:
    """
    Render results as plain text.

    Args:
        report: Aggregated statistics from ``build_report``
        results: The raw results (for per-run failure details)
        verbose: Also print every generated message

    Returns:
        Report text with generation results, per-model summary and overall summary
    """
    lines = _format_results(results, verbose)
    lines.extend(_format_summary(report))
    lines.extend(_format_overall(report))
    return "\n".join(lines)
