"""Concurrent evaluation runner.

Queues every prompt for every model (``runs_per_prompt`` times), runs the
generations concurrently and validates each output against the prompt's
message kind and content expectations.
"""

import asyncio
import time
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from ..core import get_logger, get_settings, LogContext, load_message
from ..schema import MessageValidator
from .prompts import EvalPrompt

logger = get_logger(__name__)

Generator = Callable[[EvalPrompt, str], Awaitable[Any]]


@dataclass
class InferenceResult:
    """Outcome of one generation."""

    model_name: str
    prompt: EvalPrompt
    run_number: int
    latency_ms: float
    component: Any = None
    error: BaseException | None = None
    validation_results: list[str] = field(default_factory=list)

    @property
    def tool_error(self) -> bool:
        """Generation itself failed."""
        return self.error is not None

    @property
    def failed(self) -> bool:
        """Generation failed or produced an invalid message."""
        return self.tool_error or bool(self.validation_results)


class EvalRunner:
    """Drives a generation backend over prompts and models."""

    def __init__(
        self,
        generate: Generator,
        models: Sequence[str],
        runs_per_prompt: int | None = None,
        max_concurrency: int | None = None,
    ):
        """
        Initialize runner.

        Args:
            generate: Async callable producing a message (parsed or raw text)
            models: Model names passed through to ``generate``
            runs_per_prompt: Generations per prompt and model (default from settings)
            max_concurrency: In-flight generation limit, 0 for none (default from settings)
        """
        settings = get_settings()
        self.generate = generate
        self.models = list(models)
        self.runs_per_prompt = (
            settings.runs_per_prompt if runs_per_prompt is None else runs_per_prompt
        )
        if self.runs_per_prompt <= 0:
            raise ValueError("runs_per_prompt must be positive")
        limit = settings.max_concurrency if max_concurrency is None else max_concurrency
        self.max_concurrency = limit

    async def run(self, prompts: Sequence[EvalPrompt]) -> list[InferenceResult]:
        """
        Run every queued generation.

        Returns:
            Results in queue order (prompt, then model, then run number)
        """
        semaphore = asyncio.Semaphore(self.max_concurrency) if self.max_concurrency > 0 else None
        tasks = []
        for prompt in prompts:
            validator = MessageValidator(prompt.kind, prompt.matchers)
            for model_name in self.models:
                for run_number in range(1, self.runs_per_prompt + 1):
                    logger.info(
                        "generation_queued",
                        model=model_name,
                        prompt=prompt.name,
                        run=run_number,
                    )
                    tasks.append(
                        self._run_one(prompt, model_name, run_number, validator, semaphore)
                    )

        return list(await asyncio.gather(*tasks))

    async def _run_one(
        self,
        prompt: EvalPrompt,
        model_name: str,
        run_number: int,
        validator: MessageValidator,
        semaphore: asyncio.Semaphore | None,
    ) -> InferenceResult:
        with LogContext(model=model_name, prompt=prompt.name, run=run_number):
            if semaphore is not None:
                async with semaphore:
                    return await self._generate(prompt, model_name, run_number, validator)
            return await self._generate(prompt, model_name, run_number, validator)

    async def _generate(
        self,
        prompt: EvalPrompt,
        model_name: str,
        run_number: int,
        validator: MessageValidator,
    ) -> InferenceResult:
        start = time.perf_counter()
        try:
            output = await self.generate(prompt, model_name)
            if output is None:
                raise RuntimeError("Failed to generate component")
            component = load_message(output) if isinstance(output, str) else output
        except Exception as e:
            latency_ms = (time.perf_counter() - start) * 1000
            logger.warning("generation_failed", error=str(e), latency_ms=round(latency_ms))
            return InferenceResult(
                model_name=model_name,
                prompt=prompt,
                run_number=run_number,
                latency_ms=latency_ms,
                error=e,
            )

        validation_results = validator.validate(component)
        latency_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "generation_complete",
            latency_ms=round(latency_ms),
            failures=len(validation_results),
        )
        return InferenceResult(
            model_name=model_name,
            prompt=prompt,
            run_number=run_number,
            latency_ms=latency_ms,
            component=component,
            validation_results=validation_results,
        )
