"""Evaluation runner tests."""

import asyncio

import pytest

from genui_eval.eval import EvalRunner, get_prompt


VALID_LOGIN = {
    "components": [
        {"id": "b1", "componentProperties": {"Button": {"label": "Sign In", "action": "login"}}}
    ]
}


@pytest.mark.asyncio
async def test_runs_every_combination(sample_prompt):
    """Test prompts x models x runs are all queued, in order."""
    calls = []

    async def generate(prompt, model):
        calls.append((prompt.name, model))
        return VALID_LOGIN

    runner = EvalRunner(generate, ["model-a", "model-b"], runs_per_prompt=2)
    results = await runner.run([sample_prompt])

    assert len(calls) == 4
    assert [(r.model_name, r.run_number) for r in results] == [
        ("model-a", 1),
        ("model-a", 2),
        ("model-b", 1),
        ("model-b", 2),
    ]
    assert all(not r.failed for r in results)
    assert all(r.latency_ms >= 0 for r in results)


@pytest.mark.asyncio
async def test_validation_failures_recorded(sample_prompt):
    """Test structural and matcher failures land in validation_results."""

    async def generate(prompt, model):
        return {"components": [{"id": "b1", "componentProperties": {"Button": {"label": "Log In"}}}]}

    [result] = await EvalRunner(generate, ["m"]).run([sample_prompt])

    assert result.failed
    assert not result.tool_error
    assert result.validation_results == [
        "Component 'b1' of type 'Button' is missing required property 'action'.",
        "Failed to find component 'Button' with property 'label' containing text 'Sign In'.",
    ]


@pytest.mark.asyncio
async def test_generation_error_captured(sample_prompt):
    """Test a failing backend does not abort the batch."""

    async def generate(prompt, model):
        if model == "broken":
            raise RuntimeError("quota exceeded")
        return VALID_LOGIN

    results = await EvalRunner(generate, ["broken", "ok"]).run([sample_prompt])

    broken, ok = results
    assert broken.tool_error
    assert broken.failed
    assert str(broken.error) == "quota exceeded"
    assert broken.validation_results == []
    assert broken.component is None
    assert not ok.failed


@pytest.mark.asyncio
async def test_none_output_is_an_error(sample_prompt):
    """Test an empty generation counts as a tool error."""

    async def generate(prompt, model):
        return None

    [result] = await EvalRunner(generate, ["m"]).run([sample_prompt])
    assert result.tool_error
    assert "Failed to generate component" in str(result.error)


@pytest.mark.asyncio
async def test_text_output_is_loaded():
    """Test raw text output is parsed before validation."""

    async def generate(prompt, model):
        return '```json\n{"version": "1.0.0"}\n```'

    [result] = await EvalRunner(generate, ["m"]).run([get_prompt("streamHeader")])
    assert result.component == {"version": "1.0.0"}
    assert result.validation_results == []


@pytest.mark.asyncio
async def test_unparseable_text_is_an_error():
    """Test text without JSON is a tool error."""

    async def generate(prompt, model):
        return "I cannot help with that."

    [result] = await EvalRunner(generate, ["m"]).run([get_prompt("uiRoot")])
    assert result.tool_error


@pytest.mark.asyncio
async def test_concurrency_limit(sample_prompt):
    """Test in-flight generations never exceed the limit."""
    in_flight = 0
    peak = 0

    async def generate(prompt, model):
        nonlocal in_flight, peak
        in_flight += 1
        peak = max(peak, in_flight)
        await asyncio.sleep(0.01)
        in_flight -= 1
        return VALID_LOGIN

    runner = EvalRunner(generate, ["a", "b", "c"], runs_per_prompt=3, max_concurrency=2)
    results = await runner.run([sample_prompt])

    assert len(results) == 9
    assert peak <= 2


@pytest.mark.asyncio
async def test_unbounded_runs_concurrently(sample_prompt):
    """Test generations overlap without a limit."""
    in_flight = 0
    peak = 0

    async def generate(prompt, model):
        nonlocal in_flight, peak
        in_flight += 1
        peak = max(peak, in_flight)
        await asyncio.sleep(0.01)
        in_flight -= 1
        return VALID_LOGIN

    await EvalRunner(generate, ["a", "b", "c"], max_concurrency=0).run([sample_prompt])
    assert peak == 3


def test_invalid_runs_per_prompt():
    """Test runs_per_prompt must be positive."""

    async def generate(prompt, model):
        return None

    with pytest.raises(ValueError):
        EvalRunner(generate, ["m"], runs_per_prompt=0)


def test_defaults_from_settings(monkeypatch):
    """Test runner falls back to settings."""
    monkeypatch.setenv("GENUI_RUNS_PER_PROMPT", "4")
    monkeypatch.setenv("GENUI_MAX_CONCURRENCY", "2")

    async def generate(prompt, model):
        return None

    runner = EvalRunner(generate, ["m"])
    assert runner.runs_per_prompt == 4
    assert runner.max_concurrency == 2
