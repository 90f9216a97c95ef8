"""Report aggregation tests."""

import pytest

from genui_eval.eval import InferenceResult, build_report, format_report, get_prompt


def _result(model, prompt_name, latency, run=1, error=None, failures=(), component=None):
    return InferenceResult(
        model_name=model,
        prompt=get_prompt(prompt_name),
        run_number=run,
        latency_ms=latency,
        component=component if component is not None else ({} if error is None else None),
        error=error,
        validation_results=list(failures),
    )


@pytest.fixture
def results():
    return [
        _result("fast", "loginForm", 100, run=1),
        _result("fast", "loginForm", 200, run=2, failures=["Failed to find component 'Button'."]),
        _result("fast", "streamHeader", 50),
        _result("slow", "loginForm", 1000, error=RuntimeError("timeout")),
        _result("slow", "streamHeader", 900),
    ]


@pytest.mark.unit
def test_build_report_totals(results):
    """Test overall counts."""
    report = build_report(results)

    assert report.total_runs == 5
    assert report.tool_error_runs == 1
    assert report.failed_runs == 2
    assert report.models_with_failures == ["fast", "slow"]


@pytest.mark.unit
def test_build_report_per_prompt(results):
    """Test per-model, per-prompt statistics."""
    report = build_report(results)

    fast = report.models["fast"]
    assert list(fast.prompts) == ["loginForm", "streamHeader"]
    login = fast.prompts["loginForm"]
    assert login.total_runs == 2
    assert login.failed_runs == 1
    assert login.error_runs == 0
    assert login.avg_latency_ms == 150
    assert fast.total_runs == 3
    assert fast.failed_runs == 1

    slow_login = report.models["slow"].prompts["loginForm"]
    assert slow_login.error_runs == 1
    assert slow_login.failed_runs == 1


@pytest.mark.unit
def test_report_to_dict(results):
    """Test dictionary export."""
    data = build_report(results).to_dict()
    assert data["total_runs"] == 5
    assert data["models"]["slow"][1] == {
        "prompt": "streamHeader",
        "total_runs": 1,
        "error_runs": 0,
        "failed_runs": 0,
        "avg_latency_ms": 900,
    }


@pytest.mark.unit
def test_empty_report():
    """Test no results."""
    report = build_report([])
    assert report.total_runs == 0
    text = format_report(report, [])
    assert "Number of tool error runs: 0 / 0" in text
    assert "Models with at least one failure" not in text


@pytest.mark.unit
def test_format_report(results):
    """Test rendered sections."""
    text = format_report(build_report(results), results)

    assert "--- Generation Results ---" in text
    assert "Query: loginForm (run 2)" in text
    assert "- Failed to find component 'Button'." in text
    assert "Error generating component: timeout" in text
    assert text.count("Query: ") == 2  # passing runs are not listed

    assert "--- Summary ---" in text
    assert "Prompt Name".ljust(40) + "Avg Latency (ms)".ljust(20) in text
    assert "loginForm".ljust(40) + "150ms".ljust(20) + "1 / 2".ljust(15) in text
    assert "Total failed runs: 1 / 3" in text

    assert "--- Overall Summary ---" in text
    assert "Number of runs with any failure (tool error or validation): 2 / 5" in text
    assert "Models with at least one failure: fast, slow" in text


@pytest.mark.unit
def test_format_report_verbose(results):
    """Test verbose output includes generated messages."""
    results.append(_result("fast", "uiRoot", 10, component={"root": "mainLayout"}))
    text = format_report(build_report(results), results, verbose=True)

    assert "Query: uiRoot (run 1)" in text
    assert '"root": "mainLayout"' in text
    assert "Generated schema:" in text
