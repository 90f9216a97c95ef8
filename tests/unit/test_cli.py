"""Command-line tests."""

import io
import json

import pytest

from genui_eval.cli import EXIT_INVALID, EXIT_PARSE_ERROR, EXIT_VALID, main


@pytest.fixture
def message_file(tmp_path):
    def write(content):
        path = tmp_path / "message.json"
        path.write_text(content if isinstance(content, str) else json.dumps(content), encoding="utf-8")
        return str(path)

    return write


def test_validate_valid(message_file, login_form, capsys):
    """Test a valid message exits cleanly with no output."""
    path = message_file(login_form)
    assert main(["validate", path, "--kind", "component_update"]) == EXIT_VALID
    assert capsys.readouterr().out == ""


def test_validate_with_expectations(message_file, login_form, capsys):
    """Test --expect adds matcher failures."""
    path = message_file(login_form)
    code = main([
        "validate", path, "--kind", "component_update",
        "--expect", "Button:label:Sign In",
        "--expect", "Slider",
    ])
    assert code == EXIT_INVALID
    assert capsys.readouterr().out == "- Failed to find component 'Slider'.\n"


def test_validate_json_output(message_file, capsys):
    """Test --json prints the error list."""
    path = message_file({"version": "1", "extra": True})
    assert main(["validate", path, "--kind", "stream_header.json", "--json"]) == EXIT_INVALID
    assert json.loads(capsys.readouterr().out) == ["StreamHeader has unexpected property: extra"]


def test_validate_unknown_kind(message_file, capsys):
    """Test unknown kinds are reported as validation errors."""
    path = message_file({})
    assert main(["validate", path, "--kind", "mystery"]) == EXIT_INVALID
    assert "Unknown schema for validation: mystery" in capsys.readouterr().out


def test_validate_fenced_input(message_file):
    """Test model output wrapped in a code fence is accepted."""
    path = message_file('```json\n{"root": "main"}\n```')
    assert main(["validate", path, "--kind", "begin_rendering"]) == EXIT_VALID


def test_validate_parse_error(message_file, capsys):
    """Test unparseable input exits with the parse error code."""
    path = message_file("no json here")
    assert main(["validate", path, "--kind", "begin_rendering"]) == EXIT_PARSE_ERROR
    assert "Could not load" in capsys.readouterr().err


def test_validate_no_repair(message_file):
    """Test --no-repair rejects malformed JSON."""
    path = message_file('{"root": "main",}')
    assert main(["validate", path, "--kind", "begin_rendering"]) == EXIT_VALID
    assert main(["validate", path, "--kind", "begin_rendering", "--no-repair"]) == EXIT_PARSE_ERROR


def test_validate_missing_file(tmp_path):
    """Test a missing file is a load failure."""
    assert main(["validate", str(tmp_path / "nope.json"), "--kind", "begin_rendering"]) == EXIT_PARSE_ERROR


def test_validate_stdin(monkeypatch, capsys):
    """Test '-' reads standard input."""
    monkeypatch.setattr("sys.stdin", io.StringIO('{"contents": null}'))
    assert main(["validate", "-", "--kind", "data_model_update"]) == EXIT_VALID


def test_bad_expectation():
    """Test an expectation without a component name is rejected by argparse."""
    with pytest.raises(SystemExit):
        main(["validate", "x.json", "--kind", "component_update", "--expect", ":label"])


def test_prompts_listing(capsys):
    """Test prompt listing and filtering."""
    assert main(["prompts", "--prefix", "login"]) == EXIT_VALID
    out = capsys.readouterr().out
    assert out.startswith("loginForm")
    assert "component_update" in out
    assert "5 matchers" in out


def test_prompts_unknown_prefix(capsys):
    """Test unknown prefix."""
    assert main(["prompts", "--prefix", "zzz"]) == EXIT_INVALID
    assert 'No prompt found with prefix "zzz"' in capsys.readouterr().err


def test_validate_deeply_nested(message_file, capsys):
    """Test pathological nesting exits with the parse error code."""
    path = message_file('{"components": ' + "[" * 3000 + "]" * 3000 + "}")
    assert main(["validate", path, "--kind", "component_update"]) == EXIT_PARSE_ERROR
    assert "Could not load" in capsys.readouterr().err
