"""Unit tests for the command line tool."""

import io
import json

import pytest

from http_media_type import cli


@pytest.fixture(autouse=True)
def log_levels(monkeypatch):
    """Record requested log levels instead of reconfiguring logging."""
    levels = []
    monkeypatch.setattr(cli, "setup_logging", lambda level: levels.append(level))
    return levels


def run(argv, stdin_text=""):
    stdout, stderr = io.StringIO(), io.StringIO()
    code = cli.main(argv, stdin=io.StringIO(stdin_text), stdout=stdout, stderr=stderr)
    return code, stdout.getvalue(), stderr.getvalue()


@pytest.mark.unit
def test_prints_canonical_form():
    code, out, err = run(['Text/HTML;Charset="utf-8"', "text/plain;a=1;a=2"])
    assert code == 0
    assert out == "text/html;charset=utf-8\ntext/plain;a=1\n"
    assert err == ""


@pytest.mark.unit
def test_essence_only():
    code, out, _ = run(["--essence", "Text/HTML;charset=gbk"])
    assert code == 0
    assert out == "text/html\n"


@pytest.mark.unit
def test_failure_sets_exit_status():
    code, out, err = run(["text/html", "/html"])
    assert code == 1
    assert out == "text/html\n"
    assert "'/html': No type" in err


@pytest.mark.unit
def test_reads_stdin():
    code, out, _ = run([], stdin_text="TEXT/PLAIN\n\nimage/PNG\n")
    assert code == 0
    assert out == "text/plain\nimage/png\n"

    code, out, _ = run(["-"], stdin_text="a/b\n")
    assert out == "a/b\n"


@pytest.mark.unit
def test_json_output():
    code, out, _ = run(["--json", "text/html;charset=gbk", "bogus"])
    assert code == 1
    payload = json.loads(out)
    assert payload[0] == {
        "input": "text/html;charset=gbk",
        "output": "text/html;charset=gbk",
        "media_type": {
            "type": "text",
            "subtype": "html",
            "essence": "text/html",
            "parameters": {"charset": "gbk"},
        },
        "error": None,
    }
    assert payload[1]["output"] is None
    assert payload[1]["error"]["error"] == "NO_SUBTYPE"


@pytest.mark.unit
def test_json_from_settings(monkeypatch):
    monkeypatch.setenv("MEDIA_TYPE_OUTPUT_FORMAT", "json")
    monkeypatch.setenv("MEDIA_TYPE_JSON_INDENT", "2")
    code, out, _ = run(["a/b"])
    assert code == 0
    assert out.startswith("[\n  {")
    assert json.loads(out)[0]["output"] == "a/b"


@pytest.mark.unit
def test_log_level_flag_overrides_settings(monkeypatch, log_levels):
    monkeypatch.setenv("MEDIA_TYPE_LOG_LEVEL", "ERROR")
    run(["a/b"])
    run(["--log-level", "debug", "a/b"])
    assert log_levels == ["ERROR", "DEBUG"]


@pytest.mark.unit
def test_parse_values_records_outcomes():
    outcomes = cli.parse_values(["a/b;c=d", "a"])
    assert outcomes[0].ok
    assert outcomes[0].media_type.parameters == {"c": "d"}
    assert not outcomes[1].ok
    assert outcomes[1].error["details"] == {"input": "a"}
