import io
import json
from pathlib import Path

import pytest

from dict_tools.__main__ import main
from dict_tools._version import version


_DOCUMENT = {"foo": 1, "bar": {"baz": [1, {"name": "Joe"}]}}


def test_version_flag_prints_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = main(["--version"])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == version


def test_without_subcommand_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    assert "fetch" in capsys.readouterr().out


def test_fetch_reads_stdin_and_prints_json_lines(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(_DOCUMENT)))

    assert main(["fetch", "foo", "bar/baz/-1"]) == 0
    assert capsys.readouterr().out.splitlines() == ["1", '{"name": "Joe"}']


def test_fetch_reads_file_with_custom_separator(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    document = tmp_path / "doc.json"
    _ = document.write_text(json.dumps(_DOCUMENT))

    assert main(["fetch", "--file", str(document), "--separator", ".", "bar.baz.1.name"]) == 0
    assert capsys.readouterr().out.splitlines() == ['"Joe"']


def test_fetch_uses_default_for_missing_paths(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(_DOCUMENT)))

    assert main(["fetch", "--default", "null", "bar/missing", "foo"]) == 0
    assert capsys.readouterr().out.splitlines() == ["null", "1"]


def test_fetch_reports_failures_on_stderr(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(_DOCUMENT)))

    assert main(["fetch", "bar/baz/7"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == "bar/baz/7: index 7 outside of sequence bounds: -2...2"
