from __future__ import annotations

import json

import pytest
from jsonschema import Draft202012Validator

from valid_npm_name.cli import EXIT_CONFIG_ERROR, EXIT_INVALID, EXIT_VALID, main
from valid_npm_name.settings import FORMAT_ENV_VAR


def test_valid_name_text(capsys):
    assert main(["some-package"]) == EXIT_VALID
    captured = capsys.readouterr()
    assert captured.out == "some-package is a valid package name\n"
    assert captured.err == ""


def test_invalid_name_text(capsys):
    assert main(["CAPITAL-LETTERS"]) == EXIT_INVALID
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "ERROR: CAPITAL-LETTERS: name can no longer contain capital letters\n"


def test_json_output(capsys, report_schema):
    assert main(["node_modules", "--format", "json"]) == EXIT_INVALID
    report = json.loads(capsys.readouterr().out)
    assert report["violation"] == "in_black_list"
    Draft202012Validator(report_schema).validate(report)


def test_json_output_from_env(monkeypatch, capsys):
    monkeypatch.setenv(FORMAT_ENV_VAR, "json")
    assert main(["@npm/thingy"]) == EXIT_VALID
    report = json.loads(capsys.readouterr().out)
    assert report["valid"] is True
    assert report["name"] == "@npm/thingy"


def test_invalid_format(capsys):
    assert main(["foo", "--format", "xml"]) == EXIT_CONFIG_ERROR
    assert capsys.readouterr().err.startswith("ERROR: Invalid output format")


def test_missing_name_is_a_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == EXIT_CONFIG_ERROR


def test_name_starting_with_dash_after_separator(capsys):
    assert main(["--", "-foo"]) == EXIT_VALID
    assert capsys.readouterr().out == "-foo is a valid package name\n"


def test_help_mentions_separator(capsys):
    with pytest.raises(SystemExit):
        main(["--help"])
    assert "'--'" in capsys.readouterr().out
