"""Unit tests for railfence.cli.display.CLIDisplay."""

import json

import pytest
import yaml

from railfence.cli.display import CLIDisplay

pytestmark = pytest.mark.cli


def test_status_lines_go_to_stderr(capsys):
    display = CLIDisplay()
    display.error("Invalid depth [0]")
    display.warning("careful")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid depth [0]" in captured.err
    assert "careful" in captured.err


def test_json_output(capsys):
    CLIDisplay().json_output({"text": "HOELL"}, format="json")
    assert json.loads(capsys.readouterr().out) == {"text": "HOELL"}


def test_yaml_output_is_default(capsys):
    CLIDisplay().json_output({"text": "héllo"})
    assert yaml.safe_load(capsys.readouterr().out) == {"text": "héllo"}
