"""Tests for the compile_guidelines CLI."""

import importlib.util
import json
from pathlib import Path

import pytest

CLI_PATH = Path(__file__).parents[2] / "cli" / "compile_guidelines.py"


@pytest.fixture(scope="module")
def cli():
    spec = importlib.util.spec_from_file_location("compile_guidelines", CLI_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_bare_family_file_as_json(cli, tmp_path, capsys):
    prefs = tmp_path / "family.json"
    prefs.write_text(json.dumps({"dietary_preferences": ["halal"]}))

    assert cli.main([str(prefs), "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert "pork" in data["excluded_elements"]


def test_family_and_child_file_as_text(cli, tmp_path, capsys):
    prefs = tmp_path / "prefs.json"
    prefs.write_text(json.dumps({
        "family_preferences": {"religious_observance_level": "strict"},
        "child_preferences": {"avoid_themes": ["bees"]},
    }))

    assert cli.main([str(prefs), "--child-name", "Maya"]) == 0

    out = capsys.readouterr().out
    assert "Child-specific sensitivities for Maya: avoid bees" in out
    assert "IMAGE CONTENT GUIDELINES:" in out
    assert "TONE: Reverent, respectful, values-focused tone" in out


def test_missing_file(cli, tmp_path, capsys):
    assert cli.main([str(tmp_path / "nope.json")]) == 1
    assert "Error reading" in capsys.readouterr().err


def test_unsupported_language(cli, tmp_path):
    prefs = tmp_path / "family.json"
    prefs.write_text("{}")

    with pytest.raises(SystemExit):
        cli.main([str(prefs), "--language", "xx"])
