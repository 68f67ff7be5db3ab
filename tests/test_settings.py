"""
Tests for persistent solver settings.

Usage:
    pytest tests/test_settings.py
"""

import json
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src import settings
from src.settings import DEFAULT_SETTINGS, load_settings, save_settings, strategy_options
from src.rushhour import create_strategy


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setattr(settings, "SETTINGS_FILE", path)
    return path


def test_missing_file_gives_defaults(settings_file):
    assert load_settings() == DEFAULT_SETTINGS
    assert load_settings() is not DEFAULT_SETTINGS


def test_save_then_load(settings_file):
    save_settings({"strategy_name": "ida_star", "heuristic": "blocking"})

    loaded = load_settings()

    assert loaded["strategy_name"] == "ida_star"
    assert loaded["heuristic"] == "blocking"
    # Keys missing from the file come from the defaults
    assert loaded["beam_width"] == DEFAULT_SETTINGS["beam_width"]
    assert json.loads(settings_file.read_text(encoding="utf-8"))["strategy_name"] == "ida_star"


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
def test_invalid_file_gives_defaults(settings_file, content, caplog):
    settings_file.write_text(content, encoding="utf-8")
    assert load_settings() == DEFAULT_SETTINGS
    assert "Failed to load settings" in caplog.text


def test_options_for_uninformed_strategy():
    options = strategy_options({**DEFAULT_SETTINGS, "strategy_name": "ucs"})
    assert options == {"compound_moves": False}
    create_strategy("ucs", **options)


def test_options_for_informed_strategy():
    options = strategy_options({**DEFAULT_SETTINGS, "heuristic": "clearing", "compound_moves": True})
    assert options == {"compound_moves": True, "heuristic": "clearing"}
    strategy = create_strategy(DEFAULT_SETTINGS["strategy_name"], **options)
    assert strategy.compound_moves


def test_options_for_beam():
    options = strategy_options({**DEFAULT_SETTINGS, "strategy_name": "beam", "beam_width": 7})
    assert options["beam_width"] == 7
    assert create_strategy("beam", **options).beam_width == 7


def test_options_for_unknown_strategy():
    with pytest.raises(ValueError):
        strategy_options({"strategy_name": "bogo"})
