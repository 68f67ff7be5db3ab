"""
Settings Module for Rush Hour Solver

Provides persistent storage for solver preferences using JSON.
Settings are stored in config.json in the working directory.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any

from src.rushhour import get_strategy_class

logger = logging.getLogger(__name__)

# Settings file location (working directory)
SETTINGS_FILE = Path("config.json")

# Default settings
DEFAULT_SETTINGS: Dict[str, Any] = {
    "strategy_name": "astar",
    "heuristic": "manhattan",
    "compound_moves": False,
    "beam_width": 50,
    "timeout_sec": None,
    "max_states": None,
}


def load_settings() -> Dict[str, Any]:
    """
    Load settings from config.json.

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid.
    """
    if not SETTINGS_FILE.exists():
        logger.debug("Settings file not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(SETTINGS_FILE, 'r', encoding='utf-8') as f:
            settings = json.load(f)
        if not isinstance(settings, dict):
            raise ValueError(f"expected a JSON object, got {type(settings).__name__}")

        # Merge with defaults to handle missing keys
        result = DEFAULT_SETTINGS.copy()
        result.update(settings)
        logger.debug(f"Settings loaded: {result}")
        return result

    except (ValueError, IOError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()


def save_settings(settings: Dict[str, Any]) -> None:
    """
    Save settings to config.json.

    Args:
        settings: Settings dictionary to save
    """
    try:
        with open(SETTINGS_FILE, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved: {settings}")
    except IOError as e:
        logger.error(f"Failed to save settings: {e}")


def strategy_options(settings: Dict[str, Any]) -> Dict[str, Any]:
    """
    Turn settings into create_strategy() keyword arguments.

    Only options the named strategy accepts are included: the heuristic
    is dropped for uninformed strategies and beam_width for everything
    but beam search.

    Args:
        settings: Settings dictionary (e.g. from load_settings())

    Returns:
        Keyword arguments for the strategy named by settings["strategy_name"]

    Raises:
        ValueError: If the strategy name is unknown
    """
    name = settings.get("strategy_name", DEFAULT_SETTINGS["strategy_name"])
    cls = get_strategy_class(name)

    options: Dict[str, Any] = {
        "compound_moves": bool(settings.get("compound_moves", False)),
    }
    if cls.uses_heuristic:
        options["heuristic"] = settings.get("heuristic", DEFAULT_SETTINGS["heuristic"])
    if name == "beam":
        options["beam_width"] = int(settings.get("beam_width", DEFAULT_SETTINGS["beam_width"]))
    return options
