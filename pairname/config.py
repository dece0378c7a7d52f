"""
PAIRNAME configuration.

Settings are resolved in priority order:
1. Explicit overrides (CLI flags)
2. Environment variables (PAIRNAME_SEPARATOR, PAIRNAME_PRESET,
   PAIRNAME_WORDS_FILE, PAIRNAME_LOG_LEVEL)
3. Project config (.pairname/config.json in the current directory)
4. Global config (~/.pairname/config.json)
5. Defaults

Config file format:
    {
        "naming": {
            "separator": "-",
            "preset": "minimal",          // or "default"
            "words_file": "~/words.json"  // overrides preset
        },
        "log_level": "INFO"
    }
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from .generator import DEFAULT_SEPARATOR
from .models import ConfigFileSettings
from .words import DEFAULT_PRESET

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".pairname"
CONFIG_FILE_NAME = "config.json"

DEFAULT_CONFIG: Dict[str, Any] = {
    "separator": DEFAULT_SEPARATOR,
    "preset": DEFAULT_PRESET,
    "words_file": None,
    "log_level": "WARNING",
}

ENV_VARS = {
    "separator": "PAIRNAME_SEPARATOR",
    "preset": "PAIRNAME_PRESET",
    "words_file": "PAIRNAME_WORDS_FILE",
    "log_level": "PAIRNAME_LOG_LEVEL",
}


def get_project_config_path() -> Path:
    return Path.cwd() / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def get_global_config_path() -> Path:
    return Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def _load_config_file(config_file: Path) -> Dict[str, Any]:
    """
    Read one config file and flatten it to {setting: value}.

    Missing files give {}. Unreadable or malformed files are skipped with a warning.
    """
    if not config_file.exists():
        return {}

    try:
        with open(config_file) as f:
            data = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Ignoring unreadable config file {config_file}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring config file {config_file}: expected a JSON object")
        return {}

    raw = {}
    naming = data.get("naming") or {}
    if isinstance(naming, dict):
        for key in ("separator", "preset", "words_file"):
            if naming.get(key) is not None:
                raw[key] = naming[key]
    else:
        logger.warning(f"Ignoring 'naming' in {config_file}: expected a JSON object")

    if data.get("log_level"):
        raw["log_level"] = data["log_level"]

    try:
        parsed = ConfigFileSettings.model_validate(raw)
    except ValidationError as e:
        bad_keys = {err["loc"][0] for err in e.errors() if err["loc"]}
        for key in sorted(bad_keys):
            logger.warning(f"Ignoring '{key}' in {config_file}: expected a string, got {raw[key]!r}")
            raw.pop(key, None)
        parsed = ConfigFileSettings.model_validate(raw)

    settings = parsed.model_dump(exclude_none=True)

    logger.debug(f"Loaded config from {config_file}: {settings}")
    return settings


def get_config(
    overrides: Optional[Dict[str, Any]] = None,
    config_paths: Optional[List[Path]] = None,
) -> Dict[str, Any]:
    """
    Resolve the effective configuration.

    Args:
        overrides: Explicit values (None values are ignored)
        config_paths: Config files, lowest priority first.
                      Defaults to [global config, project config].

    Returns:
        Dict with keys separator, preset, words_file, log_level
    """
    config = dict(DEFAULT_CONFIG)

    if config_paths is None:
        config_paths = [get_global_config_path(), get_project_config_path()]

    for config_file in config_paths:
        config.update(_load_config_file(Path(config_file)))

    # Environment variables take precedence over files. An empty
    # PAIRNAME_SEPARATOR is a valid separator, so check for presence.
    for key, env_var in ENV_VARS.items():
        value = os.environ.get(env_var)
        if value is None:
            continue
        if value == "" and key != "separator":
            continue
        config[key] = value

    if overrides:
        config.update({k: v for k, v in overrides.items() if v is not None})

    if config["words_file"]:
        config["words_file"] = str(Path(config["words_file"]).expanduser())

    return config
