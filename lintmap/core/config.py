"""Project-wide config (.lintmap/config.json)."""

from __future__ import annotations

import copy
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from lintmap.core.fallbacks import warn_best_effort
from lintmap.languages.java.detectors.pmd_rules import PMD_CATEGORIES
from lintmap.utils import PROJECT_ROOT, safe_write_text

CONFIG_FILE = PROJECT_ROOT / ".lintmap" / "config.json"
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfigKey:
    type: type
    default: object
    description: str


CONFIG_SCHEMA: dict[str, ConfigKey] = {
    "pmd_path": ConfigKey(str, "pmd", "PMD executable (name on PATH or absolute path)"),
    "ruleset_path": ConfigKey(
        str, "", "Maintained PMD ruleset XML whose rules count as enabled (empty = none)"
    ),
    "categories": ConfigKey(
        list, list(PMD_CATEGORIES), "PMD Java rule categories passed to -rulesets"
    ),
    "output_path": ConfigKey(
        str, "", "Default output file for generated rulesets (empty = stdout)"
    ),
}


def default_config() -> dict[str, Any]:
    """Return a config dict with all keys set to their defaults."""
    return {k: copy.deepcopy(v.default) for k, v in CONFIG_SCHEMA.items()}


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load config from disk, filling missing keys with defaults.

    A missing file gives the defaults; an unreadable or corrupt one gives the
    defaults plus a warning.
    """
    p = path or CONFIG_FILE
    config: dict[str, Any] = {}
    if p.exists():
        try:
            loaded = json.loads(p.read_text())
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
            logger.debug("Unreadable config %s: %s", p, exc)
            warn_best_effort(f"ignoring unreadable config {p}")
            loaded = {}
        if isinstance(loaded, dict):
            config = loaded

    for key, schema in CONFIG_SCHEMA.items():
        if key not in config or not isinstance(config[key], schema.type):
            config[key] = copy.deepcopy(schema.default)
    return config


def save_config(config: dict, path: Path | None = None) -> None:
    """Save config to disk atomically."""
    p = path or CONFIG_FILE
    safe_write_text(p, json.dumps(config, indent=2) + "\n")


def set_config_value(config: dict, key: str, raw: str) -> None:
    """Parse and set a config value from a raw string.

    List keys accept a comma-separated value and replace the whole list.
    """
    if key not in CONFIG_SCHEMA:
        raise KeyError(f"Unknown config key: {key}")

    schema = CONFIG_SCHEMA[key]

    if schema.type is list:
        items = [item.strip() for item in raw.split(",") if item.strip()]
        if key == "categories":
            unknown = [item for item in items if item not in PMD_CATEGORIES]
            if unknown or not items:
                raise ValueError(
                    f"Expected comma-separated categories from "
                    f"{', '.join(PMD_CATEGORIES)}, got: {raw}"
                )
        config[key] = list(dict.fromkeys(items))
    else:
        config[key] = raw


def unset_config_value(config: dict, key: str) -> None:
    """Reset a config key to its default value."""
    if key not in CONFIG_SCHEMA:
        raise KeyError(f"Unknown config key: {key}")
    config[key] = copy.deepcopy(CONFIG_SCHEMA[key].default)
