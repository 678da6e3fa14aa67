"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from docextract.deep_merge import deep_merge
from docextract.known_types import KNOWN_TYPES

DEFAULT_CONFIG: dict[str, Any] = {
    "declarations": [],
    "output_folder": None,
    "path_prefix": ".",
    "namespace_summaries": {},
    "known_types": {},
    "rules": {
        "public_only": True,
        "automatic_inheritdoc": True,
        "exclude_regexes": [],
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    Relative declaration and output paths are resolved against the
    directory holding the configuration file.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
            base_dir = p.resolve().parent
            config["declarations"] = [
                str(base_dir / d) for d in config.get("declarations") or []
            ]
            if config.get("output_folder"):
                config["output_folder"] = str(base_dir / config["output_folder"])
    return config


def known_types_for(config: dict[str, Any]) -> dict[str, str]:
    """Return the primitive short-name table extended by the configuration."""
    return {**KNOWN_TYPES, **(config.get("known_types") or {})}
