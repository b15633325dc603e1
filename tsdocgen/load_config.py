"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from tsdocgen.deep_merge import deep_merge
from tsdocgen.errors import ConfigError
from tsdocgen.html_page import DEFAULT_STYLESHEET

DEFAULT_CONFIG: dict[str, Any] = {
    "output_dir": "output",
    "stylesheet": DEFAULT_STYLESHEET,
    "render": {
        "include_empty_groups": False,
    },
    "logging": {
        "level": "INFO",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            try:
                user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except (OSError, yaml.YAMLError) as e:
                msg = f"Cannot load config {p}: {e}"
                raise ConfigError(msg) from e
            if not isinstance(user_config, dict):
                msg = f"Config {p} must be a mapping, got {type(user_config).__name__}"
                raise ConfigError(msg)
            config = deep_merge(config, user_config)
    return config
