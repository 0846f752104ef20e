"""Logic for loading, merging and validating configuration files."""

import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from rustdoc_term.deep_merge import deep_merge
from rustdoc_term.errors import ConfigError

CONFIG_ENV_VAR = "RUSTDOC_TERM_CONFIG"

UNSUPPORTED_POLICIES = ("error", "skip")

DEFAULT_CONFIG: dict[str, Any] = {
    "render": {
        "heading_width": 80,
        "heading_fill": "-",
    },
    "markdown": {
        "heading_marker": "#",
        # Unsupported constructs abort the run unless set to "skip".
        "on_unsupported": "error",
    },
    "highlight": {
        "language": "rust",
        "theme": "monokai",
    },
    "logging": {
        "level": "WARNING",
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
            except yaml.YAMLError as exc:
                msg = f"Invalid YAML in configuration file {p}: {exc}"
                raise ConfigError(msg) from exc
            if not isinstance(user_config, dict):
                msg = f"Configuration file must hold a mapping: {p}"
                raise ConfigError(msg)
            config = deep_merge(config, user_config)
    validate_config(config)
    return config


def load_config_from_env() -> dict[str, Any]:
    """Load the configuration named by the RUSTDOC_TERM_CONFIG variable, if any."""
    return load_config(os.environ.get(CONFIG_ENV_VAR))


def validate_config(config: dict[str, Any]) -> None:
    """Reject values the renderer cannot work with."""
    for section in DEFAULT_CONFIG:
        if not isinstance(config.get(section), dict):
            msg = f"{section} must be a mapping, got {config.get(section)!r}"
            raise ConfigError(msg)

    width = config["render"]["heading_width"]
    if not isinstance(width, int) or width <= 0:
        msg = f"render.heading_width must be a positive integer, got {width!r}"
        raise ConfigError(msg)

    for section, key in (("render", "heading_fill"), ("markdown", "heading_marker")):
        value = config[section][key]
        if not isinstance(value, str) or len(value) != 1:
            msg = f"{section}.{key} must be a single character, got {value!r}"
            raise ConfigError(msg)

    policy = config["markdown"]["on_unsupported"]
    if policy not in UNSUPPORTED_POLICIES:
        msg = (
            f"markdown.on_unsupported must be one of {', '.join(UNSUPPORTED_POLICIES)}"
            f", got {policy!r}"
        )
        raise ConfigError(msg)

    level = config["logging"]["level"]
    if not isinstance(level, int) and not isinstance(
        logging.getLevelName(level), int
    ):
        msg = f"logging.level must be a logging level name, got {level!r}"
        raise ConfigError(msg)
