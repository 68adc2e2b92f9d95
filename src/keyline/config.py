#!/usr/bin/env python3
"""
KEYLINE CONFIG LOADER
---------------------
Reads a ParserConfig from a YAML mapping such as:

    key_prefix: "@"
    comment_prefix: "#"
    section_prefix: "@"
    start_section: first
    skip_empty_lines: true

Author: KeyLine Team
Date: 2026-10-17
"""

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from ruamel.yaml import YAML, YAMLError

from keyline.core.errors import ConfigError
from keyline.core.models import ParserConfig

logger = logging.getLogger("keyline.config")

CONFIG_FIELDS = ("key_prefix", "comment_prefix", "section_prefix", "start_section", "skip_empty_lines")


def config_from_mapping(data: Mapping[str, Any], overrides: Optional[Dict[str, Any]] = None) -> ParserConfig:
    """
    Builds a ParserConfig, rejecting unknown fields. Overrides whose value
    is None are ignored so unset CLI flags do not clobber the file.
    """
    merged = dict(data)
    for name, value in (overrides or {}).items():
        if value is not None:
            merged[name] = value

    unknown = sorted(set(merged) - set(CONFIG_FIELDS))
    if unknown:
        raise ConfigError(f"Unknown configuration field(s): {', '.join(unknown)}")
    if "key_prefix" not in merged:
        raise ConfigError("Configuration is missing required field 'key_prefix'")

    skip = merged.get("skip_empty_lines", True)
    if not isinstance(skip, bool):
        raise ConfigError("skip_empty_lines must be true or false")

    return ParserConfig(**merged)


def load_config(path: Union[str, Path], overrides: Optional[Dict[str, Any]] = None) -> ParserConfig:
    config_path = Path(path)
    yaml = YAML(typ="safe")
    try:
        data = yaml.load(config_path.read_text(encoding="utf-8-sig"))
    except (OSError, YAMLError) as e:
        logger.error(f"Unable to load configuration from {config_path}")
        raise ConfigError(f"Failed to load config: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping, got {type(data).__name__}")
    return config_from_mapping(data, overrides)
