"""
Configuration management for the graph tool.

Settings come from three places, later ones winning:
1. Defaults on the Settings dataclass
2. config.json next to the executable/project root
3. Environment variables GRAPHTOOL_<FIELD> (a .env file is loaded at start-up)

A bad value never stops the app; the default is kept and a warning logged.
"""

import json
import logging
import os
import re
from dataclasses import dataclass, fields, asdict
from pathlib import Path
from typing import Any, Optional

from graphtool.paths import get_config_path

logger = logging.getLogger(__name__)

ENV_PREFIX = "GRAPHTOOL_"
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


@dataclass
class Settings:
    canvas_width: int = 800
    canvas_height: int = 600
    directed: bool = False
    vertex_color: str = "#ff0000"
    paint_color: str = "#00ff00"
    edge_color: str = "#ff0000"
    port: int = 8080
    log_level: str = "INFO"


def load_config(config_path: Optional[Path] = None) -> dict:
    """Load configuration from config.json."""
    config_path = config_path or get_config_path()
    if config_path.exists():
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
                return data if isinstance(data, dict) else {}
        except (json.JSONDecodeError, IOError) as e:
            logger.warning(f"Ignoring unreadable config {config_path}: {e}")
            return {}
    return {}


def save_config(config: dict, config_path: Optional[Path] = None) -> None:
    """Save configuration to config.json."""
    config_path = config_path or get_config_path()
    with open(config_path, 'w', encoding='utf-8') as f:
        json.dump(config, f, indent=2)


def _coerce(name: str, default: Any, raw: Any) -> Any:
    """Convert `raw` to the type of `default`; raise ValueError when it does not fit."""
    if isinstance(default, bool):
        if isinstance(raw, bool):
            return raw
        text = str(raw).strip().lower()
        if text in ("1", "true", "yes", "on"):
            return True
        if text in ("0", "false", "no", "off"):
            return False
        raise ValueError(f"not a boolean: {raw!r}")

    if isinstance(default, int):
        value = int(raw)
        if value <= 0:
            raise ValueError(f"must be positive: {raw!r}")
        return value

    value = str(raw).strip()
    if name.endswith("_color") and not _HEX_COLOR.match(value):
        raise ValueError(f"not a #rrggbb color: {raw!r}")
    if name == "log_level":
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"unknown log level: {raw!r}")
    return value


def get_settings(config_path: Optional[Path] = None) -> Settings:
    """
    Resolve the effective settings.

    Args:
        config_path: Override for the config.json location (tests).

    Returns:
        Settings with file and environment overrides applied.
    """
    settings = Settings()
    config = load_config(config_path)

    for f in fields(Settings):
        default = getattr(settings, f.name)
        sources = [("config.json", config.get(f.name)),
                   ("environment", os.environ.get(ENV_PREFIX + f.name.upper()))]
        for source, raw in sources:
            if raw is None:
                continue
            try:
                setattr(settings, f.name, _coerce(f.name, default, raw))
            except (TypeError, ValueError) as e:
                logger.warning(f"Invalid {f.name} from {source} ({e}); keeping {getattr(settings, f.name)!r}")

    logger.debug(f"Effective settings: {asdict(settings)}")
    return settings
