# digest_catalog/config/loader.py
"""
Configuration loader for digest-catalog.

Responsibilities:
- Load default config
- Load user config (optional)
- Expand ${ENV_VAR} placeholders
- Validate via schema
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from digest_catalog.config.schema import ReconcileConfig
from digest_catalog.exceptions import ConfigError
from digest_catalog.logging import get_logger
from digest_catalog.logging.tags import CONFIG

logger = get_logger(__name__)


DEFAULT_CONFIG_PATH = Path(__file__).parent / "default.yaml"


def _expand_env(value: Any) -> Any:
    if isinstance(value, str):
        return os.path.expandvars(value)
    if isinstance(value, dict):
        return {k: _expand_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand_env(v) for v in value]
    return value


def _load_yaml(path: Path) -> dict:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    return _expand_env(data)


def load_config(user_config_path: Path | None = None) -> ReconcileConfig:
    """
    Load and validate reconciliation configuration.

    Precedence:
    - defaults
    - user config (overrides defaults)
    """
    logger.debug(f"{CONFIG} Loading default config from {DEFAULT_CONFIG_PATH}")
    base_cfg = _load_yaml(DEFAULT_CONFIG_PATH)

    if user_config_path:
        logger.debug(f"{CONFIG} Loading user config from {user_config_path}")
        user_cfg = _load_yaml(Path(user_config_path))
        base_cfg.update(user_cfg)

    try:
        return ReconcileConfig.model_validate(base_cfg)
    except ValidationError as exc:
        lines = [f"Invalid configuration{f' in {user_config_path}' if user_config_path else ''}:"]
        for err in exc.errors():
            loc = " -> ".join(str(x) for x in err.get("loc", []))
            lines.append(f"  - {loc}: {err.get('msg', 'Unknown error')}")
        raise ConfigError("\n".join(lines)) from exc


__all__ = ["DEFAULT_CONFIG_PATH", "load_config"]
