"""
Load and expose app config (YAML). Used by scripts and ColorGenerator.from_config for bounds, output dir, logging.
"""
from pathlib import Path
from typing import Any

import yaml

from .generator.schema import CHANNELS, DEFAULT_MAX_ATTEMPTS, DEFAULT_MAX_LIMIT, DEFAULT_MIN_LIMIT


class ConfigError(ValueError):
    """Config value has the wrong type or shape."""
    def __init__(self, message: str, key: str = ""):
        super().__init__(message)
        self.key = key


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _defaults()
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a mapping, got {type(data).__name__}")
    return _merge(_defaults(), data)


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursive merge; sections in override extend the defaults instead of replacing them."""
    out = dict(base)
    for key, value in override.items():
        # "output:" with nothing under it loads as None; keep the default section
        if value is None and isinstance(out.get(key), dict):
            continue
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


def _defaults() -> dict[str, Any]:
    return {
        "generator": {
            "max": DEFAULT_MAX_LIMIT.to_dict(),
            "min": DEFAULT_MIN_LIMIT.to_dict(),
            "max_attempts": DEFAULT_MAX_ATTEMPTS,
        },
        "output": {
            "dir": "output",
            "filename_prefix": "pastel",
            "swatch_width": 512,
            "swatch_height": 512,
        },
        "logging": {"level": "INFO"},
    }


def _channel_value(section: dict[str, Any], channel: str, key: str) -> int | None:
    value = section.get(channel)
    if value is None:
        return None
    # bool is an int subclass; "r: true" is a typo, not a bound
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"generator.{key}.{channel} must be an integer, got {value!r}", key=f"generator.{key}.{channel}")
    return value


def resolve_generator_config(config: dict[str, Any]) -> dict[str, Any]:
    """
    Resolve ColorGenerator kwargs from config["generator"].
    Missing or null channels stay None so the generator applies its own defaults.
    """
    gen = config.get("generator") or {}
    kwargs: dict[str, Any] = {}
    for key in ("max", "min"):
        section = gen.get(key) or {}
        if not isinstance(section, dict):
            raise ConfigError(f"generator.{key} must be a mapping of r/g/b", key=f"generator.{key}")
        for channel in CHANNELS:
            kwargs[f"{channel}_{key}"] = _channel_value(section, channel, key)

    max_attempts = gen.get("max_attempts", DEFAULT_MAX_ATTEMPTS)
    if max_attempts is not None and (isinstance(max_attempts, bool) or not isinstance(max_attempts, int) or max_attempts < 1):
        raise ConfigError(f"generator.max_attempts must be a positive integer or null, got {max_attempts!r}", key="generator.max_attempts")
    kwargs["max_attempts"] = max_attempts
    return kwargs


def get_output_dir(config: dict[str, Any]) -> Path:
    """Resolve output directory (relative to project root if needed)."""
    out = config.get("output") or {}
    d = out.get("dir", "output")
    p = Path(d)
    if not p.is_absolute():
        p = _project_root() / p
    return p
