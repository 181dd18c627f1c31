"""
Load and expose app config (YAML). Used by scripts to get default alphas and an optional replay seed.
"""
import logging
from numbers import Real
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError
from .seed import Seed

logger = logging.getLogger(__name__)


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
        data = yaml.safe_load(f)
    if data is None:
        logger.warning("Config %s is empty — using defaults", path)
        return _defaults()
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(data).__name__}")
    return _merge(_defaults(), data)


def _defaults() -> dict[str, Any]:
    return {
        "palette": {"fg_alpha": 1.0, "bg_alpha": 1.0},
        "seed": {"value": None},
    }


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Section-wise merge: nested dicts are merged, everything else replaced."""
    out = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


def _section(config: dict[str, Any], name: str) -> dict[str, Any]:
    """Config section as a mapping; missing or null sections count as empty."""
    section = config.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"{name} must be a mapping, got {type(section).__name__} {section!r}")
    return section


def palette_alphas(config: dict[str, Any]) -> tuple[float, float]:
    """(fg_alpha, bg_alpha) from config; alphas are passed through unclamped."""
    pal = _section(config, "palette")
    alphas = []
    for key in ("fg_alpha", "bg_alpha"):
        v = pal.get(key, 1.0)
        if isinstance(v, bool) or not isinstance(v, Real):
            raise ConfigError(f"palette.{key} must be a number, got {v!r}")
        alphas.append(float(v))
    return alphas[0], alphas[1]


def make_seed(config: dict[str, Any]) -> Seed:
    """Seed from config: seed.value replays a run, null seeds from the clock."""
    value = _section(config, "seed").get("value")
    if value is None:
        return Seed()
    try:
        return Seed.from_value(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"seed.value is invalid: {e}") from e
