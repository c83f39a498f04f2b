"""Configuration loader for the docket view layer.

Reads YAML configuration, applies environment variable overrides, and returns typed
dataclasses consumed by the derivation functions.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DAY_MS = 24 * 60 * 60 * 1000
HOUR_MS = 60 * 60 * 1000


def _expand_env(value: Any) -> Any:
    if isinstance(value, str):
        return os.path.expandvars(value)
    if isinstance(value, list):
        return [_expand_env(v) for v in value]
    if isinstance(value, dict):
        return {k: _expand_env(v) for k, v in value.items()}
    return value


def _merge_dicts(base: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def _apply_env_overrides(config: Dict[str, Any], prefix: str = "DOCKET") -> Dict[str, Any]:
    """Override config using env vars like DOCKET_POLICY__WINDOW_DAYS=45."""
    overrides: Dict[str, Any] = {}
    for env_key, env_val in os.environ.items():
        if not env_key.startswith(prefix + "_"):
            continue
        trimmed = env_key[len(prefix) + 1 :]
        keys = trimmed.lower().split("__")
        cursor = overrides
        for key in keys[:-1]:
            cursor = cursor.setdefault(key, {})
        cursor[keys[-1]] = _coerce_env_value(env_val)
    return _merge_dicts(config, overrides)


def _coerce_env_value(value: str) -> Any:
    lowered = value.lower()
    if lowered in {"null", "none"}:
        return None
    if lowered in {"true", "yes"}:
        return True
    if lowered in {"false", "no"}:
        return False
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        pass
    return value


@dataclass
class PolicySettings:
    window_days: float = 30

    @property
    def window_ms(self) -> int:
        return int(self.window_days * DAY_MS)


@dataclass
class ClaimSettings:
    # None keeps a named defendant's reservation until a defence is assigned.
    named_defendant_exclusive_seconds: Optional[int] = 900

    @property
    def exclusive_ms(self) -> Optional[int]:
        if self.named_defendant_exclusive_seconds is None:
            return None
        return int(self.named_defendant_exclusive_seconds) * 1000


@dataclass
class CountdownSettings:
    ring_radius: float = 29
    default_total_ms: int = 3_600_000
    next_session_total_ms: int = 3_600_000


@dataclass
class DisplaySettings:
    timezone: str = "UTC"


@dataclass
class WindowSettings:
    next_2h_hours: float = 2
    next_6h_hours: float = 6

    def bound_ms(self, window: str) -> Optional[int]:
        if window == "next-2h":
            return int(self.next_2h_hours * HOUR_MS)
        if window == "next-6h":
            return int(self.next_6h_hours * HOUR_MS)
        return None


@dataclass
class Config:
    policy: PolicySettings = field(default_factory=PolicySettings)
    claims: ClaimSettings = field(default_factory=ClaimSettings)
    countdown: CountdownSettings = field(default_factory=CountdownSettings)
    display: DisplaySettings = field(default_factory=DisplaySettings)
    windows: WindowSettings = field(default_factory=WindowSettings)


def load_config(path: Optional[Path | str] = None, env_prefix: str = "DOCKET") -> Config:
    """Load YAML config and merge env overrides."""
    config_path = Path(path) if path else Path("docket.yaml")
    if config_path.exists():
        with config_path.open("r", encoding="utf-8") as f:
            data = _expand_env(yaml.safe_load(f) or {})
    else:
        data = {}
    merged_dict = _apply_env_overrides(data, prefix=env_prefix)
    return map_dict_to_config(merged_dict)


def map_dict_to_config(data: Dict[str, Any]) -> Config:
    policy = PolicySettings(**(data.get("policy") or {}))
    claims = ClaimSettings(**(data.get("claims") or {}))
    countdown = CountdownSettings(**(data.get("countdown") or {}))
    display = DisplaySettings(**(data.get("display") or {}))
    windows = WindowSettings(**(data.get("windows") or {}))
    return Config(
        policy=policy,
        claims=claims,
        countdown=countdown,
        display=display,
        windows=windows,
    )


__all__ = [
    "Config",
    "PolicySettings",
    "ClaimSettings",
    "CountdownSettings",
    "DisplaySettings",
    "WindowSettings",
    "DAY_MS",
    "HOUR_MS",
    "load_config",
    "map_dict_to_config",
]
