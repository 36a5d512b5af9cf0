"""Load matcher settings from config/matcher.yaml and the environment."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from resume_matcher.errors import ConfigError
from resume_matcher.log import get_logger
from resume_matcher.models import TOP_ALL

log = get_logger(__name__)

load_dotenv()

ROOT_DIR: Path = Path(__file__).resolve().parent.parent
CONFIG_DIR: Path = ROOT_DIR / "config"
SETTINGS_PATH: Path = CONFIG_DIR / "matcher.yaml"
REPORTS_DIR: Path = ROOT_DIR / "reports"

DEFAULTS: dict[str, Any] = {
    "provider": "anthropic",
    "model": "",
    "max_tokens": 1000,
    "timeout_seconds": 60.0,
    "top_k": 5,
    "max_workers": 1,
    "encoding": "utf-8",
    "program_name": "Project Onramp",
}

PROVIDERS = ("anthropic", "groq", "offline")

DEFAULT_MODELS: dict[str, str] = {
    "anthropic": "claude-sonnet-4-20250514",
    "groq": "llama-3.3-70b-versatile",
}

# env var -> (settings key, converter)
_ENV_OVERRIDES: dict[str, tuple[str, Any]] = {
    "MATCHER_PROVIDER": ("provider", str),
    "MATCHER_MODEL": ("model", str),
    "MATCHER_TIMEOUT": ("timeout_seconds", float),
    "MATCHER_TOP_K": ("top_k", str),
    "MATCHER_MAX_WORKERS": ("max_workers", int),
}


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def parse_top_k(value: Any) -> int | str:
    """Accept an int >= 1 or the "all" sentinel (case-insensitive)."""
    if isinstance(value, str):
        if value.strip().lower() == TOP_ALL:
            return TOP_ALL
        try:
            value = int(value.strip())
        except ValueError:
            raise ConfigError(f"top_k must be a positive integer or '{TOP_ALL}', got {value!r}")
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigError(f"top_k must be a positive integer or '{TOP_ALL}', got {value!r}")
    return value


def load_settings(path: Path | None = None) -> dict[str, Any]:
    """Defaults, then the YAML file (if present), then MATCHER_* env vars."""
    path = path or SETTINGS_PATH
    data: dict[str, Any] = dict(DEFAULTS)

    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ConfigError(f"{path.name} must contain a mapping at the top level")
        data.update({k: v for k, v in loaded.items() if v is not None})
    else:
        log.debug("No settings file at %s — using defaults", path)

    for env_key, (key, convert) in _ENV_OVERRIDES.items():
        raw = get_env(env_key)
        if not raw:
            continue
        try:
            data[key] = convert(raw)
        except ValueError as exc:
            raise ConfigError(f"{env_key}={raw!r} is invalid: {exc}") from exc

    data["provider"] = str(data["provider"]).lower().strip()
    if data["provider"] not in PROVIDERS:
        raise ConfigError(f"Unknown oracle provider {data['provider']!r} (expected one of: {', '.join(PROVIDERS)})")
    if not data["model"]:
        data["model"] = DEFAULT_MODELS.get(data["provider"], "")
    data["top_k"] = parse_top_k(data["top_k"])
    data["max_workers"] = max(1, int(data["max_workers"]))
    data["timeout_seconds"] = float(data["timeout_seconds"])
    return data


def ensure_dirs() -> None:
    REPORTS_DIR.mkdir(parents=True, exist_ok=True)
