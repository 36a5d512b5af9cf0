from typing import Any, Callable

from .base import FitOracleClient, build_prompt
from .anthropic import AnthropicOracle
from .groq import GroqOracle
from .offline import OfflineOracle

from resume_matcher.config import DEFAULT_MODELS
from resume_matcher.errors import ConfigError
from resume_matcher.log import get_logger

log = get_logger(__name__)

__all__ = [
    "FitOracleClient", "AnthropicOracle", "GroqOracle", "OfflineOracle",
    "build_prompt", "get_oracle",
]

_KEY_VARS: dict[str, str] = {
    "anthropic": "ANTHROPIC_API_KEY",
    "groq": "GROQ_API_KEY",
}


def get_oracle(settings: dict[str, Any], env_getter: Callable[[str], str]) -> FitOracleClient:
    provider = settings.get("provider", "anthropic")
    if provider == "offline":
        log.info("Oracle: offline (all candidates get fallback scores)")
        return OfflineOracle("oracle disabled by configuration")
    if provider not in _KEY_VARS:
        raise ConfigError(f"Unknown oracle provider {provider!r} (expected one of: anthropic, groq, offline)")

    api_key = env_getter(_KEY_VARS[provider])
    if not api_key:
        log.warning("No %s found — using offline oracle", _KEY_VARS[provider])
        return OfflineOracle(f"{_KEY_VARS[provider]} is not set")

    common = dict(
        model=settings.get("model") or DEFAULT_MODELS[provider],
        max_tokens=int(settings.get("max_tokens", 1000)),
        timeout=float(settings.get("timeout_seconds", 60.0)),
        program=settings.get("program_name", "Project Onramp"),
    )
    if provider == "groq":
        log.info("Oracle: Groq (%s)", common["model"])
        return GroqOracle(api_key, **common)
    log.info("Oracle: Anthropic (%s)", common["model"])
    return AnthropicOracle(api_key, **common)
