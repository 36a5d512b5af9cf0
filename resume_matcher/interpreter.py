"""Turn the oracle's raw reply into a MatchResult.

Oracles often wrap their JSON in markdown fences or add a sentence before
it, so the reply is cleaned up before parsing. Anything that still cannot
be read becomes the fixed parse-degraded result; nothing here raises.
"""
from __future__ import annotations

import json
import re
from typing import Any

from resume_matcher.log import get_logger
from resume_matcher.models import MatchResult, ScoreTier

log = get_logger(__name__)

_LEADING_FENCE = re.compile(r"^\s*```[\w+-]*[ \t]*\n?")
_TRAILING_FENCE = re.compile(r"\n?```\s*$")

PARSE_DEGRADED_SCORE = 50
PARSE_DEGRADED_REASONING = (
    "Unable to fully analyze this resume, but basic matching suggests moderate fit."
)
PARSE_DEGRADED_STRENGTHS = ("Resume uploaded successfully",)
PARSE_DEGRADED_CONCERNS = ("Analysis incomplete",)


class ReplyFormatError(ValueError):
    """Raised internally when a reply cannot be read as a fit assessment."""


def strip_code_fence(raw: str) -> str:
    text = _LEADING_FENCE.sub("", raw, count=1)
    text = _TRAILING_FENCE.sub("", text, count=1)
    return text.strip()


def parse_degraded(identifier: str) -> MatchResult:
    return MatchResult(
        identifier=identifier,
        score=PARSE_DEGRADED_SCORE,
        reasoning=PARSE_DEGRADED_REASONING,
        key_strengths=PARSE_DEGRADED_STRENGTHS,
        concerns=PARSE_DEGRADED_CONCERNS,
        tier=ScoreTier.PARSE_DEGRADED,
    )


def _load_object(text: str) -> dict[str, Any]:
    try:
        data = json.loads(text)
    except ValueError:
        start = text.find("{")
        end = text.rfind("}") + 1
        if start == -1 or end <= start:
            raise ReplyFormatError("reply contains no JSON object")
        try:
            data = json.loads(text[start:end])
        except ValueError as exc:
            raise ReplyFormatError(f"malformed JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ReplyFormatError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _coerce_score(value: Any) -> int:
    if value is None or isinstance(value, bool):
        raise ReplyFormatError(f"score is missing or not numeric: {value!r}")
    try:
        score = int(round(float(value)))
    except (TypeError, ValueError, OverflowError) as exc:
        raise ReplyFormatError(f"score is not numeric: {value!r}") from exc
    if not 0 <= score <= 100:
        log.warning("Oracle score %d outside 0-100, clamping", score)
        score = min(max(score, 0), 100)
    return score


def _coerce_labels(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value.strip(),) if value.strip() else ()
    if isinstance(value, (list, tuple)):
        return tuple(str(v).strip() for v in value if v is not None and str(v).strip())
    return ()


def interpret(raw: str, identifier: str) -> MatchResult:
    """Build a MatchResult for *identifier* from the oracle reply *raw*."""
    try:
        data = _load_object(strip_code_fence(raw or ""))
        score = _coerce_score(data.get("score"))
        reasoning = data.get("reasoning")
        if not isinstance(reasoning, str) or not reasoning.strip():
            raise ReplyFormatError("reasoning is missing or empty")
    except ReplyFormatError as exc:
        log.warning("Could not parse oracle reply for %s (%s)", identifier, exc)
        return parse_degraded(identifier)

    return MatchResult(
        identifier=identifier,
        score=score,
        reasoning=reasoning.strip(),
        key_strengths=_coerce_labels(data.get("key_strengths")),
        concerns=_coerce_labels(data.get("concerns")),
        tier=ScoreTier.ORACLE,
    )
