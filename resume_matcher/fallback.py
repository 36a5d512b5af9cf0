"""Placeholder scores for candidates the oracle could not assess."""
from __future__ import annotations

import random
from typing import Protocol

from resume_matcher.models import MatchResult, ScoreTier

SERVICE_UNAVAILABLE_RANGE = (30, 70)
TRANSPORT_FAILURE_RANGE = (20, 80)

SERVICE_UNAVAILABLE_REASONING = (
    "Scoring service unavailable - this is a placeholder score, not an assessment of the resume."
)
SERVICE_UNAVAILABLE_STRENGTHS = ("File processed",)
SERVICE_UNAVAILABLE_CONCERNS = ("Full analysis pending",)

TRANSPORT_FAILURE_STRENGTHS = ("Educational background", "Motivated student", "Program participant")
TRANSPORT_FAILURE_CONCERNS = ("May need additional support",)


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def potential_label(score: int) -> str:
    if score > 60:
        return "strong"
    if score > 40:
        return "moderate"
    return "basic"


class FallbackScorer:
    """Builds degraded results without calling the oracle.

    Each call draws a fresh score from *rng*; pass a seeded
    ``random.Random`` to get repeatable values.
    """

    def __init__(self, rng: RandomSource | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def service_unavailable(self, identifier: str) -> MatchResult:
        return MatchResult(
            identifier=identifier,
            score=self.rng.randint(*SERVICE_UNAVAILABLE_RANGE),
            reasoning=SERVICE_UNAVAILABLE_REASONING,
            key_strengths=SERVICE_UNAVAILABLE_STRENGTHS,
            concerns=SERVICE_UNAVAILABLE_CONCERNS,
            tier=ScoreTier.SERVICE_UNAVAILABLE,
        )

    def transport_failure(self, identifier: str) -> MatchResult:
        score = self.rng.randint(*TRANSPORT_FAILURE_RANGE)
        return MatchResult(
            identifier=identifier,
            score=score,
            reasoning=(
                f"Offline estimate (scoring service unreachable): this student shows "
                f"{potential_label(score)} potential for the role based on available information."
            ),
            key_strengths=TRANSPORT_FAILURE_STRENGTHS,
            concerns=TRANSPORT_FAILURE_CONCERNS if score < 50 else (),
            tier=ScoreTier.TRANSPORT_FAILURE,
        )
