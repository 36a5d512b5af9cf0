"""Data models for candidates, match results and ranked runs."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Union

# Sentinel for "no truncation" in top-K.
TOP_ALL = "all"

TopK = Union[int, str]


class RunState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"


class ScoreTier(str, Enum):
    """Where a MatchResult's score came from."""

    ORACLE = "oracle"
    PARSE_DEGRADED = "parse_degraded"
    SERVICE_UNAVAILABLE = "service_unavailable"
    TRANSPORT_FAILURE = "transport_failure"

    @property
    def degraded(self) -> bool:
        return self is not ScoreTier.ORACLE


@dataclass(frozen=True)
class CandidateInput:
    identifier: str
    content: bytes | str


@dataclass(frozen=True)
class CandidateText:
    identifier: str
    text: str
    degraded: bool = False


@dataclass(frozen=True)
class MatchResult:
    identifier: str
    score: int
    reasoning: str
    key_strengths: tuple[str, ...] = ()
    concerns: tuple[str, ...] = ()
    tier: ScoreTier = ScoreTier.ORACLE

    def to_dict(self) -> dict[str, Any]:
        return {
            "identifier": self.identifier,
            "score": self.score,
            "reasoning": self.reasoning,
            "key_strengths": list(self.key_strengths),
            "concerns": list(self.concerns),
            "tier": self.tier.value,
        }


@dataclass(frozen=True)
class RankedResultSet:
    """Results sorted by score descending, ties in input order, cut to top-K."""

    results: tuple[MatchResult, ...]
    total_candidates: int
    cancelled: bool = False

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self) -> Iterator[MatchResult]:
        return iter(self.results)

    def __getitem__(self, index: int) -> MatchResult:
        return self.results[index]

    def to_list(self) -> list[dict[str, Any]]:
        return [r.to_dict() for r in self.results]


@dataclass
class RunSummary:
    """Per-tier counts for the last run, used by logs and the report header."""

    evaluated: int = 0
    by_tier: dict[str, int] = field(default_factory=dict)

    def add(self, tier: ScoreTier) -> None:
        self.evaluated += 1
        self.by_tier[tier.value] = self.by_tier.get(tier.value, 0) + 1
