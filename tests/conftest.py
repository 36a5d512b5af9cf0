"""
Pytest configuration and shared fixtures.
"""

import os

os.environ.setdefault("MATCHER_LOG_FILE", "0")

import json
from typing import Callable, List, Optional, Union

import pytest

from resume_matcher.fallback import FallbackScorer
from resume_matcher.models import CandidateInput
from resume_matcher.oracles.base import FitOracleClient


Reply = Union[str, Exception, Callable[[str, str], str]]


class ScriptedOracle(FitOracleClient):
    """Oracle double that replays one scripted reply (or error) per call."""

    name = "scripted"

    def __init__(self, replies: List[Reply]):
        self.replies = list(replies)
        self.calls: List[tuple] = []

    def request(self, job: str, resume_text: str) -> str:
        self.calls.append((job, resume_text))
        reply = self.replies[len(self.calls) - 1]
        if isinstance(reply, Exception):
            raise reply
        if callable(reply):
            return reply(job, resume_text)
        return reply


class FixedRandom:
    """Random source returning preset values and recording requested ranges."""

    def __init__(self, values: List[int]):
        self.values = list(values)
        self.ranges: List[tuple] = []

    def randint(self, a: int, b: int) -> int:
        self.ranges.append((a, b))
        return self.values.pop(0)


def assessment(score, reasoning="Good fit", strengths=None, concerns=None) -> str:
    return json.dumps({
        "score": score,
        "reasoning": reasoning,
        "key_strengths": strengths if strengths is not None else ["biology degree"],
        "concerns": concerns if concerns is not None else [],
    })


@pytest.fixture
def job_text() -> str:
    return "Seeking lab intern with biology coursework"


@pytest.fixture
def make_candidates() -> Callable[[int], List[CandidateInput]]:
    def _make(n: int, prefix: str = "student") -> List[CandidateInput]:
        return [
            CandidateInput(identifier=f"{prefix}{i}.txt", content=f"Resume of {prefix} {i}".encode())
            for i in range(1, n + 1)
        ]
    return _make


@pytest.fixture
def fixed_fallback() -> Callable[[List[int]], FallbackScorer]:
    def _make(values: List[int]) -> FallbackScorer:
        return FallbackScorer(FixedRandom(values))
    return _make


@pytest.fixture
def clean_env(monkeypatch):
    """Remove matcher env vars so settings come only from files/defaults."""
    for key in (
        "MATCHER_PROVIDER", "MATCHER_MODEL", "MATCHER_TIMEOUT", "MATCHER_TOP_K",
        "MATCHER_MAX_WORKERS", "ANTHROPIC_API_KEY", "GROQ_API_KEY",
    ):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
