"""
Resume-to-job matching pipeline.

Runs: extract text → ask the fit oracle → interpret reply (or fall back) → rank → top-K.
"""
from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Callable, Sequence

from resume_matcher.errors import (
    OracleEmptyResponse,
    OracleError,
    OracleServiceUnavailable,
    OracleTransportFailure,
    PreconditionError,
)
from resume_matcher.extractor import TextExtractor
from resume_matcher.fallback import FallbackScorer
from resume_matcher.interpreter import interpret
from resume_matcher.log import get_logger
from resume_matcher.models import (
    TOP_ALL,
    CandidateInput,
    MatchResult,
    RankedResultSet,
    RunState,
    RunSummary,
    ScoreTier,
    TopK,
)
from resume_matcher.oracles.base import FitOracleClient

log = get_logger(__name__)


@dataclass(frozen=True)
class OracleOutcome:
    """Result of the single oracle call for one candidate.

    ``tier`` is ORACLE when ``reply`` holds the raw text to interpret, or
    one of the fallback tiers when ``error`` says why there is no reply.
    """

    tier: ScoreTier
    reply: str | None = None
    error: OracleError | None = None


def consult(oracle: FitOracleClient, job: str, resume_text: str) -> OracleOutcome:
    try:
        return OracleOutcome(ScoreTier.ORACLE, reply=oracle.request(job, resume_text))
    except OracleServiceUnavailable as exc:
        return OracleOutcome(ScoreTier.SERVICE_UNAVAILABLE, error=exc)
    except (OracleTransportFailure, OracleEmptyResponse) as exc:
        return OracleOutcome(ScoreTier.TRANSPORT_FAILURE, error=exc)
    except Exception as exc:
        log.error("Oracle %s failed unexpectedly: %r", oracle.name, exc)
        return OracleOutcome(ScoreTier.TRANSPORT_FAILURE, error=OracleTransportFailure(str(exc) or repr(exc)))


def rank(results: Sequence[MatchResult], top_k: TopK) -> list[MatchResult]:
    """Score descending; sorted() is stable so ties keep input order."""
    ordered = sorted(results, key=lambda r: -r.score)
    if top_k == TOP_ALL:
        return ordered
    return ordered[:top_k]


def _check_top_k(top_k: TopK) -> None:
    if top_k == TOP_ALL:
        return
    if isinstance(top_k, bool) or not isinstance(top_k, int) or top_k < 1:
        raise PreconditionError(f"top_k must be a positive integer or '{TOP_ALL}', got {top_k!r}")


class MatchPipeline:
    def __init__(
        self,
        oracle: FitOracleClient,
        *,
        extractor: TextExtractor | None = None,
        fallback: FallbackScorer | None = None,
        max_workers: int = 1,
        on_state_change: Callable[[RunState], None] | None = None,
        on_progress: Callable[[int, int], None] | None = None,
    ) -> None:
        self.oracle = oracle
        self.extractor = extractor or TextExtractor()
        self.fallback = fallback or FallbackScorer()
        self.max_workers = max(1, max_workers)
        self.on_state_change = on_state_change
        self.on_progress = on_progress
        self.last_summary = RunSummary()
        self._state = RunState.IDLE
        self._lock = threading.Lock()
        self._cancel = threading.Event()

    @property
    def state(self) -> RunState:
        return self._state

    def _set_state(self, state: RunState) -> None:
        self._state = state
        if self.on_state_change:
            self.on_state_change(state)

    def cancel(self) -> None:
        """Stop starting new candidates; calls already in flight still finish."""
        self._cancel.set()

    def evaluate(self, job: str, candidate: CandidateInput) -> MatchResult:
        """Score one candidate. Never raises for oracle or parse problems."""
        text = self.extractor.extract(candidate)
        outcome = consult(self.oracle, job, text.text)
        return self._resolve(outcome, candidate.identifier)

    def _resolve(self, outcome: OracleOutcome, identifier: str) -> MatchResult:
        if outcome.tier is ScoreTier.ORACLE:
            return interpret(outcome.reply or "", identifier)
        if outcome.tier is ScoreTier.SERVICE_UNAVAILABLE:
            log.warning("Oracle unavailable for %s (%s) — placeholder score", identifier, outcome.error)
            return self.fallback.service_unavailable(identifier)
        log.warning("Oracle unreachable for %s (%s) — offline estimate", identifier, outcome.error)
        return self.fallback.transport_failure(identifier)

    def run(
        self,
        job: str,
        candidates: Sequence[CandidateInput],
        top_k: TopK = TOP_ALL,
    ) -> RankedResultSet:
        if not job or not job.strip():
            raise PreconditionError("job description is empty")
        if not candidates:
            raise PreconditionError("no candidates to match")
        _check_top_k(top_k)

        with self._lock:
            if self._state is RunState.RUNNING:
                raise PreconditionError("a run is already in progress")
            self._cancel.clear()
            self._set_state(RunState.RUNNING)

        total = len(candidates)
        log.info("Matching %d candidate(s) with %s oracle", total, self.oracle.name)
        try:
            if self.max_workers > 1 and total > 1:
                slots = self._run_parallel(job, candidates)
            else:
                slots = self._run_sequential(job, candidates)
        except BaseException:
            self._set_state(RunState.IDLE)
            raise

        results = [r for r in slots if r is not None]
        cancelled = len(results) < total
        summary = RunSummary()
        for r in results:
            summary.add(r.tier)
        self.last_summary = summary

        ranked = RankedResultSet(tuple(rank(results, top_k)), total_candidates=total, cancelled=cancelled)
        if cancelled:
            log.warning("Run cancelled after %d of %d candidates", len(results), total)
        log.info(
            "Scored %d candidates → returning top %d (%s)",
            len(results), len(ranked),
            ", ".join(f"{k}={v}" for k, v in sorted(summary.by_tier.items())),
        )
        self._set_state(RunState.COMPLETED)
        return ranked

    def _progress(self, done: int, total: int) -> None:
        if self.on_progress:
            self.on_progress(done, total)

    def _run_sequential(self, job: str, candidates: Sequence[CandidateInput]) -> list[MatchResult | None]:
        slots: list[MatchResult | None] = [None] * len(candidates)
        for i, candidate in enumerate(candidates):
            if self._cancel.is_set():
                break
            slots[i] = self.evaluate(job, candidate)
            self._progress(i + 1, len(candidates))
        return slots

    def _evaluate_unless_cancelled(self, job: str, candidate: CandidateInput) -> MatchResult | None:
        if self._cancel.is_set():
            return None
        return self.evaluate(job, candidate)

    def _run_parallel(self, job: str, candidates: Sequence[CandidateInput]) -> list[MatchResult | None]:
        # Results land in their input slot so the stable sort still breaks ties by input order.
        slots: list[MatchResult | None] = [None] * len(candidates)
        done = 0
        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(candidates))) as pool:
            futures = {
                pool.submit(self._evaluate_unless_cancelled, job, c): i
                for i, c in enumerate(candidates)
            }
            for future in as_completed(futures):
                slots[futures[future]] = future.result()
                done += 1
                self._progress(done, len(candidates))
        return slots
