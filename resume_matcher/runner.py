"""Wire settings, oracle and pipeline together for the CLI and the UI."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Iterable

from resume_matcher.config import get_env, load_settings
from resume_matcher.extractor import TextExtractor
from resume_matcher.log import get_logger
from resume_matcher.models import CandidateInput, RankedResultSet, RunState, TopK
from resume_matcher.oracles import get_oracle
from resume_matcher.pipeline import MatchPipeline

log = get_logger(__name__)

RESUME_SUFFIXES = (".pdf", ".doc", ".docx", ".txt")


def build_pipeline(
    settings: dict[str, Any] | None = None,
    env_getter: Callable[[str], str] = get_env,
    *,
    on_state_change: Callable[[RunState], None] | None = None,
    on_progress: Callable[[int, int], None] | None = None,
) -> MatchPipeline:
    settings = settings or load_settings()
    return MatchPipeline(
        get_oracle(settings, env_getter),
        extractor=TextExtractor(settings.get("encoding", "utf-8")),
        max_workers=settings.get("max_workers", 1),
        on_state_change=on_state_change,
        on_progress=on_progress,
    )


def load_candidates(paths: Iterable[Path]) -> list[CandidateInput]:
    """Read each file's bytes; directories contribute their resume files in name order."""
    candidates: list[CandidateInput] = []
    for path in paths:
        if path.is_dir():
            files = sorted(p for p in path.iterdir() if p.is_file() and p.suffix.lower() in RESUME_SUFFIXES)
        else:
            files = [path]
        for f in files:
            candidates.append(CandidateInput(identifier=f.name, content=f.read_bytes()))
    log.info("Loaded %d resume file(s)", len(candidates))
    return candidates


def run(
    job: str,
    candidates: list[CandidateInput],
    top_k: TopK | None = None,
    settings: dict[str, Any] | None = None,
) -> RankedResultSet:
    settings = settings or load_settings()
    pipeline = build_pipeline(settings)
    return pipeline.run(job, candidates, top_k if top_k is not None else settings["top_k"])
