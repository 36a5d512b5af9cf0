"""Streamlit UI for the resume matcher."""
from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT))

from resume_matcher.config import load_settings
from resume_matcher.errors import ConfigError, PreconditionError
from resume_matcher.log import get_logger
from resume_matcher.models import TOP_ALL, CandidateInput, MatchResult
from resume_matcher.report import build_report, score_label
from resume_matcher.runner import RESUME_SUFFIXES, build_pipeline

log = get_logger(__name__)

TOP_CHOICES: dict[str, int | str] = {
    "3 students": 3,
    "5 students": 5,
    "10 students": 10,
    "All students": TOP_ALL,
}

_SCORE_COLOURS: list[tuple[int, str]] = [
    (80, "green"),
    (60, "blue"),
    (40, "orange"),
    (0, "red"),
]

_CSS = """
<style>
.match-card {
    padding: 1rem 1.25rem;
    background: rgba(255,255,255,0.65);
    border: 1px solid rgba(74,144,217,0.25);
    border-radius: 12px;
    box-shadow: 0 4px 16px rgba(0,0,0,0.05);
    margin-bottom: 0.75rem;
}
</style>
"""


def _score_colour(score: int) -> str:
    for floor, colour in _SCORE_COLOURS:
        if score >= floor:
            return colour
    return "red"


def _render_match(rank: int, match: MatchResult) -> None:
    colour = _score_colour(match.score)
    st.markdown(f"#### #{rank} {match.identifier}")
    st.markdown(f":{colour}[**{match.score}%** • {score_label(match.score)}]")
    if match.tier.degraded:
        st.caption("Placeholder score — the AI assessment was not available for this resume.")
    st.write(match.reasoning)
    if match.key_strengths:
        st.markdown("**Key Strengths:** " + " · ".join(match.key_strengths))
    if match.concerns:
        st.markdown("**Areas to Consider:** " + " · ".join(match.concerns))
    st.divider()


def main() -> None:
    st.set_page_config(page_title="Resume Matcher", page_icon="⭐", layout="wide")
    st.markdown(_CSS, unsafe_allow_html=True)
    st.title("Project Onramp Resume Matcher")
    st.caption("Upload resumes and job descriptions to find the best student matches")

    try:
        settings = load_settings()
    except ConfigError as exc:
        st.error(f"Configuration error: {exc}")
        return

    left, right = st.columns(2)
    with left:
        st.subheader("Job Description")
        job = st.text_area(
            "Job description",
            placeholder="Paste the job description from the company here...",
            height=220,
            label_visibility="collapsed",
        )
    with right:
        st.subheader("Student Resumes")
        uploads = st.file_uploader(
            "Resumes",
            type=[s.lstrip(".") for s in RESUME_SUFFIXES],
            accept_multiple_files=True,
            label_visibility="collapsed",
        )
        if uploads:
            st.caption(f"{len(uploads)} files selected")

    labels = list(TOP_CHOICES)
    default = next((i for i, k in enumerate(labels) if TOP_CHOICES[k] == settings["top_k"]), 1)
    choice = st.selectbox("Show top:", labels, index=default)

    ready = bool(job.strip()) and bool(uploads)
    if not st.button("Find Best Matches", type="primary", disabled=not ready):
        return

    candidates = [CandidateInput(identifier=f.name, content=f.getvalue()) for f in uploads]
    progress = st.progress(0.0, text="Analyzing resumes...")
    try:
        pipeline = build_pipeline(
            settings,
            on_progress=lambda done, total: progress.progress(done / total, text=f"Analyzing resumes... {done}/{total}"),
        )
    except ConfigError as exc:
        progress.empty()
        st.error(f"Configuration error: {exc}")
        return
    try:
        ranked = pipeline.run(job, candidates, TOP_CHOICES[choice])
    except PreconditionError as exc:
        st.warning(f"Please provide both job description and resume files ({exc})")
        return
    finally:
        progress.empty()

    st.subheader(f"Top {len(ranked)} Best Matches")
    for i, match in enumerate(ranked, 1):
        _render_match(i, match)

    st.download_button("Download report", build_report(ranked, job), file_name="matches.md")


main()
