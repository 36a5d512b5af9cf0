"""Render ranked matches as a markdown report or JSON."""
from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from resume_matcher.config import REPORTS_DIR
from resume_matcher.log import get_logger
from resume_matcher.models import RankedResultSet

log = get_logger(__name__)

# (minimum score, label) checked top-down
_SCORE_LABELS: list[tuple[int, str]] = [
    (80, "Excellent Match"),
    (60, "Good Match"),
    (40, "Fair Match"),
    (0, "Needs Support"),
]


def score_label(score: int) -> str:
    for floor, label in _SCORE_LABELS:
        if score >= floor:
            return label
    return _SCORE_LABELS[-1][1]


def _excerpt(text: str, limit: int = 80) -> str:
    first = text.strip().splitlines()[0] if text.strip() else ""
    return first[:limit] + ("…" if len(first) > limit else "")


def build_report(ranked: RankedResultSet, job: str = "") -> str:
    date = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
    lines: list[str] = [f"# Resume Match Report — {date}", ""]
    if job:
        lines.append(f"**Role:** {_excerpt(job)}")
        lines.append("")

    degraded = sum(1 for r in ranked if r.tier.degraded)
    lines.append(f"**{ranked.total_candidates}** resumes scored | showing top **{len(ranked)}**")
    if degraded:
        lines.append("")
        lines.append(f"_{degraded} result(s) below are placeholder scores, not full AI assessments._")
    if ranked.cancelled:
        lines.append("")
        lines.append("_Run was cancelled before every resume was scored._")
    lines.append("")

    if len(ranked):
        lines.append(f"## Top {len(ranked)} Best Matches")
        lines.append("")
    for i, r in enumerate(ranked, 1):
        lines.append(f"### #{i} {r.identifier}")
        lines.append(f"- **Score:** {r.score}% — {score_label(r.score)}")
        lines.append(f"- **Why:** {r.reasoning}")
        if r.key_strengths:
            lines.append(f"- **Key Strengths:** {', '.join(r.key_strengths)}")
        if r.concerns:
            lines.append(f"- **Areas to Consider:** {', '.join(r.concerns)}")
        lines.append("")

    log.info("Built match report: %d shown, %d degraded", len(ranked), degraded)
    return "\n".join(lines)


def to_json(ranked: RankedResultSet) -> str:
    return json.dumps(
        {
            "total_candidates": ranked.total_candidates,
            "cancelled": ranked.cancelled,
            "matches": ranked.to_list(),
        },
        indent=2,
    )


def write_report(content: str, directory: Path | None = None) -> Path:
    directory = directory or REPORTS_DIR
    directory.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(timezone.utc).strftime("%Y-%m-%d_%H%M%S")
    path = directory / f"matches_{stamp}.md"
    path.write_text(content, encoding="utf-8")
    log.info("Report written → %s", path)
    return path
