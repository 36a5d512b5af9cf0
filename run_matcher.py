#!/usr/bin/env python3
"""Rank resume files against a job description from the command line."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from resume_matcher.config import load_settings, parse_top_k
from resume_matcher.errors import ConfigError, PreconditionError
from resume_matcher.log import get_logger
from resume_matcher.report import build_report, to_json, write_report
from resume_matcher.runner import load_candidates, run

log = get_logger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find the best student matches for a job description.")
    parser.add_argument("--job", type=Path, required=True, help="Text file with the job description")
    parser.add_argument("resumes", type=Path, nargs="+", help="Resume files or folders of resumes")
    parser.add_argument("--top", default=None, help="How many matches to show (a number or 'all')")
    parser.add_argument("--json", action="store_true", help="Print results as JSON instead of markdown")
    parser.add_argument("--report", action="store_true", help="Also save the markdown report under reports/")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        settings = load_settings()
        top_k = parse_top_k(args.top) if args.top is not None else settings["top_k"]
    except ConfigError as exc:
        log.error("Configuration error: %s", exc)
        return 2

    if not args.job.is_file():
        log.error("Job description file not found: %s", args.job)
        return 2
    missing = [p for p in args.resumes if not p.exists()]
    if missing:
        log.error("Resume path(s) not found: %s", ", ".join(str(p) for p in missing))
        return 2

    job = args.job.read_text(encoding="utf-8", errors="replace")
    try:
        ranked = run(job, load_candidates(args.resumes), top_k, settings)
    except ConfigError as exc:
        log.error("Configuration error: %s", exc)
        return 2
    except PreconditionError as exc:
        log.error("Please provide both job description and resume files (%s)", exc)
        return 1

    report = build_report(ranked, job)
    print(to_json(ranked) if args.json else report)
    if args.report:
        write_report(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
