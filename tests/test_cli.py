"""
Tests for the command-line entry point and file loading.
"""

import json

import pytest

import run_matcher
from resume_matcher.runner import load_candidates


@pytest.fixture
def files(tmp_path):
    job = tmp_path / "job.txt"
    job.write_text("Seeking lab intern with biology coursework", encoding="utf-8")
    resumes = tmp_path / "resumes"
    resumes.mkdir()
    (resumes / "b.txt").write_text("Chemistry minor", encoding="utf-8")
    (resumes / "a.txt").write_text("BS Biology", encoding="utf-8")
    (resumes / "notes.md").write_text("ignored", encoding="utf-8")
    return job, resumes


def test_load_candidates_reads_folder_in_name_order(files):
    _, resumes = files
    candidates = load_candidates([resumes])
    assert [c.identifier for c in candidates] == ["a.txt", "b.txt"]
    assert candidates[0].content == b"BS Biology"


def test_offline_run_prints_json(files, clean_env, capsys):
    job, resumes = files
    clean_env.setenv("MATCHER_PROVIDER", "offline")
    assert run_matcher.main(["--job", str(job), str(resumes), "--top", "all", "--json"]) == 0
    out = capsys.readouterr().out
    data = json.loads(out[out.index("{\n"):])
    assert data["total_candidates"] == 2
    assert len(data["matches"]) == 2
    assert all(m["tier"] == "transport_failure" for m in data["matches"])
    assert all(20 <= m["score"] <= 80 for m in data["matches"])


def test_top_limits_markdown_output(files, clean_env, capsys):
    job, resumes = files
    clean_env.setenv("MATCHER_PROVIDER", "offline")
    assert run_matcher.main(["--job", str(job), str(resumes), "--top", "1"]) == 0
    assert "## Top 1 Best Matches" in capsys.readouterr().out


def test_empty_job_file_is_rejected(files, clean_env):
    job, resumes = files
    job.write_text("  ", encoding="utf-8")
    clean_env.setenv("MATCHER_PROVIDER", "offline")
    assert run_matcher.main(["--job", str(job), str(resumes)]) == 1


def test_bad_top_value(files, clean_env):
    job, resumes = files
    assert run_matcher.main(["--job", str(job), str(resumes), "--top", "zero"]) == 2


def test_missing_resume_path(files, clean_env, tmp_path):
    job, _ = files
    assert run_matcher.main(["--job", str(job), str(tmp_path / "nope")]) == 2


def test_unknown_provider_exits_with_config_error(files, clean_env):
    job, resumes = files
    clean_env.setenv("MATCHER_PROVIDER", "carrier-pigeon")
    assert run_matcher.main(["--job", str(job), str(resumes)]) == 2
