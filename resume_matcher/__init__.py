"""Rank candidate resumes against a job description."""

__version__ = "0.1.0"
