"""Exception types raised by the matcher.

Only ``PreconditionError`` escapes ``MatchPipeline.run``; oracle errors are
turned into fallback scores per candidate.
"""
from __future__ import annotations


class MatcherError(Exception):
    """Base class for matcher errors."""


class PreconditionError(MatcherError, ValueError):
    """A run was requested with invalid inputs (blank job, no candidates, bad top-K)."""


class ConfigError(MatcherError):
    """Settings file or environment could not be turned into a usable config."""


class OracleError(MatcherError):
    """Base class for fit-oracle call failures."""


class OracleTransportFailure(OracleError):
    """The oracle could not be reached at all (network error, timeout, no service)."""


class OracleServiceUnavailable(OracleError):
    """The oracle answered with a non-success status."""

    def __init__(self, status_code: int, message: str = "") -> None:
        self.status_code = status_code
        super().__init__(message or f"oracle returned HTTP {status_code}")


class OracleEmptyResponse(OracleError):
    """The oracle answered successfully but the payload held no usable text."""
