"""Stand-in oracle for when no API key is configured."""
from __future__ import annotations

from resume_matcher.errors import OracleTransportFailure
from resume_matcher.oracles.base import FitOracleClient


class OfflineOracle(FitOracleClient):
    name = "offline"

    def __init__(self, reason: str = "no oracle API key configured") -> None:
        self.reason = reason

    def request(self, job: str, resume_text: str) -> str:
        raise OracleTransportFailure(self.reason)
