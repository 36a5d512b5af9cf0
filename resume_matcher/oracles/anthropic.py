"""Anthropic Messages API over plain HTTP.

Docs: https://docs.anthropic.com/en/api/messages
"""
from __future__ import annotations

import requests

from resume_matcher.errors import OracleEmptyResponse, OracleServiceUnavailable, OracleTransportFailure
from resume_matcher.log import get_logger
from resume_matcher.oracles.base import FitOracleClient, build_prompt

log = get_logger(__name__)

API_URL = "https://api.anthropic.com/v1/messages"
API_VERSION = "2023-06-01"


class AnthropicOracle(FitOracleClient):
    name = "anthropic"

    def __init__(
        self,
        api_key: str,
        *,
        model: str = "claude-sonnet-4-20250514",
        max_tokens: int = 1000,
        timeout: float = 60.0,
        program: str = "Project Onramp",
        url: str = API_URL,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self.timeout = timeout
        self.program = program
        self.url = url

    def request(self, job: str, resume_text: str) -> str:
        body = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "messages": [{"role": "user", "content": build_prompt(job, resume_text, self.program)}],
        }
        try:
            r = requests.post(
                self.url,
                json=body,
                headers={
                    "x-api-key": self.api_key,
                    "anthropic-version": API_VERSION,
                    "content-type": "application/json",
                },
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise OracleTransportFailure(f"Anthropic API unreachable: {exc}") from exc

        if not r.ok:
            log.debug("Anthropic %d: %s", r.status_code, r.text[:200])
            raise OracleServiceUnavailable(r.status_code)

        try:
            data = r.json()
        except ValueError as exc:
            raise OracleEmptyResponse("Anthropic reply was not JSON") from exc

        blocks = data.get("content") if isinstance(data, dict) else None
        texts = [
            b["text"]
            for b in blocks or []
            if isinstance(b, dict) and b.get("type", "text") == "text" and isinstance(b.get("text"), str)
        ]
        text = "".join(texts).strip()
        if not text:
            raise OracleEmptyResponse("Anthropic reply had no text content")
        return text
