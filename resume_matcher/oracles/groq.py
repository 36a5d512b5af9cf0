"""Groq chat completions through the OpenAI-compatible SDK."""
from __future__ import annotations

import openai
from openai import OpenAI

from resume_matcher.errors import OracleEmptyResponse, OracleServiceUnavailable, OracleTransportFailure
from resume_matcher.log import get_logger
from resume_matcher.oracles.base import FitOracleClient, build_prompt

log = get_logger(__name__)

BASE_URL = "https://api.groq.com/openai/v1"


class GroqOracle(FitOracleClient):
    name = "groq"

    def __init__(
        self,
        api_key: str,
        *,
        model: str = "llama-3.3-70b-versatile",
        max_tokens: int = 1000,
        timeout: float = 60.0,
        program: str = "Project Onramp",
        client: OpenAI | None = None,
    ) -> None:
        self.model = model
        self.max_tokens = max_tokens
        self.program = program
        # max_retries=0: the SDK retries by default, one call per candidate here.
        self.client = client or OpenAI(api_key=api_key, base_url=BASE_URL, timeout=timeout, max_retries=0)

    def request(self, job: str, resume_text: str) -> str:
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": build_prompt(job, resume_text, self.program)}],
                max_tokens=self.max_tokens,
                temperature=0.1,
            )
        except openai.APIConnectionError as exc:
            raise OracleTransportFailure(f"Groq API unreachable: {exc}") from exc
        except openai.APIStatusError as exc:
            raise OracleServiceUnavailable(exc.status_code, str(exc)) from exc

        choices = getattr(resp, "choices", None) or []
        raw = (choices[0].message.content or "").strip() if choices else ""
        if not raw:
            raise OracleEmptyResponse("Groq reply had no message content")
        return raw
