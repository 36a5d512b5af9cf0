"""Turn a candidate's raw upload into plain text for the oracle prompt."""
from __future__ import annotations

from resume_matcher.log import get_logger
from resume_matcher.models import CandidateInput, CandidateText

log = get_logger(__name__)


class TextExtractor:
    """Decode candidate content; on failure the identifier stands in as the text."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def extract(self, candidate: CandidateInput) -> CandidateText:
        content = candidate.content
        if isinstance(content, str):
            text = content
        else:
            try:
                text = bytes(content).decode(self.encoding)
            except (UnicodeDecodeError, LookupError, TypeError) as exc:
                log.warning("Could not read %s (%s), using filename for matching", candidate.identifier, exc)
                return CandidateText(candidate.identifier, candidate.identifier, degraded=True)

        if not text.strip():
            log.warning("No text in %s, using filename for matching", candidate.identifier)
            return CandidateText(candidate.identifier, candidate.identifier, degraded=True)
        return CandidateText(candidate.identifier, text)
