"""
Tests for candidate text extraction.
"""

from resume_matcher.extractor import TextExtractor
from resume_matcher.models import CandidateInput


class TestTextExtractor:
    """Decoding candidate uploads."""

    def test_utf8_bytes_decoded(self):
        text = TextExtractor().extract(CandidateInput("alice.txt", "BS Biology, café".encode("utf-8")))
        assert text.text == "BS Biology, café"
        assert text.identifier == "alice.txt"
        assert not text.degraded

    def test_str_content_passes_through(self):
        text = TextExtractor().extract(CandidateInput("bob.txt", "Lab assistant"))
        assert text.text == "Lab assistant"
        assert not text.degraded

    def test_undecodable_bytes_fall_back_to_identifier(self):
        text = TextExtractor().extract(CandidateInput("scan.pdf", b"%PDF-1.4\xff\xfe\x00\x81"))
        assert text.text == "scan.pdf"
        assert text.degraded

    def test_blank_content_falls_back_to_identifier(self):
        text = TextExtractor().extract(CandidateInput("empty.txt", b"   \n"))
        assert text.text == "empty.txt"
        assert text.degraded

    def test_configured_encoding(self):
        raw = "Résumé".encode("latin-1")
        assert TextExtractor("utf-8").extract(CandidateInput("r.txt", raw)).degraded
        assert TextExtractor("latin-1").extract(CandidateInput("r.txt", raw)).text == "Résumé"

    def test_unknown_encoding_does_not_raise(self):
        text = TextExtractor("no-such-codec").extract(CandidateInput("r.txt", b"hello"))
        assert text.text == "r.txt"
        assert text.degraded
