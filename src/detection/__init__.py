"""Heuristic language detection for subtitle text."""

from __future__ import annotations

from detection.detector import (
    PARAGRAPHS_PER_BASELINE,
    baseline_for,
    detect_language,
    detect_language_or_default,
    detect_language_tag,
    detect_paragraphs,
    detect_paragraphs_or_none,
)
from detection.encodings import code_page_of, language_from_encoding

__all__ = [
    "PARAGRAPHS_PER_BASELINE",
    "baseline_for",
    "code_page_of",
    "detect_language",
    "detect_language_or_default",
    "detect_language_tag",
    "detect_paragraphs",
    "detect_paragraphs_or_none",
    "language_from_encoding",
]
