from __future__ import annotations

from collections.abc import Sequence

from languages import DEFAULT_LANGUAGE, LanguageInfo, LanguageRegistry, get_registry
from logging_utils.logger import get_logger

from .encodings import EncodingHint, language_from_encoding
from .rules import run_rules

logger = get_logger(__name__)

PARAGRAPHS_PER_BASELINE = 14


def baseline_for(paragraph_count: int, per: int = PARAGRAPHS_PER_BASELINE) -> int:
    """Minimum marker score a language needs, given how many paragraphs were scanned."""
    if paragraph_count <= 0 or per <= 0:
        return 0
    return paragraph_count // per


def detect_language_tag(text: str | None, baseline: int = 0) -> str | None:
    if not text:
        return None
    return run_rules(text, baseline)


def detect_language(
    text: str | None,
    baseline: int = 0,
    registry: LanguageRegistry | None = None,
) -> LanguageInfo | None:
    """Guess the language from marker words only.

    Returns None when no rule is confident enough.
    """
    if registry is None:
        registry = get_registry()
    tag = detect_language_tag(text, baseline)
    if tag is None:
        logger.debug("No language rule matched (baseline %d)", baseline)
        return None
    logger.debug("Detected %s from marker words (baseline %d)", tag, baseline)
    return registry.lookup(tag)


def detect_language_or_default(
    text: str | None,
    encoding: EncodingHint | None = None,
    baseline: int = 0,
    registry: LanguageRegistry | None = None,
    default: str = DEFAULT_LANGUAGE,
) -> LanguageInfo:
    """Guess the language, trying the encoding first and falling back to ``default``.

    A code page tied to one language decides the answer without looking at
    the text when the registry knows that language. Never returns None: a
    registry without the default or English falls back to the shared English
    entry.
    """
    if registry is None:
        registry = get_registry()
    tag = language_from_encoding(encoding)
    if tag is not None:
        info = registry.lookup(tag)
        if info is not None:
            logger.debug("Encoding %s implies %s", encoding, tag)
            return info
        logger.debug("Encoding %s implies %s, which is not registered", encoding, tag)
    info = detect_language(text, baseline, registry)
    if info is not None:
        return info
    logger.debug("Falling back to default language %s", default)
    fallback = registry.lookup(default) or registry.lookup(DEFAULT_LANGUAGE)
    if fallback is not None:
        return fallback
    return get_registry()[DEFAULT_LANGUAGE]


def _join_paragraphs(paragraphs: Sequence[str]) -> str:
    return "".join(f"{paragraph}\n" for paragraph in paragraphs)


def detect_paragraphs_or_none(
    paragraphs: Sequence[str],
    registry: LanguageRegistry | None = None,
    per: int = PARAGRAPHS_PER_BASELINE,
) -> LanguageInfo | None:
    return detect_language(
        _join_paragraphs(paragraphs), baseline_for(len(paragraphs), per), registry
    )


def detect_paragraphs(
    paragraphs: Sequence[str],
    encoding: EncodingHint | None = None,
    registry: LanguageRegistry | None = None,
    per: int = PARAGRAPHS_PER_BASELINE,
    default: str = DEFAULT_LANGUAGE,
) -> LanguageInfo:
    return detect_language_or_default(
        _join_paragraphs(paragraphs),
        encoding,
        baseline_for(len(paragraphs), per),
        registry,
        default,
    )


__all__ = [
    "PARAGRAPHS_PER_BASELINE",
    "baseline_for",
    "detect_language",
    "detect_language_or_default",
    "detect_language_tag",
    "detect_paragraphs",
    "detect_paragraphs_or_none",
]
