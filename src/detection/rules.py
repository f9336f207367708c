"""Ordered keyword rules for guessing the language of subtitle text.

Rules are tried top to bottom and the first one that accepts the text wins.
Order matters: earlier rules shadow later ones (Danish before Norwegian,
Spanish before Portuguese), and a rule whose guard rejects the text simply
lets the next rule have a go.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Protocol

from . import markers as m

# Thai and Korean marker lists are tiny, so a fixed score also counts as a match
SMALL_LIST_FLOOR = 10


class Markers(Protocol):
    def count(self, text: str) -> int: ...


Guard = Callable[[str, int], "str | None"]
Threshold = Callable[[int, int], bool]


def above_baseline(score: int, baseline: int) -> bool:
    return score > baseline


def above_baseline_or_floor(score: int, baseline: int) -> bool:
    return score > SMALL_LIST_FLOOR or score > baseline


def above_double_baseline(score: int, baseline: int) -> bool:
    return score > baseline * 2


@dataclass(frozen=True)
class DetectionRule:
    """One step of the chain.

    ``guard`` receives the text and this rule's score once the threshold is
    met, and returns the final tag or None to pass on to the next rule.
    """

    language: str
    markers: Markers
    guard: Guard | None = None
    threshold: Threshold = above_baseline

    def evaluate(self, text: str, baseline: int) -> str | None:
        score = self.markers.count(text)
        if not self.threshold(score, baseline):
            return None
        if self.guard is None:
            return self.language
        return self.guard(text, score)


def _english_spelling(text: str, score: int) -> str:
    us_count = m.ENGLISH_US.count(text)
    gb_count = m.ENGLISH_GB.count(text)
    return "en-GB" if gb_count > us_count else "en-US"


def _danish(text: str, score: int) -> str | None:
    if m.NOT_DANISH.count(text) < 2 and m.DUTCH.count(text) < score:
        return "da"
    return None


def _norwegian(text: str, score: int) -> str | None:
    if m.NOT_NORWEGIAN.count(text) < 2 and m.DUTCH.count(text) < score:
        return "no"
    return None


def _spanish(text: str, score: int) -> str | None:
    if m.FRENCH_NOT_SPANISH.count(text) < 2 and m.PORTUGUESE_NOT_SPANISH.count(text) < 2:
        return "es"
    return None


def _italian(text: str, score: int) -> str | None:
    if m.FRENCH_NOT_SPANISH.count(text) < 2:
        return "it"
    return None


def _french(text: str, score: int) -> str | None:
    if m.ROMANIAN_NOT_FRENCH.count(text) < 5:
        return "fr"
    return None


def _arabic(text: str, score: int) -> str | None:
    if m.HEBREW.count(text) < score:
        return "ar"
    return None


def _croatian_or_serbian(text: str, score: int) -> str:
    if m.CROATIAN.count(text) > m.SERBIAN.count(text):
        return "hr"
    return "sr-Latn"


# Add new languages to the language table before adding them here.
DETECTION_RULES: tuple[DetectionRule, ...] = (
    DetectionRule("en", m.ENGLISH, _english_spelling),
    DetectionRule("da", m.DANISH, _danish),
    DetectionRule("no", m.NORWEGIAN, _norwegian),
    DetectionRule("sv", m.SWEDISH),
    DetectionRule("es", m.SPANISH, _spanish),
    DetectionRule("it", m.ITALIAN, _italian),
    DetectionRule("fr", m.FRENCH, _french),
    DetectionRule("pt", m.PORTUGUESE),
    DetectionRule("de", m.GERMAN),
    DetectionRule("nl", m.DUTCH),
    DetectionRule("pl", m.POLISH),
    DetectionRule("el", m.GREEK),
    DetectionRule("ru", m.RUSSIAN),
    DetectionRule("uk", m.UKRAINIAN),
    DetectionRule("bg", m.BULGARIAN),
    DetectionRule("ar", m.ARABIC, _arabic),
    DetectionRule("he", m.HEBREW),
    DetectionRule("hr", m.CROATIAN_AND_SERBIAN, _croatian_or_serbian),
    DetectionRule("sr-Cyrl", m.SERBIAN_CYRILLIC),
    DetectionRule("vi", m.VIETNAMESE),
    DetectionRule("hu", m.HUNGARIAN),
    DetectionRule("tr", m.TURKISH),
    DetectionRule("id", m.INDONESIAN),
    DetectionRule("th", m.THAI, threshold=above_baseline_or_floor),
    DetectionRule("ko", m.KOREAN, threshold=above_baseline_or_floor),
    DetectionRule("fi", m.FINNISH),
    DetectionRule("ro", m.ROMANIAN),
    DetectionRule("ja", m.JAPANESE, threshold=above_double_baseline),
    DetectionRule("zh-Hans", m.CHINESE_SIMPLIFIED, threshold=above_double_baseline),
)


def run_rules(
    text: str, baseline: int = 0, rules: Sequence[DetectionRule] = DETECTION_RULES
) -> str | None:
    for rule in rules:
        tag = rule.evaluate(text, baseline)
        if tag is not None:
            return tag
    return None


__all__ = [
    "DETECTION_RULES",
    "DetectionRule",
    "SMALL_LIST_FLOOR",
    "above_baseline",
    "above_baseline_or_floor",
    "above_double_baseline",
    "run_rules",
]
