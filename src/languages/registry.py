from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from functools import lru_cache
from types import MappingProxyType

from exceptions import DuplicateLanguageError, LanguageNotFoundError
from logging_utils.logger import get_logger

from .data import LANGUAGE_ROWS, LanguageRow
from .info import LanguageInfo

logger = get_logger(__name__)

DEFAULT_DISPLAY_LOCALE = "en"
DEFAULT_LANGUAGE = "en"


def _display_order(info: LanguageInfo) -> tuple[str, str]:
    return (info.display_name.casefold(), info.name)


class LanguageRegistry:
    """Read-only, case-insensitive collection of languages keyed by name.

    Entries are kept in display order. There is no API to add or remove
    entries after construction; use :meth:`filter` for subsets.
    """

    __slots__ = ("_by_key", "_languages", "_neutral", "_google", "_hunspell", "_tesseract")

    def __init__(self, languages: Iterable[LanguageInfo]):
        ordered = tuple(sorted(languages, key=_display_order))
        by_key: dict[str, LanguageInfo] = {}
        for info in ordered:
            key = info.name.casefold()
            if key in by_key:
                raise DuplicateLanguageError(info.name)
            by_key[key] = info

        self._by_key = MappingProxyType(by_key)
        self._languages = ordered
        self._neutral = tuple(li for li in ordered if li.is_neutral)
        self._google = tuple(li for li in ordered if li.google_name is not None)
        self._hunspell = tuple(li for li in ordered if li.hunspell_name is not None)
        self._tesseract = tuple(li for li in ordered if li.tesseract_name is not None)

    def lookup(self, name: str | None) -> LanguageInfo | None:
        if not name:
            return None
        return self._by_key.get(name.casefold())

    def contains(self, name: str | None) -> bool:
        return self.lookup(name) is not None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)

    def __getitem__(self, name: str) -> LanguageInfo:
        info = self.lookup(name)
        if info is None:
            raise LanguageNotFoundError(name)
        return info

    def __iter__(self) -> Iterator[LanguageInfo]:
        return iter(self._languages)

    def __len__(self) -> int:
        return len(self._languages)

    @property
    def all_languages(self) -> tuple[LanguageInfo, ...]:
        return self._languages

    @property
    def neutral_languages(self) -> tuple[LanguageInfo, ...]:
        """Languages without a territory (``fr`` but not ``fr-CA``)."""
        return self._neutral

    @property
    def google_languages(self) -> tuple[LanguageInfo, ...]:
        return self._google

    @property
    def hunspell_languages(self) -> tuple[LanguageInfo, ...]:
        return self._hunspell

    @property
    def tesseract_languages(self) -> tuple[LanguageInfo, ...]:
        return self._tesseract

    def filter(self, predicate: Callable[[LanguageInfo], bool]) -> tuple[LanguageInfo, ...]:
        return tuple(li for li in self._languages if predicate(li))

    def neutral_info(self, info: LanguageInfo) -> LanguageInfo:
        if info.is_neutral:
            return info
        return self[info.neutral_name]

    def google_info(self, info: LanguageInfo) -> LanguageInfo:
        """Return the closest entry Google Translate knows, English as a last resort."""
        if info.google_name is not None:
            return info
        neutral = self.neutral_info(info)
        if neutral.google_name is not None:
            return neutral
        return self[DEFAULT_LANGUAGE]


def build_registry(
    display_locale: str = DEFAULT_DISPLAY_LOCALE,
    rows: Iterable[LanguageRow] = LANGUAGE_ROWS,
) -> LanguageRegistry:
    """Build a registry whose display names are given in ``display_locale``."""
    languages = [LanguageInfo(*row, display_locale=display_locale) for row in rows]
    for info in languages:
        if not info.resolution.resolved:
            logger.debug(
                "No locale data for %s (%s), showing '%s'",
                info.name,
                info.resolution.reason,
                info.display_name,
            )
    registry = LanguageRegistry(languages)
    logger.debug("Built language registry: %d entries, locale %s", len(registry), display_locale)
    return registry


@lru_cache(maxsize=1)
def get_registry() -> LanguageRegistry:
    """Process-wide registry, built on first use."""
    return build_registry()


def get_language_info(name: str | None) -> LanguageInfo | None:
    return get_registry().lookup(name)


__all__ = [
    "DEFAULT_DISPLAY_LOCALE",
    "DEFAULT_LANGUAGE",
    "LanguageRegistry",
    "build_registry",
    "get_language_info",
    "get_registry",
]
