"""Legacy code pages that pin a subtitle file to one language."""

from __future__ import annotations

import codecs
from typing import Protocol, Union


class HasCodePage(Protocol):
    code_page: int


EncodingHint = Union[int, str, HasCodePage]

CODE_PAGE_LANGUAGES: dict[int, str] = {
    860: "pt",
    28599: "tr",
    1254: "tr",
    28598: "he",
    1255: "he",
    28596: "ar",
    1256: "ar",
    1258: "vi",
    949: "ko",
    1361: "ko",
    20949: "ko",
    51949: "ko",
    50225: "ko",
    1253: "el",
    28597: "el",
    50220: "ja",
    50221: "ja",
    50222: "ja",
    51932: "ja",
    20932: "ja",
    10001: "ja",
    # Simplified and Traditional Chinese are not told apart by encoding
    20000: "zh-Hans",
    20002: "zh-Hans",
    20936: "zh-Hans",
    950: "zh-Hans",
    52936: "zh-Hans",
    54936: "zh-Hans",
    51936: "zh-Hans",
}

# Python codec names for the code pages above that have one
_CODEC_ALIASES: dict[str, int] = {
    "cp860": 860,
    "iso8859_9": 28599,
    "cp1254": 1254,
    "iso8859_8": 28598,
    "cp1255": 1255,
    "iso8859_6": 28596,
    "cp1256": 1256,
    "cp1258": 1258,
    "cp949": 949,
    "johab": 1361,
    "euc_kr": 51949,
    "iso2022_kr": 50225,
    "cp1253": 1253,
    "iso8859_7": 28597,
    "iso2022_jp": 50220,
    "iso2022_jp_ext": 50221,
    "euc_jp": 51932,
    "gb2312": 20936,
    "cp950": 950,
    "big5": 950,
    "hz": 52936,
    "gb18030": 54936,
}

_CODEC_CODE_PAGES: dict[str, int] = {
    codecs.lookup(alias).name: code_page for alias, code_page in _CODEC_ALIASES.items()
}


def code_page_of(encoding: EncodingHint | None) -> int | None:
    """Return the Windows code page for a hint, or None when it has none we know.

    Accepts a code page number, a codec name such as ``"windows-1255"`` or
    ``"iso-8859-8"``, or an object with a ``code_page`` attribute.
    """
    if encoding is None or isinstance(encoding, bool):
        return None
    if isinstance(encoding, int):
        return encoding
    if isinstance(encoding, str):
        value = encoding.strip()
        if value.isdigit():
            return int(value)
        try:
            canonical = codecs.lookup(value).name
        except LookupError:
            return None
        return _CODEC_CODE_PAGES.get(canonical)
    code_page = getattr(encoding, "code_page", None)
    return code_page if isinstance(code_page, int) else None


def language_from_encoding(encoding: EncodingHint | None) -> str | None:
    code_page = code_page_of(encoding)
    if code_page is None:
        return None
    return CODE_PAGE_LANGUAGES.get(code_page)


__all__ = ["CODE_PAGE_LANGUAGES", "EncodingHint", "code_page_of", "language_from_encoding"]
