from __future__ import annotations

from dataclasses import dataclass

import pytest

from detection.encodings import CODE_PAGE_LANGUAGES, code_page_of, language_from_encoding


@dataclass
class FakeEncoding:
    code_page: int


@pytest.mark.parametrize(
    ("hint", "expected"),
    [
        (1255, 1255),
        ("1255", 1255),
        (" 28598 ", 28598),
        ("cp1255", 1255),
        ("windows-1255", 1255),
        ("iso-8859-8", 28598),
        ("ISO8859_9", 28599),
        ("euc-kr", 51949),
        ("big5", 950),
        (FakeEncoding(1256), 1256),
    ],
)
def test_code_page_of(hint, expected) -> None:
    assert code_page_of(hint) == expected


@pytest.mark.parametrize("hint", [None, True, "utf-8", "no-such-codec", object()])
def test_code_page_of_unknown_hints(hint) -> None:
    assert code_page_of(hint) is None


@pytest.mark.parametrize(
    ("hint", "expected"),
    [
        (1255, "he"),
        ("iso-8859-6", "ar"),
        ("cp1254", "tr"),
        (860, "pt"),
        (949, "ko"),
        ("euc_jp", "ja"),
        ("gb18030", "zh-Hans"),
        (950, "zh-Hans"),
        (FakeEncoding(1253), "el"),
    ],
)
def test_language_from_encoding(hint, expected) -> None:
    assert language_from_encoding(hint) == expected


@pytest.mark.parametrize("hint", [1252, 65001, 936, "utf-8", "latin-1", None])
def test_encodings_without_a_language(hint) -> None:
    assert language_from_encoding(hint) is None


def test_every_mapped_language_is_registered() -> None:
    from languages import get_registry

    registry = get_registry()
    for tag in set(CODE_PAGE_LANGUAGES.values()):
        assert tag in registry
