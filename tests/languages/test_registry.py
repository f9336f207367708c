from __future__ import annotations

import pytest

from exceptions import DuplicateLanguageError, LanguageNotFoundError
from languages import LanguageInfo, LanguageRegistry, build_registry, get_language_info, get_registry
from languages.data import LANGUAGE_ROWS, LanguageRow


@pytest.fixture(scope="module")
def registry() -> LanguageRegistry:
    return get_registry()


def test_registry_holds_every_row(registry) -> None:
    assert len(registry) == len(LANGUAGE_ROWS) == 242
    assert len(registry.neutral_languages) == 161
    assert len(registry.google_languages) == 90
    assert len(registry.hunspell_languages) == 131
    assert len(registry.tesseract_languages) == 108


def test_get_registry_is_shared() -> None:
    assert get_registry() is get_registry()


def test_every_name_round_trips(registry) -> None:
    for info in registry:
        assert registry.lookup(info.name) is info
        assert registry.lookup(info.name.upper()) is info
        assert info.name in registry


def test_lookup_is_case_insensitive(registry) -> None:
    info = registry.lookup("EN-us")
    assert info is not None
    assert info.name == "en-US"
    assert get_language_info("zh-hans").name == "zh-Hans"


@pytest.mark.parametrize("name", ["xx-YY", "english", "", None])
def test_lookup_of_unknown_name_returns_none(registry, name) -> None:
    assert registry.lookup(name) is None
    assert not registry.contains(name)


def test_strict_access_raises(registry) -> None:
    with pytest.raises(LanguageNotFoundError) as exc_info:
        registry["xx-YY"]
    assert str(exc_info.value) == "Unknown language 'xx-YY'"
    assert exc_info.value.name == "xx-YY"

    with pytest.raises(KeyError):
        registry["klingon"]


def test_contains_rejects_non_strings(registry) -> None:
    assert 42 not in registry


def test_every_entry_has_a_neutral_parent(registry) -> None:
    for info in registry:
        neutral = registry.lookup(info.neutral_name)
        assert neutral is not None, info.name
        assert neutral.is_neutral
        assert registry.neutral_info(info) is neutral


def test_mongolian_territory_keeps_its_tag(registry) -> None:
    info = registry.lookup("mn-MN")
    assert info is not None
    assert info.hunspell_name == "mn_Cyrl_MN"
    neutral = registry.neutral_info(info)
    assert neutral.is_neutral
    assert neutral.name == "mn"


def test_full_names(registry) -> None:
    assert registry["de-AT"].full_name == "de_AT"
    assert registry["de"].full_name == "de_DE"
    assert registry["sr-Latn"].full_name == "sr-Latn_RS"
    assert registry["ca:valencia [AVL]"].full_name == "ca_ES"


def test_iteration_is_in_display_order(registry) -> None:
    keys = [(info.display_name.casefold(), info.name) for info in registry]
    assert keys == sorted(keys)
    assert list(registry) == list(registry.all_languages)


def test_views_only_hold_matching_entries(registry) -> None:
    assert all(li.is_neutral for li in registry.neutral_languages)
    assert all(li.google_name for li in registry.google_languages)
    assert all(li.hunspell_name for li in registry.hunspell_languages)
    assert all(li.tesseract_name for li in registry.tesseract_languages)
    assert all(li.is_neutral for li in registry.tesseract_languages)
    assert registry["he"] in registry.google_languages
    assert registry["he"].google_name == "iw"
    assert registry["de-AT"] not in registry.neutral_languages


def test_filter_keeps_display_order(registry) -> None:
    serbian = registry.filter(lambda li: li.three_letter_iso_name == "srp")
    assert {li.name for li in serbian} == {"sr-Cyrl", "sr-Latn"}
    assert list(serbian) == sorted(serbian, key=lambda li: (li.display_name.casefold(), li.name))


class TestGoogleInfo:
    def test_entry_with_google_name_is_returned(self, registry):
        assert registry.google_info(registry["de"]).name == "de"

    def test_territory_falls_back_to_neutral(self, registry):
        assert registry.google_info(registry["de-AT"]).name == "de"
        assert registry.google_info(registry["en-GB"]).name == "en"

    def test_unsupported_language_falls_back_to_english(self, registry):
        assert registry.google_info(registry["ach"]).name == "en"
        assert registry.google_info(registry["pap-AW"]).name == "en"


def test_duplicate_names_are_rejected() -> None:
    rows = [
        LanguageRow("de", "deu", "German", "de_DE"),
        LanguageRow("DE", "deu", "German again", "de_DE"),
    ]
    with pytest.raises(DuplicateLanguageError) as exc_info:
        build_registry(rows=rows)
    assert exc_info.value.name in {"de", "DE"}


def test_small_registry_from_custom_rows() -> None:
    registry = build_registry(
        rows=[
            LanguageRow("fr", "fra", "French", "fr_FR", google_name="fr"),
            LanguageRow("fr-CA", "fra", "French (Canada)", hunspell_name="fr_CA"),
        ]
    )
    assert len(registry) == 2
    assert registry.neutral_info(registry["fr-ca"]).name == "fr"
    assert [li.name for li in registry.hunspell_languages] == ["fr-CA"]


def test_registry_accepts_language_info_instances() -> None:
    registry = LanguageRegistry([LanguageInfo("fr", "fra", "French", "fr_FR")])
    assert registry["FR"].english_name == "French"
