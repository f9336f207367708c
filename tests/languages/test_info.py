from __future__ import annotations

import pytest
from langcodes.tag_parser import LanguageTagError

import languages.info as info_module
from languages.info import (
    INVARIANT_CULTURE,
    LanguageInfo,
    LocaleResolution,
    derive_full_name,
    resolve_display_name,
    split_variant,
)


def test_derive_full_name_replaces_last_hyphen() -> None:
    assert derive_full_name("de-AT") == "de_AT"
    assert derive_full_name("tg-Cyrl-TJ") == "tg-Cyrl_TJ"
    assert derive_full_name("mn-Mong-CN") == "mn-Mong_CN"


def test_derive_full_name_requires_region() -> None:
    with pytest.raises(ValueError):
        derive_full_name("de")


def test_split_variant() -> None:
    assert split_variant("ca:valencia [AVL]") == ("ca", "Valencia [AVL]")
    assert split_variant("ca") == ("ca", "")
    assert split_variant("ca:") == ("ca:", "")


def test_neutral_entry_keeps_given_full_name() -> None:
    french = LanguageInfo("fr", "fra", "French", "fr_FR", google_name="fr")
    assert french.is_neutral
    assert french.full_name == "fr_FR"
    assert french.neutral_name == "fr"


def test_territory_entry_derives_full_name() -> None:
    austrian = LanguageInfo("de-AT", "deu", "German (Austria)", hunspell_name="de_AT")
    assert not austrian.is_neutral
    assert austrian.full_name == "de_AT"
    assert austrian.neutral_name == "de"
    assert austrian.google_name is None


def test_display_name_comes_from_locale_data() -> None:
    french = LanguageInfo("fr", "fra", "Le français", "fr_FR")
    assert french.display_name == "French"
    assert french.resolution.resolved
    assert str(french) == "French"


def test_variant_is_appended_in_parentheses() -> None:
    valencian = LanguageInfo("ca:valencia [AVL]", "cat", "Catalan", "ca_ES")
    assert valencian.display_name == "Catalan (Valencia [AVL])"
    assert valencian.full_name == "ca_ES"


def test_variant_is_inserted_before_closing_parenthesis(monkeypatch) -> None:
    def fake_resolve(tag, english_name, display_locale="en"):
        assert tag == "ca-ES"
        return LocaleResolution(INVARIANT_CULTURE, "Catalan (Spain)", True)

    monkeypatch.setattr(info_module, "resolve_display_name", fake_resolve)
    info = LanguageInfo("ca-ES:valencia", "cat", "Catalan")
    assert info.display_name == "Catalan (Spain, Valencia)"
    assert info.full_name == "ca_ES"


def test_unparsable_tag_falls_back_to_english_name(monkeypatch) -> None:
    def broken(tag, display_locale):
        raise LanguageTagError(tag)

    monkeypatch.setattr(info_module, "_display_name_for", broken)
    resolution = resolve_display_name("qut", "K'iche")
    assert resolution.display_name == "K'iche"
    assert resolution.culture == INVARIANT_CULTURE
    assert not resolution.resolved
    assert resolution.reason == "invalid-tag"


def test_unnamed_language_falls_back_to_english_name(monkeypatch) -> None:
    monkeypatch.setattr(info_module, "_display_name_for", lambda tag, locale: None)
    info = LanguageInfo("qut", "qut", "K'iche", "qut_GT")
    assert info.display_name == "K'iche"
    assert info.resolution.reason == "unknown-language"
    assert info.culture == INVARIANT_CULTURE


def test_chinese_script_entries_try_legacy_locale(monkeypatch) -> None:
    calls = []

    def only_legacy(tag, display_locale):
        calls.append(tag)
        if tag == "zh-CN":
            return INVARIANT_CULTURE, "Chinese (China)"
        return None

    monkeypatch.setattr(info_module, "_display_name_for", only_legacy)
    resolution = resolve_display_name("zh-Hans", "Chinese (Simplified)")
    assert calls == ["zh-Hans", "zh-CN"]
    assert resolution.display_name == "Chinese (China)"
    assert resolution.reason == "legacy-locale"


def test_legacy_lookup_failure_keeps_english_name(monkeypatch) -> None:
    monkeypatch.setattr(info_module, "_display_name_for", lambda tag, locale: None)
    resolution = resolve_display_name("zh-Hant", "Chinese (Traditional)")
    assert resolution.display_name == "Chinese (Traditional)"
    assert resolution.culture == INVARIANT_CULTURE


class TestIdentity:
    """Equality, hashing and ordering only look at names."""

    def test_equality_ignores_case(self):
        a = LanguageInfo("de-AT", "deu", "German (Austria)")
        b = LanguageInfo("DE-at", "xxx", "Something else", hunspell_name="other")
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_different_names_differ(self):
        assert LanguageInfo("de-AT", "deu", "German (Austria)") != LanguageInfo(
            "de-CH", "deu", "German (Switzerland)"
        )

    def test_not_equal_to_strings(self):
        assert LanguageInfo("de", "deu", "German", "de_DE") != "de"

    def test_ordering_by_display_name_then_name(self, monkeypatch):
        names = {"b": "Alpha", "a": "Beta", "c": "alpha"}

        def fake_resolve(tag, english_name, display_locale="en"):
            return LocaleResolution(INVARIANT_CULTURE, names[tag], True)

        monkeypatch.setattr(info_module, "resolve_display_name", fake_resolve)
        infos = [LanguageInfo(tag, "xxx", "x", f"{tag}_XX") for tag in ("a", "c", "b")]
        assert [li.name for li in sorted(infos)] == ["b", "c", "a"]

    def test_is_immutable(self):
        info = LanguageInfo("de", "deu", "German", "de_DE")
        with pytest.raises(AttributeError):
            info.name = "fr"
