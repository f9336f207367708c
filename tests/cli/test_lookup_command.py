from __future__ import annotations

import pytest
from click.testing import CliRunner

import config.loader as loader
from cli.main import app


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    monkeypatch.setattr(loader, "GLOBAL_CONFIG_PATH", tmp_path / "missing.yaml")
    monkeypatch.delenv("SUBLANG_DISPLAY_LOCALE", raising=False)
    monkeypatch.delenv("SUBLANG_DEFAULT_LANGUAGE", raising=False)
    monkeypatch.chdir(tmp_path)


def test_lookup_shows_every_identifier():
    runner = CliRunner()
    result = runner.invoke(app, ["lookup", "en-gb"])

    assert result.exit_code == 0
    assert "Name: en-GB" in result.output
    assert "Full name: en_GB" in result.output
    assert "ISO 639-2: eng" in result.output
    assert "Neutral: no (en)" in result.output
    assert "Hunspell: en_GB" in result.output


def test_lookup_of_neutral_language():
    runner = CliRunner()
    result = runner.invoke(app, ["lookup", "he"])

    assert result.exit_code == 0
    assert "Neutral: yes" in result.output
    assert "Google: iw" in result.output
    assert "Tesseract: heb" in result.output


def test_lookup_of_unknown_tag_fails():
    runner = CliRunner()
    result = runner.invoke(app, ["lookup", "xx-YY"])

    assert result.exit_code == 1
    assert "Unknown language 'xx-YY'" in result.output


def test_list_tesseract_languages():
    runner = CliRunner()
    result = runner.invoke(app, ["list", "--tesseract"])

    assert result.exit_code == 0
    assert "Tesseract languages (108)" in result.output


def test_list_all_languages():
    runner = CliRunner()
    result = runner.invoke(app, ["list"])

    assert result.exit_code == 0
    assert "All languages (242)" in result.output


def test_config_show_prints_settings(tmp_path):
    (tmp_path / "config.yaml").write_text("default_language: de\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["config", "show"])

    assert result.exit_code == 0
    assert '"default_language": "de"' in result.output


def test_config_validate_reports_bad_values(tmp_path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("paragraphs_per_baseline: 0\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["config", "validate", "--file", str(bad)])

    assert result.exit_code == 1
    assert "paragraphs_per_baseline" in result.output


def test_config_validate_accepts_good_file(tmp_path):
    good = tmp_path / "good.yaml"
    good.write_text("default_language: fr\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["config", "validate", "--file", str(good)])

    assert result.exit_code == 0
    assert "Configuration is valid" in result.output
