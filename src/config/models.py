from __future__ import annotations

import codecs
import logging

from pydantic import BaseModel, Field, field_validator


class AppSettings(BaseModel):
    default_language: str = Field(default="en", description="Language assumed when detection finds nothing")
    paragraphs_per_baseline: int = Field(
        default=14, ge=1, description="Paragraphs per point of marker score a language must exceed"
    )
    display_locale: str = Field(default="en", description="Locale used for language display names")
    default_encoding: str = Field(default="utf-8", description="Encoding used to read input files")
    log_level: str = Field(default="INFO")

    @field_validator("default_language", "display_locale")
    @classmethod
    def _strip_tag(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("language tag must not be empty")
        return value

    @field_validator("default_encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        value = value.strip()
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding '{value}'") from exc
        return value

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        if not value:
            return "INFO"
        normalised = value.strip().upper()
        if normalised not in logging.getLevelNamesMapping():
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return normalised

    @property
    def log_level_number(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]
