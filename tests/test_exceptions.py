"""Tests for custom exceptions."""

from __future__ import annotations

from pathlib import Path

import pytest

from exceptions import DuplicateLanguageError, LanguageNotFoundError, SublangError, SubtitleReadError


class TestSublangError:
    """Tests for base SublangError exception."""

    def test_is_exception(self):
        """SublangError should be an Exception subclass."""
        assert issubclass(SublangError, Exception)

    def test_can_raise(self):
        """SublangError can be raised and caught."""
        with pytest.raises(SublangError) as exc_info:
            raise SublangError("test error")
        assert str(exc_info.value) == "test error"


class TestLanguageNotFoundError:
    """Tests for LanguageNotFoundError."""

    def test_is_key_error(self):
        """Callers treating the registry as a mapping can catch KeyError."""
        assert issubclass(LanguageNotFoundError, SublangError)
        assert issubclass(LanguageNotFoundError, KeyError)

    def test_message_is_not_quoted(self):
        """KeyError normally wraps its message in quotes."""
        error = LanguageNotFoundError("xx-YY")
        assert str(error) == "Unknown language 'xx-YY'"
        assert error.name == "xx-YY"


class TestDuplicateLanguageError:
    def test_message(self):
        error = DuplicateLanguageError("de-AT")
        assert str(error) == "Language 'de-AT' is listed more than once"
        assert error.name == "de-AT"


class TestSubtitleReadError:
    """Tests for SubtitleReadError."""

    def test_error_message(self):
        """Test error message includes the file name and a hint."""
        path = Path("/subs/episode1.txt")
        error = SubtitleReadError(path, "unknown encoding 'foo'")

        expected = (
            "Cannot read subtitle text: episode1.txt\n"
            "Reason: unknown encoding 'foo'\n"
            "Try passing the file's encoding with --encoding"
        )
        assert str(error) == expected
        assert error.file_path == path
        assert error.reason == "unknown encoding 'foo'"


class TestExceptionHierarchy:
    """Tests for exception inheritance hierarchy."""

    def test_all_inherit_from_sublang_error(self):
        """All custom exceptions should inherit from SublangError."""
        for error in (
            LanguageNotFoundError("x"),
            DuplicateLanguageError("x"),
            SubtitleReadError(Path("a.txt"), "why"),
        ):
            assert isinstance(error, SublangError)
