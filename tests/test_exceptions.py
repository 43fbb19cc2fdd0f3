"""Tests for custom exception classes."""

import pytest

from scriptimport.exceptions import (
    ConfigurationError,
    FileTooLargeError,
    ParseError,
    ScriptImportError,
    ScriptImportFileNotFoundError,
    UnsupportedFormatError,
    check_config_keys,
)


class TestScriptImportError:
    """Test the base exception formatting."""

    def test_message_only(self):
        """Test a bare message."""
        error = ScriptImportError("Something broke")
        assert str(error) == "Error: Something broke"
        assert error.hint is None
        assert error.details is None

    def test_hint_and_details(self):
        """Test hint and details are rendered in order."""
        error = ScriptImportError(
            "Failed to read script",
            hint="Check the file encoding",
            details={"file": "a.txt", "encoding": "utf-8"},
        )
        assert str(error) == (
            "Error: Failed to read script\n"
            "Hint: Check the file encoding\n"
            "Details:\n"
            "  file: a.txt\n"
            "  encoding: utf-8"
        )

    @pytest.mark.parametrize(
        "error_class",
        [
            ConfigurationError,
            FileTooLargeError,
            ParseError,
            ScriptImportFileNotFoundError,
            UnsupportedFormatError,
        ],
    )
    def test_subclasses(self, error_class):
        """Test every error can be caught as ScriptImportError."""
        with pytest.raises(ScriptImportError) as exc_info:
            raise error_class("boom", hint="try again")
        assert exc_info.value.message == "boom"
        assert exc_info.value.hint == "try again"


class TestCheckConfigKeys:
    """Test detection of common configuration mistakes."""

    def test_valid_keys(self):
        """Test correct keys pass."""
        check_config_keys({"max_file_size": 10, "default_gender": "Male"})

    @pytest.mark.parametrize(
        "wrong,correct",
        [
            ("max_size", "max_file_size"),
            ("encoding", "file_encoding"),
            ("gender", "default_gender"),
            ("cast_type", "default_cast_type"),
        ],
    )
    def test_wrong_keys(self, wrong, correct):
        """Test each known mistake names the correct key."""
        with pytest.raises(ConfigurationError) as exc_info:
            check_config_keys({wrong: "x"})
        assert exc_info.value.details["correct_key"] == correct
        assert f"Use '{correct}'" in exc_info.value.hint
