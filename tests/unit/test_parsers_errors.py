"""Unit tests for backup_options.parsers.errors — parse error types."""
from __future__ import annotations

from dataclasses import replace

import pytest

from backup_options.parsers.errors import OptionErrorCollection, OptionParseError


class TestOptionParseError:
    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            raise OptionParseError("bad", "5xz")

    def test_str_without_option(self) -> None:
        error = OptionParseError("unknown size suffix 'xz'", "5xz")
        assert str(error) == "invalid value '5xz': unknown size suffix 'xz'"

    def test_str_with_option_and_position(self) -> None:
        error = OptionParseError("unknown size suffix 'xz'", "5xz", position=1, option="volsize")
        assert str(error) == (
            "invalid value '5xz' for option 'volsize': unknown size suffix 'xz' (at offset 1)"
        )

    def test_args_match_str(self) -> None:
        error = OptionParseError("bad", "x", option="force")
        assert error.args == (str(error),)

    def test_replace_attaches_option(self) -> None:
        error = OptionParseError("bad", "x")
        tagged = replace(error, option="volsize")
        assert tagged.option == "volsize"
        assert "volsize" in str(tagged)
        assert error.option is None

    def test_frozen(self) -> None:
        error = OptionParseError("bad", "x")
        with pytest.raises(AttributeError):
            error.message = "other"  # type: ignore[misc]


class TestOptionErrorCollection:
    def test_empty(self) -> None:
        collection = OptionErrorCollection()
        assert not collection.has_errors
        assert str(collection) == "OptionErrorCollection (no errors)"

    def test_add_and_list(self) -> None:
        collection = OptionErrorCollection()
        collection.add(OptionParseError("bad size", "5xz", option="volsize"))
        collection.add(OptionParseError("bad time", "--3M", option="restore-time"))
        assert collection.has_errors
        assert collection.options == ["volsize", "restore-time"]

    def test_str_lists_each_error(self) -> None:
        collection = OptionErrorCollection(
            [
                OptionParseError("bad size", "5xz", option="volsize"),
                OptionParseError("bad time", "--3M", option="restore-time"),
            ]
        )
        lines = str(collection).splitlines()
        assert lines[0] == "OptionErrorCollection (2 error(s)):"
        assert "volsize" in lines[1]
        assert "restore-time" in lines[2]

    def test_is_raisable(self) -> None:
        with pytest.raises(OptionErrorCollection):
            raise OptionErrorCollection([OptionParseError("bad", "x")])
