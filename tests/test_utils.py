"""Tests for blockscribe utility modules."""

import pytest

from blockscribe.errors import InvalidIndentError
from blockscribe.stringbuilder import StringBuilder
from blockscribe.utils import get_logger, indent_prefix, leading_width


class TestIndentPrefix:
    def test_default_unit_is_one_space(self) -> None:
        assert indent_prefix(3) == "   "

    def test_custom_unit(self) -> None:
        assert indent_prefix(2, "  ") == "    "

    def test_negative(self) -> None:
        with pytest.raises(InvalidIndentError):
            indent_prefix(-2, "\t")


class TestLeadingWidth:
    @pytest.mark.parametrize(
        ("line", "unit", "expected"),
        [
            ("x", " ", 0),
            ("   x", " ", 3),
            ("    x", "  ", 2),
            ("   x", "  ", 1),
            ("\t\tx", "\t", 2),
            ("", " ", 0),
            ("x", "", 0),
        ],
    )
    def test_counts_whole_units(self, line: str, unit: str, expected: int) -> None:
        assert leading_width(line, unit) == expected


class TestGetLogger:
    def test_prefixes_name(self) -> None:
        assert get_logger("mymodule").name == "blockscribe.mymodule"

    def test_keeps_package_names(self) -> None:
        assert get_logger("blockscribe.scribe").name == "blockscribe.scribe"
        assert get_logger("blockscribe").name == "blockscribe"


class TestStringBuilder:
    def test_append_skips_empty(self) -> None:
        sb = StringBuilder().append("a").append("").append("b")
        assert sb.build() == "ab"
        assert len(sb) == 2

    def test_append_line_puts_newline_first(self) -> None:
        sb = StringBuilder().append("a {").append_line(" b").append_line("}")
        assert sb.build() == "a {\n b\n}"

    def test_append_line_empty(self) -> None:
        assert StringBuilder().append("a").append_line().build() == "a\n"

    def test_clear_and_bool(self) -> None:
        sb = StringBuilder().append("x")
        assert sb
        sb.clear()
        assert not sb
        assert sb.build() == ""
