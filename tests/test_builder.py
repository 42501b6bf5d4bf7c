"""Tests for BlockBuilder."""

import pytest

from blockscribe import Block, BlockBuilder, Line, render
from blockscribe.errors import ElementError


class TestBlockBuilder:
    def test_empty_builder_builds_empty_block(self) -> None:
        assert BlockBuilder("empty").build() == Block("empty")

    def test_lines_in_order(self) -> None:
        built = BlockBuilder("deps").line("a").lines(["b", "c"]).build()
        assert built == Block("deps", [Line("a"), Line("b"), Line("c")])

    def test_nested_block(self) -> None:
        built = (
            BlockBuilder("android")
            .line("namespace 'com.example'")
            .block("defaultConfig", lambda b: b.line("minSdk 21").line("targetSdk 34"))
            .build()
        )
        assert render(built) == (
            "android {\n"
            " namespace 'com.example'\n"
            " defaultConfig {\n"
            "  minSdk 21\n"
            "  targetSdk 34\n"
            " }\n"
            "}"
        )

    def test_nested_block_without_body(self) -> None:
        built = BlockBuilder("outer").block("inner").build()
        assert render(built) == "outer {\n inner {}\n}"

    def test_add_existing_elements(self) -> None:
        inner = Block("inner", [Line("x")])
        built = BlockBuilder("outer").add(inner).add_all([Line("y"), Line("z")]).build()
        assert built.children == (inner, Line("y"), Line("z"))

    def test_build_is_snapshot(self) -> None:
        """Building twice gives independent blocks; later lines do not leak back."""
        builder = BlockBuilder("a").line("1")
        first = builder.build()
        builder.line("2")
        assert first == Block("a", [Line("1")])
        assert len(builder.build().children) == 2

    def test_len_counts_direct_children(self) -> None:
        builder = BlockBuilder("a").line("1").block("b", lambda b: b.line("2"))
        assert len(builder) == 2

    def test_name_property(self) -> None:
        assert BlockBuilder("plugins").name == "plugins"


class TestBlockBuilderErrors:
    def test_empty_name(self) -> None:
        with pytest.raises(ElementError):
            BlockBuilder("")

    def test_empty_nested_name(self) -> None:
        with pytest.raises(ElementError):
            BlockBuilder("outer").block("")

    def test_add_non_element(self) -> None:
        with pytest.raises(ElementError, match="dict"):
            BlockBuilder("outer").add({"name": "x"})  # type: ignore[arg-type]
