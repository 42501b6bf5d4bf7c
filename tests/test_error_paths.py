"""Error-path tests.

Exception formatting, the error hierarchy, and the guarantee that a failed
render leaves the scribe consistent.
"""

import pytest

from blockscribe import Block, Line, RenderConfig, Scribe, render
from blockscribe.errors import (
    ElementError,
    InvalidIndentError,
    RenderDepthExceededError,
    RenderError,
    ScribeError,
)
from blockscribe.utils.text import indent_prefix


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc",
        [
            ElementError("x"),
            InvalidIndentError(-1),
            RenderError("x"),
            RenderDepthExceededError(3),
        ],
    )
    def test_all_are_scribe_errors(self, exc: Exception) -> None:
        assert isinstance(exc, ScribeError)

    def test_depth_error_is_render_error(self) -> None:
        assert issubclass(RenderDepthExceededError, RenderError)


class TestFormatting:
    def test_invalid_indent_message(self) -> None:
        err = InvalidIndentError(-3)
        assert "-3" in str(err)
        assert err.indent == -3

    def test_depth_error_without_block(self) -> None:
        err = RenderDepthExceededError(8)
        assert str(err) == "Render depth exceeded maximum of 8"
        assert err.block_name is None

    def test_depth_error_with_block(self) -> None:
        err = RenderDepthExceededError(8, "android")
        assert "'android'" in str(err)
        assert "8" in str(err)


class TestNegativeIndent:
    def test_indent_prefix_rejects_negative(self) -> None:
        with pytest.raises(InvalidIndentError):
            indent_prefix(-1)

    def test_zero_is_allowed(self) -> None:
        assert indent_prefix(0) == ""


class TestDeepTrees:
    def _nested(self, depth: int) -> Block:
        tree = Block(f"b{depth}", [Line("leaf")])
        for i in range(depth - 1, 0, -1):
            tree = Block(f"b{i}", [tree])
        return tree

    def test_default_limit_allows_moderate_nesting(self) -> None:
        """Fifty levels render; the leaf sits at column fifty."""
        out = render(self._nested(50))
        assert out.split("\n")[50] == " " * 50 + "leaf"

    def test_limit_raises_render_error(self) -> None:
        with pytest.raises(RenderError):
            render(self._nested(10), config=RenderConfig(max_depth=5))

    def test_partial_failure_leaves_scribe_consistent(self) -> None:
        """A failed pass writes nothing and leaves depth at 0 for the next one."""
        scribe = Scribe(RenderConfig(max_depth=5))
        with pytest.raises(RenderDepthExceededError):
            render(self._nested(10), scribe=scribe)
        assert scribe.depth == 0
        assert scribe.build() == ""
        assert render(Line("after"), scribe=scribe) == "after"
