"""Tests for blockscribe.profiling — render profiling API."""

from blockscribe import Block, Line, render, render_all
from blockscribe.profiling import (
    RenderAccumulator,
    get_render_accumulator,
    profiled_render,
)


class TestGetRenderAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_render_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_render():
            pass
        assert get_render_accumulator() is None


class TestProfiledRender:
    def test_yields_accumulator(self) -> None:
        with profiled_render() as acc:
            assert isinstance(acc, RenderAccumulator)
            assert get_render_accumulator() is acc

    def test_records_render_call(self) -> None:
        tree = Block("a", [Line("b"), Block("c", [Line("d")])])
        with profiled_render() as acc:
            out = render(tree)
        assert acc.render_calls == 1
        assert acc.element_count == 4
        assert acc.output_length == len(out)

    def test_render_all_counts_once(self) -> None:
        with profiled_render() as acc:
            render_all([Line("a"), Line("b")])
        assert acc.render_calls == 1
        assert acc.element_count == 2

    def test_records_multiple_calls(self) -> None:
        with profiled_render() as acc:
            render(Line("one"))
            render(Line("two"))
            render(Line("three"))
        assert acc.render_calls == 3

    def test_total_duration_non_negative(self) -> None:
        with profiled_render() as acc:
            render(Line("x"))
        assert acc.total_duration_ms >= 0


class TestSummary:
    def test_empty_summary(self) -> None:
        summary = RenderAccumulator().summary()
        assert summary["render_calls"] == 0
        assert summary["element_count"] == 0
        assert summary["output_length"] == 0
        assert "total_ms" in summary
