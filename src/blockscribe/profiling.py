"""blockscribe RenderAccumulator — opt-in profiling for render passes.

This module provides accumulated metrics while rendering:
- Total elapsed time
- Elements rendered
- Characters produced

Zero overhead when disabled (get_render_accumulator() returns None).

Example:
    from blockscribe import render
    from blockscribe.profiling import profiled_render

    with profiled_render() as metrics:
        text = render(tree)

    print(metrics.summary())
    # {"total_ms": 0.1, "render_calls": 1, "element_count": 4, "output_length": 31}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class RenderAccumulator:
    """Accumulated metrics during rendering.

    Attributes:
        start_time: Profiling start timestamp.
        render_calls: Number of top-level render calls recorded.
        element_count: Elements rendered across all calls.
        output_length: Characters produced across all calls.

    """

    start_time: float = field(default_factory=perf_counter)
    render_calls: int = 0
    element_count: int = 0
    output_length: int = 0

    def record_render(self, element_count: int, output_length: int) -> None:
        self.render_calls += 1
        self.element_count += element_count
        self.output_length += output_length

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "render_calls": self.render_calls,
            "element_count": self.element_count,
            "output_length": self.output_length,
        }


_accumulator: ContextVar[RenderAccumulator | None] = ContextVar(
    "render_accumulator",
    default=None,
)


def get_render_accumulator() -> RenderAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_render() -> Iterator[RenderAccumulator]:
    """Context manager for profiled rendering.

    Creates a RenderAccumulator and makes it available via
    get_render_accumulator() for the duration of the with block.

    """
    acc = RenderAccumulator()
    token: Token[RenderAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
