"""Scribe: the mutable render context threaded through a render pass.

A Scribe tracks the current indentation depth and accumulates the text of
the top-level elements rendered with it. Blocks push the depth while their
children render and always pop it again, so after rendering any subtree
the depth is exactly what it was before.

Example:
    >>> from blockscribe import Block, Line
    >>> from blockscribe.scribe import Scribe
    >>> with Scribe() as scribe:
    ...     scribe.write(Block("a", [Line("b")]).render(scribe))
    ...     scribe.build()
    'a {\\n b\\n}'

Thread Safety:
    NOT thread-safe. Create one Scribe per render pass; element trees
    themselves may be shared freely.

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from types import TracebackType

from blockscribe.config import RenderConfig, get_render_config
from blockscribe.errors import RenderDepthExceededError
from blockscribe.stringbuilder import StringBuilder
from blockscribe.utils.logger import get_logger
from blockscribe.utils.text import indent_prefix

logger = get_logger(__name__)


class Scribe:
    """Indentation depth plus an output buffer for one render pass."""

    __slots__ = ("_config", "_depth", "_sb", "_written")

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Create a scribe at depth 0.

        Args:
            config: Render settings; defaults to the active RenderConfig
        """
        self._config = config if config is not None else get_render_config()
        self._depth = 0
        self._sb = StringBuilder()
        self._written = False

    @property
    def config(self) -> RenderConfig:
        return self._config

    @property
    def depth(self) -> int:
        """Current nesting depth (0 at the top level)."""
        return self._depth

    def prefix(self) -> str:
        """Line-start prefix for the current depth."""
        return indent_prefix(self._depth, self._config.indent_unit)

    @contextmanager
    def indented(self, block_name: str | None = None) -> Iterator[Scribe]:
        """Increase depth by one for the duration of the ``with`` body.

        Depth is restored on exit even if the body raises.

        Raises:
            RenderDepthExceededError: If the push would go past
                ``config.max_depth``. Depth is left unchanged.
        """
        if self._depth >= self._config.max_depth:
            logger.warning(
                "Block %r would nest past max_depth=%d",
                block_name,
                self._config.max_depth,
            )
            raise RenderDepthExceededError(self._config.max_depth, block_name)
        self._depth += 1
        try:
            yield self
        finally:
            self._depth -= 1

    def write(self, text: str) -> Scribe:
        """Append a rendered top-level element, newline-separated from the last."""
        if self._written:
            self._sb.append_line(text)
        else:
            self._sb.append(text)
            self._written = True
        return self

    def build(self) -> str:
        """All text written so far."""
        return self._sb.build()

    def clear(self) -> Scribe:
        """Drop buffered output. Depth is untouched."""
        self._sb.clear()
        self._written = False
        return self

    def __enter__(self) -> Scribe:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.clear()

    def __repr__(self) -> str:
        return f"Scribe(depth={self._depth}, parts={len(self._sb)})"
