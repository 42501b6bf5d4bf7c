"""Indented text renderer for element trees.

Each render pass gets its own Scribe, so one TextRenderer (and any element
tree) can be used from several threads at once.

Example:
    >>> from blockscribe import Block, Line
    >>> from blockscribe.renderers.text import TextRenderer
    >>> TextRenderer().render(Block("plugins", [Line("id 'java'")]))
    "plugins {\\n id 'java'\\n}"

"""

from collections.abc import Iterable

from blockscribe.config import RenderConfig, get_render_config
from blockscribe.elements import Element
from blockscribe.profiling import get_render_accumulator
from blockscribe.scribe import Scribe
from blockscribe.utils.logger import get_logger
from blockscribe.visitor import count_elements

logger = get_logger(__name__)


class TextRenderer:
    """Render element trees to indented text.

    Siblings are separated by a single newline. A trailing newline is
    added to the final output only when ``config.trailing_newline`` is set.

    """

    __slots__ = ("_config",)

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Create a renderer.

        Args:
            config: Render settings; None means "read the active RenderConfig
                at each render call".
        """
        self._config = config

    @property
    def config(self) -> RenderConfig:
        return self._config if self._config is not None else get_render_config()

    def render(self, element: Element) -> str:
        """Render one root element with a fresh Scribe."""
        return self.render_all((element,))

    def render_all(self, elements: Iterable[Element]) -> str:
        """Render several root elements in order with one Scribe."""
        with Scribe(self.config) as scribe:
            roots = _render_into(scribe, elements)
            return _finish(scribe.config, scribe.build(), roots)


def _render_into(scribe: Scribe, elements: Iterable[Element]) -> tuple[Element, ...]:
    """Render ``elements`` at the scribe's depth and write each into its buffer.

    Returns the roots that were rendered.
    """
    roots = tuple(elements)
    for element in roots:
        scribe.write(element.render(scribe))
    return roots


def _finish(config: RenderConfig, output: str, roots: tuple[Element, ...]) -> str:
    if config.trailing_newline:
        output += "\n"

    acc = get_render_accumulator()
    if acc is not None:
        acc.record_render(sum(count_elements(root) for root in roots), len(output))

    logger.debug("Rendered %d root element(s) into %d chars", len(roots), len(output))
    return output


def render(
    element: Element,
    *,
    scribe: Scribe | None = None,
    config: RenderConfig | None = None,
) -> str:
    """Render an element tree to text.

    Args:
        element: Root of the tree.
        scribe: Existing Scribe to render with. Its config is used and the
            rendered text is also written to its buffer, so one Scribe can
            render several disjoint trees in sequence. Omit for a fresh
            Scribe (the usual case). With ``trailing_newline`` set, only
            the returned string ends with a newline; the scribe's buffer
            stays newline-joined so later writes are not double-spaced.
        config: Render settings for a fresh Scribe; defaults to the active
            RenderConfig. Ignored when ``scribe`` is given.

    Returns:
        The rendered text of ``element``.

    Example:
        >>> print(render(Block("outer", [Block("inner", [Line("x")])])))
        outer {
         inner {
          x
         }
        }

    """
    if scribe is None:
        return TextRenderer(config).render(element)

    text = element.render(scribe)
    scribe.write(text)
    return _finish(scribe.config, text, (element,))


def render_all(
    elements: Iterable[Element],
    *,
    config: RenderConfig | None = None,
) -> str:
    """Render several root elements, newline-separated, with one fresh Scribe."""
    return TextRenderer(config).render_all(elements)
