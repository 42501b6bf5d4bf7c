"""ElementRenderer protocol — stable interface for element renderers.

Any renderer that implements ``render(element) -> str`` conforms to this
protocol. The built-in ``TextRenderer`` is the reference implementation.

Example:
    from blockscribe.renderers.protocol import ElementRenderer

    def emit_fixture(renderer: ElementRenderer, tree: Element) -> str:
        return renderer.render(tree)

"""

from typing import Protocol

from blockscribe.elements import Element


class ElementRenderer(Protocol):
    """Protocol for element renderers."""

    def render(self, element: Element) -> str:
        """Render an element tree to a string.

        Args:
            element: Root of the tree to render.

        Returns:
            Rendered string output.

        """
        ...
