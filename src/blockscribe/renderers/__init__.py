"""blockscribe renderers.

Renderers turn element trees into output text.

Available Renderers:
- TextRenderer: Renders elements to indented ``name { ... }`` text

Thread Safety:
Renderers create a Scribe local to each render call.
Safe for concurrent use from multiple threads.

"""

from blockscribe.renderers.protocol import ElementRenderer
from blockscribe.renderers.text import TextRenderer, render, render_all

__all__ = ["ElementRenderer", "TextRenderer", "render", "render_all"]
