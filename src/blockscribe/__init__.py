"""
blockscribe — Indented text rendering for nested block trees

Build an immutable tree of named blocks and plain lines, then render it to
indented, human-readable text: build scripts, config files, fixtures.

Quick Start:
    >>> from blockscribe import Block, Line, render
    >>> tree = Block("plugins", [Line("id 'java'")])
    >>> print(render(tree))
    plugins {
     id 'java'
    }

    >>> # Or assemble a block statement by statement
    >>> from blockscribe import BlockBuilder
    >>> builder = BlockBuilder("repositories").line("mavenCentral()")
    >>> print(render(builder.build()))
    repositories {
     mavenCentral()
    }

Configuration:
    >>> from blockscribe import RenderConfig, render_config_context
    >>> with render_config_context(RenderConfig(indent_unit="  ")):
    ...     text = render(tree)
"""

from blockscribe.builder import BlockBuilder
from blockscribe.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from blockscribe.elements import Block, Element, Line, block, line
from blockscribe.errors import (
    ElementError,
    InvalidIndentError,
    RenderDepthExceededError,
    RenderError,
    ScribeError,
)
from blockscribe.profiling import RenderAccumulator, get_render_accumulator, profiled_render
from blockscribe.renderers.protocol import ElementRenderer
from blockscribe.renderers.text import TextRenderer, render, render_all
from blockscribe.scribe import Scribe
from blockscribe.serialization import from_dict, from_json, to_dict, to_json
from blockscribe.utils.text import indent_prefix
from blockscribe.visitor import BaseVisitor, count_elements, iter_elements, transform, tree_depth

__version__ = "0.1.0"

__all__ = [
    # Elements
    "Block",
    "Element",
    "Line",
    "block",
    "line",
    "BlockBuilder",
    # Rendering
    "ElementRenderer",
    "Scribe",
    "TextRenderer",
    "indent_prefix",
    "render",
    "render_all",
    # Configuration
    "RenderConfig",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
    # Errors
    "ElementError",
    "InvalidIndentError",
    "RenderDepthExceededError",
    "RenderError",
    "ScribeError",
    # Traversal
    "BaseVisitor",
    "count_elements",
    "iter_elements",
    "transform",
    "tree_depth",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Profiling
    "RenderAccumulator",
    "get_render_accumulator",
    "profiled_render",
    # Metadata
    "__version__",
]
