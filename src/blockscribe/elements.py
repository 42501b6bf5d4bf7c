"""Typed element tree for blockscribe.

All elements are frozen dataclasses with slots for:
- Immutability: one tree can be rendered any number of times, from any thread
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: Python 3.10+ match statements work naturally

Element Hierarchy:
Element (base)
├── Block  (named, ordered children, rendered as ``name { ... }``)
└── Line   (leaf statement, rendered verbatim)

The set of variants is closed: renderers, the visitor and the serializer
all match on exactly these two.

Example:
    >>> from blockscribe import Block, Line, render
    >>> tree = Block("outer", [Block("inner", [Line("x")])])
    >>> print(render(tree))
    outer {
     inner {
      x
     }
    }

Thread Safety:
All elements are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from blockscribe.errors import ElementError
from blockscribe.stringbuilder import StringBuilder
from blockscribe.utils.text import DEFAULT_INDENT_UNIT, indent_prefix

if TYPE_CHECKING:
    from blockscribe.scribe import Scribe

BLOCK_OPEN = " {"
BLOCK_CLOSE = "}"


@dataclass(frozen=True, slots=True)
class Element:
    """Base class for all renderable elements."""

    def render(self, scribe: Scribe) -> str:
        """Render this element at the scribe's current depth.

        Never emits a trailing newline; joining siblings is the parent's job.
        """
        raise NotImplementedError

    def start(self, indent: int, unit: str = DEFAULT_INDENT_UNIT) -> str:
        """Line-start prefix for ``indent`` levels of ``unit``.

        Raises:
            InvalidIndentError: If ``indent`` is negative
        """
        return indent_prefix(indent, unit)


@dataclass(frozen=True, slots=True)
class Block(Element):
    """Named element whose children render as an indented, braced body.

    Rendered:
        name {
         child
        }

    A block without children renders on one line as ``name {}`` unless
    the active config asks for the expanded form.

    """

    name: str
    children: tuple[Element, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            msg = f"Block name must be a non-empty string, got {self.name!r}"
            raise ElementError(msg)
        children = tuple(self.children)
        for child in children:
            if not isinstance(child, Element):
                msg = (
                    f"Block '{self.name}' children must be Elements, "
                    f"got {type(child).__name__}"
                )
                raise ElementError(msg)
        # Accept any iterable but store a tuple
        object.__setattr__(self, "children", children)

    def render(self, scribe: Scribe) -> str:
        prefix = scribe.prefix()
        if not self.children:
            if scribe.config.empty_block == "expanded":
                return f"{prefix}{self.name}{BLOCK_OPEN}\n{prefix}{BLOCK_CLOSE}"
            return f"{prefix}{self.name}{BLOCK_OPEN}{BLOCK_CLOSE}"

        sb = StringBuilder()
        sb.append(prefix).append(self.name).append(BLOCK_OPEN)
        with scribe.indented(self.name):
            for child in self.children:
                sb.append_line(child.render(scribe))
        sb.append_line(prefix).append(BLOCK_CLOSE)
        return sb.build()

    def with_children(self, children: Iterable[Element]) -> Block:
        """Return a copy of this block with ``children`` replacing its own."""
        return Block(self.name, tuple(children))


@dataclass(frozen=True, slots=True)
class Line(Element):
    """Leaf statement rendered as one indented line.

    The text is emitted verbatim; no delimiter is added.

    """

    text: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            msg = f"Line text must be a string, got {type(self.text).__name__}"
            raise ElementError(msg)

    def render(self, scribe: Scribe) -> str:
        return f"{scribe.prefix()}{self.text}"


def block(name: str, *children: Element) -> Block:
    """Build a Block from positional children.

    Example:
        >>> block("plugins", line("id 'java'"))
        Block(name='plugins', children=(Line(text="id 'java'"),))
    """
    return Block(name, children)


def line(text: str = "") -> Line:
    """Build a Line."""
    return Line(text)
