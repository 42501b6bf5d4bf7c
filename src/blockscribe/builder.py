"""Mutable builder for Block trees.

Blocks are immutable, so code that assembles a tree statement by
statement (fixture generators, config emitters) collects children in a
BlockBuilder and calls build() once at the end.

Example:
    >>> builder = BlockBuilder("dependencies")
    >>> builder.line("implementation 'com.squareup.okio:okio:3.9.0'")
    >>> builder.block("constraints", lambda b: b.line("api 'junit:junit:4.13.2'"))
    >>> print(render(builder.build()))
    dependencies {
     implementation 'com.squareup.okio:okio:3.9.0'
     constraints {
      api 'junit:junit:4.13.2'
     }
    }

Thread Safety:
BlockBuilder is mutable and not thread-safe. The Block it builds is
immutable and safe to share.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from blockscribe.elements import Block, Element, Line
from blockscribe.errors import ElementError


class BlockBuilder:
    """Collects children for one Block, then builds it."""

    __slots__ = ("_name", "_children")

    def __init__(self, name: str) -> None:
        """Start a builder for a block called ``name``.

        Raises:
            ElementError: If ``name`` is empty
        """
        if not isinstance(name, str) or not name:
            msg = f"Block name must be a non-empty string, got {name!r}"
            raise ElementError(msg)
        self._name = name
        self._children: list[Element] = []

    @property
    def name(self) -> str:
        return self._name

    def add(self, element: Element) -> BlockBuilder:
        """Append an already-built element.

        Raises:
            ElementError: If ``element`` is not an Element
        """
        if not isinstance(element, Element):
            msg = f"Block '{self._name}' children must be Elements, got {type(element).__name__}"
            raise ElementError(msg)
        self._children.append(element)
        return self

    def add_all(self, elements: Iterable[Element]) -> BlockBuilder:
        for element in elements:
            self.add(element)
        return self

    def line(self, text: str) -> BlockBuilder:
        """Append a Line."""
        self._children.append(Line(text))
        return self

    def lines(self, texts: Iterable[str]) -> BlockBuilder:
        """Append one Line per string, in order."""
        for text in texts:
            self.line(text)
        return self

    def block(
        self,
        name: str,
        body: Callable[[BlockBuilder], object] | None = None,
    ) -> BlockBuilder:
        """Append a nested block.

        Args:
            name: Name of the nested block
            body: Called with a fresh builder for the nested block; its
                return value is ignored. Omit for an empty block.

        Returns:
            Self (the outer builder) for chaining
        """
        child = BlockBuilder(name)
        if body is not None:
            body(child)
        self._children.append(child.build())
        return self

    def build(self) -> Block:
        """Build an immutable Block from the collected children."""
        return Block(self._name, tuple(self._children))

    def __len__(self) -> int:
        """Number of direct children collected so far."""
        return len(self._children)
