"""Element visitor and transformer for blockscribe.

Provides a base visitor class with match-based dispatch, an immutable
transform function for rewriting frozen element trees, and a few small
tree measurements built on top of them.

Example — collect every line under a block:

    class LineCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.lines: list[str] = []

        def visit_line(self, element: Line) -> None:
            self.lines.append(element.text)

    collector = LineCollector()
    collector.visit(tree)

Example — rename a block everywhere:

    def rename(element: Element) -> Element:
        if isinstance(element, Block) and element.name == "compile":
            return Block("implementation", element.children)
        return element

    new_tree = transform(tree, rename)

Thread Safety:
    Visitors may accumulate mutable state; create a new visitor per thread.
    The transform function is pure and safe to call from any thread.

"""

from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

from blockscribe.elements import Block, Element, Line

T = TypeVar("T")


class BaseVisitor(Generic[T]):
    """Base element visitor with match-based dispatch.

    Override ``visit_block`` and/or ``visit_line``. Unhandled variants fall
    through to ``visit_default``. Children are walked automatically after
    the ``visit_*`` call, in insertion order.

    """

    def visit(self, element: Element) -> T:
        result = self._dispatch(element)
        self._walk_children(element)
        return result

    def visit_default(self, element: Element) -> T:
        return None  # type: ignore[return-value]

    def visit_block(self, element: Block) -> T:
        return self.visit_default(element)

    def visit_line(self, element: Line) -> T:
        return self.visit_default(element)

    def _dispatch(self, element: Element) -> T:
        match element:
            case Block():
                return self.visit_block(element)
            case Line():
                return self.visit_line(element)
            case _:
                return self.visit_default(element)

    def _walk_children(self, element: Element) -> None:
        match element:
            case Block(children=children):
                for child in children:
                    self.visit(child)
            case _:
                pass  # Lines are leaves


def transform(
    element: Element, fn: Callable[[Element], Element | None]
) -> Element:
    """Apply a function to every element in the tree, returning a new tree.

    The function ``fn`` is called bottom-up: children are transformed first,
    then the parent is transformed with its new children.

    Return ``None`` from ``fn`` to remove an element. The root cannot be
    removed; returning None for it raises TypeError.

    The original tree is untouched.

    """
    result = _transform_element(element, fn)
    if result is None:
        msg = "transform fn must return an Element for the root (cannot remove root)"
        raise TypeError(msg)
    return result


def _transform_element(
    element: Element, fn: Callable[[Element], Element | None]
) -> Element | None:
    match element:
        case Block(children=children):
            new_children = tuple(
                result
                for child in children
                if (result := _transform_element(child, fn)) is not None
            )
            if new_children != children:
                element = element.with_children(new_children)
        case _:
            pass
    return fn(element)


def iter_elements(element: Element) -> Iterator[Element]:
    """Yield ``element`` and all its descendants in render (pre-)order."""
    stack: list[Element] = [element]
    while stack:
        current = stack.pop()
        yield current
        if isinstance(current, Block):
            stack.extend(reversed(current.children))


def count_elements(element: Element) -> int:
    """Number of elements in the tree, root included."""
    return sum(1 for _ in iter_elements(element))


def tree_depth(element: Element) -> int:
    """Deepest scribe depth a render of ``element`` reaches.

    A Line or an empty Block needs depth 0; each non-empty Block adds one.
    """
    deepest = 0
    stack: list[tuple[Element, int]] = [(element, 0)]
    while stack:
        current, depth = stack.pop()
        if isinstance(current, Block) and current.children:
            deepest = max(deepest, depth + 1)
            stack.extend((child, depth + 1) for child in current.children)
    return deepest
