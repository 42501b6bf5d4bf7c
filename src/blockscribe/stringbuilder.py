"""StringBuilder for O(n) text accumulation.

Rendered blocks and the scribe's output buffer collect fragments in a
list and join once at the end, instead of re-copying a growing string
for every header, child and footer.

Thread Safety:
StringBuilder instances are local to one render pass.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.
    
    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("plugins {")
            >>> sb.append_line()
            >>> sb.append("}")
            >>> sb.build()
            'plugins {\\n}'
    
    Thread Safety:
        Instance is local to each render pass.
        No shared mutable state.
        
    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def append_line(self, s: str = "") -> StringBuilder:
        """Append a newline followed by a string.

        Newline comes first so fragments never end with a trailing
        newline; whether output ends with one is the caller's choice.

        Args:
            s: String to append after the newline (empty = just newline)

        Returns:
            self for method chaining
        """
        self._parts.append("\n")
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)

    def clear(self) -> StringBuilder:
        """Clear all accumulated parts.

        Returns:
            self for method chaining
        """
        self._parts.clear()
        return self

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if any parts have been appended."""
        return bool(self._parts)
