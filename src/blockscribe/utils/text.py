"""Text helpers shared by elements and the scribe.

Example:
    >>> from blockscribe.utils.text import indent_prefix
    >>> indent_prefix(3)
    '   '
    >>> indent_prefix(2, "\\t")
    '\\t\\t'
"""

from blockscribe.errors import InvalidIndentError

DEFAULT_INDENT_UNIT = " "


def indent_prefix(indent: int, unit: str = DEFAULT_INDENT_UNIT) -> str:
    """Return the line-start prefix for an indent depth.

    Args:
        indent: Nesting depth (must be non-negative)
        unit: String repeated once per depth level

    Returns:
        ``unit`` repeated ``indent`` times

    Raises:
        InvalidIndentError: If ``indent`` is negative
    """
    if indent < 0:
        raise InvalidIndentError(indent)
    return unit * indent


def leading_width(line: str, unit: str = DEFAULT_INDENT_UNIT) -> int:
    """Count how many whole ``unit`` repetitions start ``line``."""
    if not unit:
        return 0
    count = 0
    pos = 0
    step = len(unit)
    while line.startswith(unit, pos):
        count += 1
        pos += step
    return count
