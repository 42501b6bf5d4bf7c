"""Exception classes for blockscribe.

Provides standardized exceptions for error handling throughout blockscribe.
"""

from __future__ import annotations


class ScribeError(Exception):
    """Base exception for all blockscribe errors.
    
    Subclass this for specific error categories.
    """

    pass


class ElementError(ScribeError):
    """Error when an element is constructed with invalid values.
    
    Raised for an empty block name or a child that is not an Element.
    """

    pass


class InvalidIndentError(ScribeError):
    """Error when an indentation prefix is requested for a negative depth.

    The renderer never produces a negative depth, so seeing this error
    from a render pass signals a broken depth invariant.
    """

    def __init__(self, indent: int) -> None:
        """Initialize indent error.

        Args:
            indent: The rejected indent depth
        """
        self.indent = indent
        super().__init__(f"Indent depth must be non-negative, got {indent}")


class RenderError(ScribeError):
    """Error during text rendering.
    
    Raised when a render pass cannot produce output.
    """

    pass


class RenderDepthExceededError(RenderError):
    """Error when block nesting goes deeper than the configured limit.
    
    Raised before the scribe's depth is increased, so depth bookkeeping
    stays consistent for the caller.
    """

    def __init__(self, max_depth: int, block_name: str | None = None) -> None:
        """Initialize depth error.
        
        Args:
            max_depth: The configured maximum nesting depth
            block_name: Name of the block that tried to nest deeper (optional)
        """
        self.max_depth = max_depth
        self.block_name = block_name

        where = f" in block '{block_name}'" if block_name else ""
        super().__init__(f"Render depth exceeded maximum of {max_depth}{where}")
