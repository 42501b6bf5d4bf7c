"""ContextVar-based render configuration for blockscribe.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Scribe reads the active config once, when it is created, and keeps it
for the whole render pass.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from blockscribe import Block, Line, render
    from blockscribe.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(indent_unit="  ")):
        text = render(Block("plugins", [Line("id 'java'")]))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Literal

EmptyBlockStyle = Literal["inline", "expanded"]

_EMPTY_BLOCK_STYLES: frozenset[str] = frozenset({"inline", "expanded"})


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        indent_unit: String repeated once per nesting level
        max_depth: Deepest nesting a block may push the scribe to
        empty_block: ``"inline"`` renders ``name {}``, ``"expanded"``
            renders ``name {`` and ``}`` on two lines
        trailing_newline: Append one newline to top-level render output

    """

    indent_unit: str = " "
    max_depth: int = 256
    empty_block: EmptyBlockStyle = "inline"
    trailing_newline: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.indent_unit, str) or not self.indent_unit:
            msg = f"indent_unit must be a non-empty string, got {self.indent_unit!r}"
            raise ValueError(msg)
        if self.max_depth < 1:
            msg = f"max_depth must be at least 1, got {self.max_depth}"
            raise ValueError(msg)
        if self.empty_block not in _EMPTY_BLOCK_STYLES:
            msg = (
                f"empty_block must be one of {sorted(_EMPTY_BLOCK_STYLES)}, "
                f"got {self.empty_block!r}"
            )
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = RenderConfig.from_dict({
            ...     "indent_unit": "\\t",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.indent_unit
            '\\t'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(empty_block="expanded")):
        ...     text = render(Block("empty"))
        >>> # Automatically reset to previous config

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "EmptyBlockStyle",
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
