"""ContextVar-based render configuration for structured-text.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Renderers read the active config at render time; callers set it around a
render call instead of threading it through every renderer.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from structured_text.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(bullet="-")):
        fragments = render(document)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        max_depth: Deepest node nesting accepted; deeper trees are rejected
            before rendering starts. The effective limit is also capped by
            the interpreter recursion limit (see validation.stack_depth_limit)
        bullet: Glyph prefixed to items of unordered lists
        line_break: Text of the run appended after block elements

    """

    max_depth: int = 200
    bullet: str = "•"
    line_break: str = "\n"

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            msg = f"max_depth must be at least 1, got {self.max_depth}"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> RenderConfig.from_dict({"bullet": "-", "unknown_key": 1}).bullet
            '-'

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
        >>> with render_config_context(RenderConfig(max_depth=10)):
        ...     get_render_config().max_depth
        10

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
