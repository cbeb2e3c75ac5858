"""ContextVar-based parse configuration for Tiza.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is read once by each Parser when it is constructed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from tiza.config import set_parse_config, reset_parse_config, ParseConfig

    set_parse_config(ParseConfig(max_depth=32))
    try:
        root = Parser(source).parse()
    finally:
        reset_parse_config()

    # Or use the context manager
    with parse_config_context(ParseConfig(script_scale=0.7)):
        root = Parser(source).parse()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields

from tiza.errors import ConfigError

# Fields that are size multipliers, valid in (0, 1]
_SCALE_FIELDS = (
    "script_scale",
    "fraction_scale",
    "annotation_scale",
    "chemistry_script_scale",
)


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        max_depth: Nesting ceiling for groups, arguments and script chains.
            Deeper input is kept as raw text instead of recursing further.
        script_scale: Size factor for corner scripts and operator limits
        fraction_scale: Size factor for \\frac numerator and denominator
        annotation_scale: Size factor for stretchable-arrow annotations
        chemistry_script_scale: Size factor for \\ce subscripts and charges

    """

    max_depth: int = 64
    script_scale: float = 0.6
    fraction_scale: float = 0.9
    annotation_scale: float = 0.7
    chemistry_script_scale: float = 0.7

    def __post_init__(self) -> None:
        if not isinstance(self.max_depth, int) or self.max_depth < 1:
            raise ConfigError("max_depth", self.max_depth, "must be a positive integer")
        for name in _SCALE_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or not 0 < value <= 1:
                raise ConfigError(name, value, "must be in the range (0, 1]")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ParseConfig.from_dict({"max_depth": 16, "unknown_key": 1})
            >>> config.max_depth
            16

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

# Thread-local configuration via ContextVar
_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Example:
        >>> with parse_config_context(ParseConfig(max_depth=8)):
        ...     root = Parser("{{{x}}}").parse()
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
