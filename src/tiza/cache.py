"""Content-addressed parse cache for Tiza.

Provides (content_hash, config_hash) -> root node caching to avoid
re-parsing unchanged formulas. Streaming and typewriter-style renderers
re-submit the same formula on every frame; a cache turns those repeats
into dictionary lookups.

Thread Safety:
    DictParseCache is not thread-safe. For parallel parsing, use a cache
    implementation with internal locking (e.g. threading.Lock around get/put).
    Cached trees are immutable and safe to share.

Example:
    >>> from tiza import parse, DictParseCache
    >>> cache = DictParseCache()
    >>> first = parse("x^2", cache=cache)
    >>> parse("x^2", cache=cache) is first  # Cache hit, no re-parse
    True
"""

from __future__ import annotations

from dataclasses import astuple
from typing import TYPE_CHECKING, Protocol

from tiza.utils.hashing import hash_str

if TYPE_CHECKING:
    from tiza.config import ParseConfig
    from tiza.nodes import MathNode


class ParseCache(Protocol):
    """Protocol for content-addressed parse caches.

    Cache key is (content_hash, config_hash). Cached value is the root node.
    """

    def get(self, content_hash: str, config_hash: str) -> MathNode | None:
        """Return cached root if present, else None."""
        ...

    def put(self, content_hash: str, config_hash: str, root: MathNode) -> None:
        """Store root in cache."""
        ...


class DictParseCache:
    """In-memory parse cache using a dict.

    Not thread-safe. For parallel parsing, wrap with a lock or use a
    thread-safe implementation.
    """

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[tuple[str, str], MathNode] = {}

    def __len__(self) -> int:
        return len(self._data)

    def get(self, content_hash: str, config_hash: str) -> MathNode | None:
        """Return cached root if present, else None."""
        return self._data.get((content_hash, config_hash))

    def put(self, content_hash: str, config_hash: str, root: MathNode) -> None:
        """Store root in cache."""
        self._data[(content_hash, config_hash)] = root

    def clear(self) -> None:
        self._data.clear()


def hash_content(source: str) -> str:
    """Compute SHA256 hash of source for cache key."""
    return hash_str(source)


def hash_config(config: ParseConfig) -> str:
    """Compute hash of ParseConfig for cache key.

    Every field affects the tree (depth ceiling and size factors), so all
    of them go into the key.
    """
    return hash_str("|".join(repr(value) for value in astuple(config)))


__all__ = [
    "DictParseCache",
    "ParseCache",
    "hash_config",
    "hash_content",
]
