"""
Tiza: Math and Chemistry Markup Parser

Turns LaTeX-like math markup, including a small chemistry dialect, into an
immutable typed expression tree for a layout engine to draw. Best-effort
and error-tolerant: malformed input always produces a tree, never an
exception. Zero runtime dependencies.

Quick Start:
    >>> from tiza import parse
    >>> root = parse("x^2")
    >>> root.kind
    <ScriptKind.SUPER: 'super'>

    >>> # Chemistry
    >>> root = parse("\\ce{H2O}")

    >>> # Tokens only
    >>> from tiza import tokenize
    >>> [t.content for t in tokenize("a_1")]
    ['a', '_', '1']

Installation:
    pip install tiza
"""

from time import perf_counter

from tiza.cache import DictParseCache, ParseCache, hash_config, hash_content
from tiza.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from tiza.errors import ConfigError, SerializationError, TizaError
from tiza.lexer import Lexer, tokenize
from tiza.nodes import (
    Accent,
    Arrow,
    ArrowKind,
    Binomial,
    BracketStyle,
    Color,
    Delimiter,
    Enclosure,
    EnclosureKind,
    Fraction,
    Horizontal,
    MathNode,
    Matrix,
    Node,
    Operator,
    Script,
    ScriptKind,
    Space,
    Sqrt,
    StructureLiteral,
    Text,
    children_of,
    count_nodes,
    iter_nodes,
    tree_height,
)
from tiza.parser import Parser
from tiza.profiling import ParseAccumulator, get_parse_accumulator, profiled_parse
from tiza.serialization import from_dict, from_json, to_dict, to_json
from tiza.styles import FontStyle, StyleContext
from tiza.tokens import Token, TokenType
from tiza.visitor import BaseVisitor, transform

__version__ = "0.1.0"


def parse(
    source: str,
    *,
    config: ParseConfig | None = None,
    cache: ParseCache | None = None,
) -> MathNode:
    """Parse markup source into an expression tree.

    Args:
        source: Math markup, e.g. ``\\frac{a}{b}`` or ``\\ce{H2O}``
        config: Parse configuration for this call. Defaults to the
            context's configuration (see ``parse_config_context``).
        cache: Optional content-addressed parse cache. When provided, checks
            cache before parsing; on miss, parses and stores result. For
            parallel parsing, use a thread-safe cache implementation.

    Returns:
        Root node of the tree

    Example:
        >>> parse("\\frac{a}{b}")
        Fraction(numerator=Text(content='a', ...), denominator=Text(content='b', ...))

        >>> # With parse cache
        >>> cache = DictParseCache()
        >>> root = parse("x^2", cache=cache)
    """
    active = config if config is not None else get_parse_config()

    content_hash = config_hash = ""
    if cache is not None:
        content_hash = hash_content(source)
        config_hash = hash_config(active)
        cached = cache.get(content_hash, config_hash)
        if cached is not None:
            return cached

    start = perf_counter()
    with parse_config_context(active):
        parser = Parser(source)
        root = parser.parse()
    duration_ms = (perf_counter() - start) * 1000

    if cache is not None:
        cache.put(content_hash, config_hash, root)

    # Record profiling metrics if accumulator is active
    acc = get_parse_accumulator()
    if acc is not None:
        acc.record_parse(
            source_length=len(source),
            token_count=parser.token_count,
            node_count=count_nodes(root),
            duration_ms=duration_ms,
        )

    return root


__all__ = [  # noqa: RUF022: grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "parse",
    "tokenize",
    # Parse cache
    "DictParseCache",
    "ParseCache",
    "hash_config",
    "hash_content",
    # Nodes
    "MathNode",
    "Node",
    "Text",
    "Horizontal",
    "Script",
    "Operator",
    "Fraction",
    "Binomial",
    "Sqrt",
    "Matrix",
    "Delimiter",
    "Accent",
    "Enclosure",
    "Arrow",
    "Color",
    "Space",
    "StructureLiteral",
    # Node kinds
    "ScriptKind",
    "BracketStyle",
    "EnclosureKind",
    "ArrowKind",
    # Styles
    "FontStyle",
    "StyleContext",
    # Tree traversal
    "children_of",
    "iter_nodes",
    "count_nodes",
    "tree_height",
    # Parser components
    "Lexer",
    "Parser",
    # Visitor + Transform
    "BaseVisitor",
    "transform",
    # Profiling
    "ParseAccumulator",
    "profiled_parse",
    "get_parse_accumulator",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "TizaError",
    "ConfigError",
    "SerializationError",
    # Tokens
    "Token",
    "TokenType",
]
