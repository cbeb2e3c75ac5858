"""Recursive descent parser producing a typed expression tree.

Consumes the token list from the Lexer and builds immutable (frozen)
dataclass nodes for thread-safety.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TokenNavigationMixin`: Token stream traversal
- `LiteralCaptureMixin`: Brace groups read as strings
- `CommandParsingMixin`: Command dispatch
- `MatrixParsingMixin`: Environments
- `ChemistryParsingMixin`: The \\ce scanner

This module holds the core grammar: sibling runs, atoms, arguments,
corner scripts and vertical limits.

Thread Safety:
- Parser produces immutable trees (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)
- Safe to share trees across threads

"""

from __future__ import annotations

import logging
from collections.abc import Callable
from time import perf_counter

from tiza.config import ParseConfig, get_parse_config
from tiza.lexer import tokenize
from tiza.nodes import Horizontal, MathNode, Operator, Script, ScriptKind, Text, count_nodes, tree_height
from tiza.parsing import (
    ChemistryParsingMixin,
    CommandParsingMixin,
    LiteralCaptureMixin,
    MatrixParsingMixin,
    TokenNavigationMixin,
)
from tiza.styles import StyleContext
from tiza.symbols import SYMBOLS, VERTICAL_LIMITS
from tiza.tokens import Token, TokenType
from tiza.utils.logger import get_logger

logger = get_logger(__name__)

# Token types that end a sibling run without being consumed
_RUN_TERMINATORS = frozenset(
    {TokenType.AMPERSAND, TokenType.ROW_BREAK, TokenType.RIGHT_BRACE}
)

_SCRIPT_KINDS = {
    TokenType.SUPERSCRIPT: ScriptKind.SUPER,
    TokenType.SUBSCRIPT: ScriptKind.SUB,
}


class Parser(
    TokenNavigationMixin,
    LiteralCaptureMixin,
    CommandParsingMixin,
    MatrixParsingMixin,
    ChemistryParsingMixin,
):
    """Recursive descent parser for math and chemistry markup.

    Tokenizes the source and builds one root node.

    Usage:
            >>> Parser("x^2").parse()
        Script(base=Text(content='x', ...), script=Text(content='2', ...), kind=<ScriptKind.SUPER: 'super'>)

    Error Handling:
        Never raises on malformed markup. Unknown commands become their
        literal name, missing braces end the group at the end of input, and
        nesting deeper than ``ParseConfig.max_depth`` is kept as raw text.
        Every loop consumes at least one token per iteration or stops.

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. Configuration is read from ContextVar (thread-local)
        when the parser is created. The resulting tree is immutable.

    """

    __slots__ = (
        "_source",
        "_tokens",
        "_tokens_len",
        "_pos",
        "_current",
        "_config",
        "_depth",
    )

    def __init__(self, source: str) -> None:
        """Initialize parser with source text.

        Configuration is read from ContextVar, not passed as parameters.
        Use set_parse_config() or parse_config_context() before creating
        a Parser if you need non-default configuration.

        Args:
            source: Markup source text

        """
        self._source = source
        self._tokens: list[Token] = []
        self._tokens_len = 0
        self._pos = 0
        self._current: Token | None = None
        self._config: ParseConfig = get_parse_config()
        self._depth = 0

    @property
    def token_count(self) -> int:
        """Number of tokens the source produced (0 before parse())."""
        return self._tokens_len

    def parse(self, style: StyleContext | None = None) -> MathNode:
        """Parse the source into one root node.

        Args:
            style: Root style context (upright, size 1.0 by default)

        Returns:
            The root node. Empty input gives an empty Text node.

        """
        start = perf_counter()
        self._tokens = tokenize(self._source)
        self._tokens_len = len(self._tokens)
        self._pos = 0
        self._current = self._tokens[0] if self._tokens else None
        self._depth = 0

        root = self._parse_run(style or StyleContext())

        if self._current is not None:
            logger.debug(
                "Ignoring %d trailing tokens from offset %d (stray %r)",
                self._tokens_len - self._pos,
                self._current.offset,
                self._current.content,
            )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Parsed %d chars into %d tokens and %d nodes in %.3fms",
                len(self._source),
                self._tokens_len,
                count_nodes(root),
                (perf_counter() - start) * 1000,
            )
        return root

    # =========================================================================
    # Core grammar
    # =========================================================================

    def _parse_run(
        self,
        style: StyleContext,
        stop: Callable[[Token], bool] | None = None,
    ) -> MathNode:
        """Parse siblings until ``stop`` matches, a ``}`` appears, or input ends.

        Vertical-limit operators take their scripts as centered limits;
        every other atom takes them as nested corner scripts.

        A stray ``^`` or ``_`` with no base is skipped and the run goes on
        rather than ending there, so the rest of the formula is kept.

        Returns:
            Empty Text for no siblings, the sibling itself for one,
            Horizontal for two or more.

        """
        if self._depth >= self._config.max_depth:
            return self._parse_too_deep(style)
        nodes: list[MathNode] = []
        while (token := self._current) is not None:
            if token.type is TokenType.RIGHT_BRACE or (stop is not None and stop(token)):
                break
            if token.type is TokenType.COMMAND and token.content in VERTICAL_LIMITS:
                self._advance()
                nodes.append(self._parse_limits(token.content, style))
                continue

            start = self._pos
            atom = self._parse_atom(style)
            if atom is None:
                # A skipped token is not the end of the run; a terminator is
                if self._pos == start:
                    break
                continue
            nodes.append(self._parse_scripts(atom, style))

        if not nodes:
            return Text("", style)
        if len(nodes) == 1:
            return nodes[0]
        return Horizontal(tuple(nodes))

    def _parse_atom(self, style: StyleContext) -> MathNode | None:
        """Parse one atom without its scripts.

        Returns None at a run terminator (``&``, ``\\\\``, ``}``) or end of
        input, and after skipping a token that cannot start an atom.
        """
        token = self._current
        if token is None or token.type in _RUN_TERMINATORS:
            return None
        if self._depth >= self._config.max_depth:
            return self._parse_too_deep(style)

        self._depth += 1
        try:
            match token.type:
                case TokenType.TEXT:
                    self._advance()
                    return Text(token.content, style.for_text(token.content))
                case TokenType.LEFT_BRACE:
                    return self._parse_group(style)
                case TokenType.COMMAND:
                    return self._parse_command(token, style)
                case _:
                    # Stray ^ or _ with nothing to attach to
                    self._advance()
                    return None
        finally:
            self._depth -= 1

    def _parse_group(self, style: StyleContext) -> MathNode:
        """Parse ``{...}``. The group is transparent: its run is returned."""
        self._advance()
        node = self._parse_run(style)
        if self._current_is(TokenType.RIGHT_BRACE):
            self._advance()
        return node

    def _parse_argument(self, style: StyleContext) -> MathNode:
        """Parse one command argument: a braced group or a single atom.

        Both go through ``_parse_atom`` so the argument counts one level of
        nesting. A missing argument is an empty Text node.
        """
        return self._parse_atom(style) or Text("", style)

    def _parse_scripts(self, base: MathNode, style: StyleContext) -> MathNode:
        """Attach following ``^``/``_`` scripts to ``base`` as nested corner scripts.

        Each script wraps the previous result, so a chain past the nesting
        ceiling keeps its remaining scripts as raw text.
        """
        script_style = style.scaled(self._config.script_scale)
        while (token := self._current) is not None and token.type in _SCRIPT_KINDS:
            if not self._script_fits(base):
                return Horizontal((base, self._parse_too_deep(style)))
            self._advance()
            script = self._parse_argument(script_style)
            base = Script(base, script, _SCRIPT_KINDS[token.type])
        return base

    def _script_fits(self, base: MathNode) -> bool:
        """True if wrapping ``base`` in one more Script stays under max_depth."""
        return self._depth + tree_height(base) < self._config.max_depth

    def _parse_limits(self, name: str, style: StyleContext) -> MathNode:
        """Build an Operator for ``name``, taking following scripts as limits.

        ``^`` and ``_`` may come in either order; a repeated one replaces
        the earlier limit.
        """
        script_style = style.scaled(self._config.script_scale)
        upper: MathNode | None = None
        lower: MathNode | None = None
        while (token := self._current) is not None and token.type in _SCRIPT_KINDS:
            self._advance()
            limit = self._parse_argument(script_style)
            if token.type is TokenType.SUPERSCRIPT:
                upper = limit
            else:
                lower = limit
        return Operator(SYMBOLS.get(name, name), style.roman_like(), upper=upper, lower=lower)

    def _parse_too_deep(self, style: StyleContext) -> MathNode:
        """Keep the rest of the current group as raw text.

        Consumes up to the group's closing ``}`` (left for the caller), so
        the enclosing loops always make progress.
        """
        skipped = self._skip_to_group_end()
        if not skipped:
            return Text("", style)
        raw = self._source[skipped[0].offset : skipped[-1].end_offset]
        logger.warning(
            "Nesting exceeds max_depth=%d at offset %d; keeping %d chars as text",
            self._config.max_depth,
            skipped[0].offset,
            len(raw),
        )
        return Text(raw, style.roman_like())
