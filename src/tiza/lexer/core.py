"""Single-pass lexer for Tiza markup.

Scans the source once, left to right, and never rewinds. Every iteration of
the scan loop consumes at least one character, so tokenization is O(n) and
always terminates.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from tiza.charsets import ESCAPE, GRAPHEME_CLUSTER, WHITESPACE, is_letter
from tiza.tokens import Token, TokenType

# Single characters with a dedicated token type
_SINGLE_CHAR_TYPES: dict[str, TokenType] = {
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    "^": TokenType.SUPERSCRIPT,
    "_": TokenType.SUBSCRIPT,
    "&": TokenType.AMPERSAND,
}

# Characters that always start a new token
STRUCTURAL_CHARS: frozenset[str] = frozenset(_SINGLE_CHAR_TYPES)
_TOKEN_BOUNDARIES = STRUCTURAL_CHARS | WHITESPACE | {ESCAPE}


class Lexer:
    """Single-pass lexer producing a flat token sequence.

    Rules, in priority order:
    1. ``\\\\`` is one ROW_BREAK token.
    2. ``\\`` otherwise starts a COMMAND named by the following run of
       letters (possibly empty).
    3. ``{ } ^ _ &`` get their own token types.
    4. Whitespace is skipped.
    5. Anything else (``[`` and ``]`` included) is a TEXT token holding one
       grapheme.

    Usage:
            >>> lexer = Lexer("x^2")
            >>> list(lexer.tokenize())
        [Token(TEXT, 'x', 0), Token(SUPERSCRIPT, '^', 1), Token(TEXT, '2', 2)]

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = ("_source", "_source_len", "_pos")

    def __init__(self, source: str) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markup source text
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time

        Complexity: O(n) where n = len(source)
        """
        source = self._source
        source_len = self._source_len
        while self._pos < source_len:
            char = source[self._pos]
            if char == ESCAPE:
                if self._pos + 1 < source_len and source[self._pos + 1] == ESCAPE:
                    yield self._make_token(TokenType.ROW_BREAK, self._pos, self._pos + 2)
                else:
                    yield self._scan_command()
            elif char in _SINGLE_CHAR_TYPES:
                yield self._make_token(_SINGLE_CHAR_TYPES[char], self._pos, self._pos + 1)
            elif char in WHITESPACE:
                self._pos += 1
            else:
                yield self._scan_grapheme()

    def _scan_command(self) -> Token:
        """Scan ``\\name``; the name is the maximal run of letters."""
        start = self._pos
        end = start + 1
        while end < self._source_len and is_letter(self._source[end]):
            end += 1
        token = Token(
            type=TokenType.COMMAND,
            content=self._source[start + 1 : end],
            offset=start,
            end_offset=end,
        )
        self._pos = end
        return token

    def _scan_grapheme(self) -> Token:
        """Scan one extended grapheme cluster.

        The cluster is cut short at a structural character, whitespace or a
        backslash, which always begin a token of their own.
        """
        start = self._pos
        end = GRAPHEME_CLUSTER.match(self._source, start).end()
        for index in range(start + 1, end):
            if self._source[index] in _TOKEN_BOUNDARIES:
                end = index
                break
        return self._make_token(TokenType.TEXT, start, end)

    def _make_token(self, token_type: TokenType, start: int, end: int) -> Token:
        """Create a token for source[start:end] and commit the position."""
        self._pos = end
        return Token(
            type=token_type,
            content=self._source[start:end],
            offset=start,
            end_offset=end,
        )


def tokenize(source: str) -> list[Token]:
    """Tokenize ``source`` into a list of tokens.

    Convenience wrapper around ``Lexer(source).tokenize()``. Each call
    re-scans from the start.

    Example:
        >>> [t.content for t in tokenize("\\frac{a}{b}")]
        ['frac', '{', 'a', '}', '{', 'b', '}']
    """
    return list(Lexer(source).tokenize())
