"""Token navigation utilities for the Tiza parser.

Provides mixin for token stream navigation and basic parsing operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tiza.tokens import Token, TokenType

if TYPE_CHECKING:
    from collections.abc import Sequence


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    Required Host Attributes:
        - _tokens: Sequence[Token]
        - _tokens_len: int (cached len(_tokens) for hot loops)
        - _pos: int
        - _current: Token | None

    """

    _tokens: Sequence[Token]
    _tokens_len: int
    _pos: int
    _current: Token | None

    def _advance(self) -> Token | None:
        """Advance to next token and return it."""
        self._pos += 1
        if self._pos < self._tokens_len:
            self._current = self._tokens[self._pos]
        else:
            self._current = None
        return self._current

    def _peek(self, offset: int = 1) -> Token | None:
        """Peek at token at offset from current position."""
        pos = self._pos + offset
        if 0 <= pos < self._tokens_len:
            return self._tokens[pos]
        return None

    def _current_is(self, token_type: TokenType) -> bool:
        """Check the current token's type without consuming it."""
        return self._current is not None and self._current.type is token_type

    def _current_text_is(self, content: str) -> bool:
        """Check for a TEXT token with exactly ``content``."""
        token = self._current
        return (
            token is not None and token.type is TokenType.TEXT and token.content == content
        )

    def _skip_to_group_end(self) -> list[Token]:
        """Consume tokens up to (not including) the unmatched ``}`` or the end.

        Nested brace groups are consumed whole. Returns the consumed tokens.
        """
        skipped: list[Token] = []
        depth = 0
        while (token := self._current) is not None:
            if token.type is TokenType.RIGHT_BRACE:
                if depth == 0:
                    break
                depth -= 1
            elif token.type is TokenType.LEFT_BRACE:
                depth += 1
            skipped.append(token)
            self._advance()
        return skipped
