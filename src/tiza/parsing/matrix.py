"""Environment parsing: ``\\begin{name} ... \\end{name}``.

The body is split into cells by ``&`` and into rows by ``\\\\``. Each cell
is an ordinary sibling run. Rows are kept as written; short rows are not
padded.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tiza.nodes import BracketStyle, MathNode, Matrix
from tiza.symbols import COLUMN_SPEC_ENVIRONMENTS, ENVIRONMENT_BRACKETS
from tiza.tokens import Token, TokenType

if TYPE_CHECKING:
    from tiza.styles import StyleContext


def _is_cell_boundary(token: Token) -> bool:
    return (
        token.type is TokenType.AMPERSAND
        or token.type is TokenType.ROW_BREAK
        or token.is_command("end")
    )


class MatrixParsingMixin:
    """Mixin for matrix-like environments.

    Required Host Attributes:
        - _current: Token | None
        - _pos: int

    Required Host Methods:
        - _advance() -> Token | None
        - _current_is(token_type) -> bool
        - _parse_run(style, stop=None) -> MathNode
        - _read_literal_string() -> str
        - _capture_raw_group() -> str | None

    """

    _current: Token | None
    _pos: int

    def _parse_environment(self, name: str, style: StyleContext) -> MathNode:
        """Parse an environment body into a Matrix.

        The environment name only selects the bracket style; the name after
        ``\\end`` is not checked against it. Unterminated environments end
        with the input.

        Complexity: O(n) in the body's tokens. Every iteration either
        consumes a token or force-skips one.
        """
        environment = self._read_literal_string()
        bracket = ENVIRONMENT_BRACKETS.get(environment, BracketStyle.NONE)
        if environment in COLUMN_SPEC_ENVIRONMENTS:
            self._capture_raw_group()

        rows: list[tuple[MathNode, ...]] = []
        row: list[MathNode] = []
        while (token := self._current) is not None:
            if token.is_command("end"):
                self._advance()
                self._read_literal_string()
                break

            start = self._pos
            row.append(self._parse_run(style, stop=_is_cell_boundary))
            if self._current_is(TokenType.AMPERSAND):
                self._advance()
            elif self._current_is(TokenType.ROW_BREAK):
                self._advance()
                rows.append(tuple(row))
                row = []

            # Stuck on a token no cell can start with (a stray "}")
            if self._pos == start:
                self._advance()

        if row:
            rows.append(tuple(row))
        return Matrix(tuple(rows), bracket)
