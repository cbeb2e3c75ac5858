"""Chemistry sub-grammar for ``\\ce{...}``.

A flat left-to-right scan over the group's tokens rather than general
recursion. Text tokens are read with a few local rules:

- Digits directly after an element or a closer become a subscript: H2O.
- ``->`` and ``<-`` are reaction arrows; ``<=>`` is an equilibrium glyph.
- ``-`` is a charge after an atom unless a letter follows (then a bond).
- ``+`` is a charge when it ends the formula or is followed by another
  sign or a closer; otherwise it is a spaced reaction separator.

Commands and groups inside the formula go through the general atom parser.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tiza.charsets import CLOSING_CHARS, is_digit, is_letter
from tiza.nodes import (
    Arrow,
    ArrowKind,
    Horizontal,
    MathNode,
    Script,
    ScriptKind,
    Space,
    Text,
)
from tiza.tokens import Token, TokenType

if TYPE_CHECKING:
    from tiza.config import ParseConfig
    from tiza.styles import StyleContext

MINUS_SIGN = "−"
EQUILIBRIUM = "⇌"

# Width of the space on each side of a reaction "+", in em
_SEPARATOR_WIDTH = 0.5


def _is_text(token: Token | None, content: str) -> bool:
    return token is not None and token.type is TokenType.TEXT and token.content == content


def _closes_charge(token: Token | None) -> bool:
    """A token after ``+`` that makes the ``+`` a charge suffix."""
    if token is None or token.type is TokenType.RIGHT_BRACE:
        return True
    if token.type is not TokenType.TEXT:
        return False
    return token.content in ("+", "-") or token.content in CLOSING_CHARS


class ChemistryParsingMixin:
    """Mixin for the ``\\ce`` chemistry scanner.

    Required Host Attributes:
        - _current: Token | None
        - _pos: int
        - _config: ParseConfig

    Required Host Methods:
        - _advance() -> Token | None
        - _peek(offset) -> Token | None
        - _current_is(token_type) -> bool
        - _parse_atom(style) -> MathNode | None
        - _parse_argument(style) -> MathNode
        - _parse_too_deep(style) -> MathNode
        - _script_fits(base) -> bool

    """

    _current: Token | None
    _pos: int
    _config: ParseConfig

    def _parse_chemistry(self, name: str, style: StyleContext) -> MathNode:
        """Scan a chemistry formula up to and including its closing ``}``.

        Everything is set upright at the current size; subscripts and
        charges use ``chemistry_script_scale``.
        """
        if self._current_is(TokenType.LEFT_BRACE):
            self._advance()
        chem_style = style.roman_like()
        script_style = chem_style.scaled(self._config.chemistry_script_scale)

        nodes: list[MathNode] = []
        while (token := self._current) is not None:
            kind = token.type
            if kind is TokenType.RIGHT_BRACE:
                self._advance()
                break
            if kind is TokenType.TEXT:
                self._scan_chemistry_text(token, nodes, chem_style, script_style)
            elif kind is TokenType.SUPERSCRIPT or kind is TokenType.SUBSCRIPT:
                if nodes and self._keep_rest_if_too_deep(nodes, chem_style):
                    continue
                self._advance()
                if nodes:
                    base = nodes.pop()
                    script = self._parse_argument(script_style)
                    script_kind = (
                        ScriptKind.SUPER if kind is TokenType.SUPERSCRIPT else ScriptKind.SUB
                    )
                    nodes.append(Script(base, script, script_kind))
            else:
                start = self._pos
                node = self._parse_atom(chem_style)
                if node is not None:
                    nodes.append(node)
                elif self._pos == start:
                    self._advance()

        if not nodes:
            return Text("", style)
        if len(nodes) == 1:
            return nodes[0]
        return Horizontal(tuple(nodes))

    def _scan_chemistry_text(
        self,
        token: Token,
        nodes: list[MathNode],
        chem_style: StyleContext,
        script_style: StyleContext,
    ) -> None:
        """Consume one or more text tokens and update ``nodes`` in place."""
        content = token.content

        if is_digit(content) and nodes and self._follows_subscriptable(token):
            if self._keep_rest_if_too_deep(nodes, chem_style):
                return
            digits = self._take_adjacent_digits(token)
            nodes.append(Script(nodes.pop(), Text(digits, script_style), ScriptKind.SUB))
            return

        if content == "-":
            following = self._peek()
            if _is_text(following, ">"):
                self._advance()
                self._advance()
                nodes.append(Arrow(kind=ArrowKind.RIGHT))
                return
            bond = (
                following is not None
                and following.type is TokenType.TEXT
                and is_letter(following.content)
            )
            if nodes and not isinstance(nodes[-1], Space) and not bond:
                if self._keep_rest_if_too_deep(nodes, chem_style):
                    return
                self._advance()
                charge = Text(MINUS_SIGN, script_style)
                nodes.append(Script(nodes.pop(), charge, ScriptKind.SUPER))
            else:
                self._advance()
                nodes.append(Text(MINUS_SIGN, chem_style))
            return

        if content == "+":
            following = self._peek()
            if nodes and not isinstance(nodes[-1], Space) and _closes_charge(following):
                if self._keep_rest_if_too_deep(nodes, chem_style):
                    return
                self._advance()
                nodes.append(Script(nodes.pop(), Text("+", script_style), ScriptKind.SUPER))
            else:
                self._advance()
                gap = _SEPARATOR_WIDTH * chem_style.size
                nodes.extend((Space(gap), Text("+", chem_style), Space(gap)))
            return

        if content == "<":
            if _is_text(self._peek(), "=") and _is_text(self._peek(2), ">"):
                for _ in range(3):
                    self._advance()
                nodes.append(Text(EQUILIBRIUM, chem_style))
                return
            if _is_text(self._peek(), "-"):
                self._advance()
                self._advance()
                nodes.append(Arrow(kind=ArrowKind.LEFT))
                return

        self._advance()
        nodes.append(Text(content, chem_style))

    def _keep_rest_if_too_deep(self, nodes: list[MathNode], chem_style: StyleContext) -> bool:
        """Replace the rest of the formula with raw text if another script on
        the last node would pass max_depth. Returns True when it did.
        """
        if self._script_fits(nodes[-1]):
            return False
        nodes.append(self._parse_too_deep(chem_style))
        return True

    def _follows_subscriptable(self, token: Token) -> bool:
        """Previous token touches ``token`` and is a letter or a closer."""
        previous = self._peek(-1)
        if previous is None or previous.end_offset != token.offset:
            return False
        return (
            is_letter(previous.content)
            or previous.type is TokenType.RIGHT_BRACE
            or (previous.type is TokenType.TEXT and previous.content in CLOSING_CHARS)
        )

    def _take_adjacent_digits(self, token: Token) -> str:
        """Consume ``token`` and any digit tokens directly after it."""
        digits = [token.content]
        end = token.end_offset
        self._advance()
        while (
            (following := self._current) is not None
            and following.type is TokenType.TEXT
            and following.offset == end
            and is_digit(following.content)
        ):
            digits.append(following.content)
            end = following.end_offset
            self._advance()
        return "".join(digits)
