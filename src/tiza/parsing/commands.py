"""Command dispatch for the Tiza parser.

A command token is resolved in a fixed order:

1. The handler table (structural commands, style switches, spacing,
   colors, function names, arrows, structure macros, environments,
   chemistry). Handlers are looked up by name and called as
   ``handler(name, style)``.
2. The glyph table: ``\\alpha`` -> ``α`` as upright text.
3. The accent table: ``\\tilde{x}`` -> Accent.
4. The literal command name as upright text.

Step 4 means no command ever aborts parsing.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from tiza.charsets import ESCAPABLE_CHARS, WHITESPACE, is_hex_color
from tiza.nodes import (
    Accent,
    Arrow,
    Binomial,
    BracketStyle,
    Color,
    Delimiter,
    Enclosure,
    Fraction,
    MathNode,
    Space,
    Sqrt,
    StructureLiteral,
    Text,
)
from tiza.symbols import (
    ACCENTS,
    ARROW_KINDS,
    COLORS,
    CONTROL_SPACING,
    DELIMITER_BRACKETS,
    ENCLOSURES,
    FUNCTION_NAMES,
    SPACING_WIDTHS,
    STRUCTURE_SHORTHANDS,
    STYLE_SWITCHES,
    SYMBOLS,
)
from tiza.tokens import Token, TokenType

if TYPE_CHECKING:
    from tiza.config import ParseConfig
    from tiza.styles import StyleContext

# Width of a control space (backslash followed by whitespace)
_CONTROL_SPACE_WIDTH = 0.3


def _build_handler_table() -> dict[str, str]:
    """Command name -> handler method name."""
    table: dict[str, str] = {
        "frac": "_parse_fraction",
        "binom": "_parse_binomial",
        "sqrt": "_parse_sqrt",
        "begin": "_parse_environment",
        "left": "_parse_left_right",
        "color": "_parse_color",
        "textcolor": "_parse_color",
        "chemfig": "_parse_structure_literal",
        "ce": "_parse_chemistry",
    }
    for group, handler in (
        (ENCLOSURES, "_parse_enclosure"),
        (STYLE_SWITCHES, "_parse_style_switch"),
        (SPACING_WIDTHS, "_parse_spacing"),
        (FUNCTION_NAMES, "_parse_function_name"),
        (ARROW_KINDS, "_parse_stretchable_arrow"),
        (STRUCTURE_SHORTHANDS, "_parse_structure_shorthand"),
    ):
        for name in group:
            table.setdefault(name, handler)
    return table


_COMMAND_HANDLERS: dict[str, str] = _build_handler_table()


def _is_right_command(token: Token) -> bool:
    return token.is_command("right")


def _is_closing_bracket(token: Token) -> bool:
    return token.type is TokenType.TEXT and token.content == "]"


class CommandParsingMixin:
    """Mixin resolving command tokens into nodes.

    Required Host Attributes:
        - _current: Token | None
        - _source: str
        - _config: ParseConfig

    Required Host Methods:
        - _advance() -> Token | None
        - _current_is(token_type) -> bool
        - _current_text_is(content) -> bool
        - _parse_run(style, stop=None) -> MathNode
        - _parse_argument(style) -> MathNode
        - _read_literal_string() -> str
        - _capture_raw_group() -> str | None
        - _parse_environment(name, style) -> MathNode
        - _parse_chemistry(name, style) -> MathNode

    """

    _current: Token | None
    _source: str
    _config: ParseConfig

    def _parse_command(self, token: Token, style: StyleContext) -> MathNode | None:
        """Consume a command token and dispatch on its name."""
        name = token.content
        self._advance()

        if not name:
            return self._parse_control_symbol(token, style)
        handler = _COMMAND_HANDLERS.get(name)
        if handler is not None:
            parse_handler: Callable[[str, StyleContext], MathNode | None] = getattr(
                self, handler
            )
            return parse_handler(name, style)

        glyph = SYMBOLS.get(name)
        if glyph is not None:
            return Text(glyph, style.roman_like())
        if name in ACCENTS:
            return self._parse_accent(name, style)
        return Text(name, style.roman_like())

    # =========================================================================
    # Structural commands
    # =========================================================================

    def _parse_fraction(self, name: str, style: StyleContext) -> MathNode:
        arg_style = style.scaled(self._config.fraction_scale)
        numerator = self._parse_argument(arg_style)
        denominator = self._parse_argument(arg_style)
        return Fraction(numerator, denominator)

    def _parse_binomial(self, name: str, style: StyleContext) -> MathNode:
        numerator = self._parse_argument(style)
        denominator = self._parse_argument(style)
        return Binomial(numerator, denominator)

    def _parse_sqrt(self, name: str, style: StyleContext) -> MathNode:
        return Sqrt(self._parse_argument(style))

    def _parse_enclosure(self, name: str, style: StyleContext) -> MathNode:
        return Enclosure(self._parse_argument(style), ENCLOSURES[name])

    def _parse_accent(self, name: str, style: StyleContext) -> MathNode:
        base = self._parse_argument(style)
        return Accent(base, ACCENTS[name], style.roman_like())

    def _parse_left_right(self, name: str, style: StyleContext) -> MathNode | None:
        """Parse ``\\left<delim> ... \\right<delim>``.

        The opening delimiter picks the bracket style; the closing one is
        consumed unchecked. A control-symbol delimiter (``\\{``) counts as
        the character after the backslash.
        """
        if self._current is None:
            return None
        opening = self._take_delimiter()
        inner = self._parse_run(style, stop=_is_right_command)
        if self._current is not None and self._current.is_command("right"):
            self._advance()
            if self._current is not None:
                self._take_delimiter()
        return Delimiter(inner, DELIMITER_BRACKETS.get(opening, BracketStyle.PAREN))

    def _take_delimiter(self) -> str:
        """Consume one delimiter token and return its text."""
        token = self._current
        self._advance()
        if token.is_command("") and self._current is not None:
            token = self._current
            self._advance()
        return token.content

    # =========================================================================
    # Style, spacing and color
    # =========================================================================

    def _parse_style_switch(self, name: str, style: StyleContext) -> MathNode:
        """``\\mathbf{x}``: the argument under an overridden style tag."""
        return self._parse_argument(style.with_font_style(STYLE_SWITCHES[name]))

    def _parse_function_name(self, name: str, style: StyleContext) -> MathNode:
        return Text(name, style.roman_like())

    def _parse_spacing(self, name: str, style: StyleContext) -> MathNode:
        return Space(SPACING_WIDTHS[name] * style.size)

    def _parse_control_symbol(self, token: Token, style: StyleContext) -> MathNode:
        """A backslash not followed by a letter: ``\\,``, ``\\{``, ``\\ ``."""
        following = self._source[token.end_offset : token.end_offset + 1]
        if following and following in WHITESPACE:
            return Space(_CONTROL_SPACE_WIDTH * style.size)
        current = self._current
        if current is None or current.type is TokenType.COMMAND:
            return Text("", style.roman_like())
        if current.type is TokenType.TEXT and current.content in CONTROL_SPACING:
            self._advance()
            return Space(CONTROL_SPACING[current.content] * style.size)
        if current.content in ESCAPABLE_CHARS:
            self._advance()
            return Text(current.content, style.roman_like())
        return Text("", style.roman_like())

    def _parse_color(self, name: str, style: StyleContext) -> MathNode:
        """``\\color{name}{body}``; an unknown name leaves the body uncolored."""
        color_name = self._read_literal_string()
        if not self._current_is(TokenType.LEFT_BRACE):
            return Text("", style)
        self._advance()
        content = self._parse_run(style)
        if not self._current_is(TokenType.RIGHT_BRACE):
            return content
        self._advance()

        color = COLORS.get(color_name)
        if color is None and is_hex_color(color_name):
            color = color_name.upper()
        if color is None:
            return content
        return Color(content, color)

    # =========================================================================
    # Arrows and structure literals
    # =========================================================================

    def _parse_stretchable_arrow(self, name: str, style: StyleContext) -> MathNode:
        """``\\xrightarrow[below]{above}``."""
        annotation_style = style.scaled(self._config.annotation_scale)
        lower: MathNode | None = None
        if self._current_text_is("["):
            self._advance()
            lower = self._parse_run(annotation_style, stop=_is_closing_bracket)
            if self._current_text_is("]"):
                self._advance()
        upper = self._parse_argument(annotation_style)
        return Arrow(upper=upper, lower=lower, kind=ARROW_KINDS[name])

    def _parse_structure_literal(self, name: str, style: StyleContext) -> MathNode:
        structure = self._capture_raw_group()
        if structure is None:
            return Text(name, style.roman_like())
        return StructureLiteral(structure, style)

    def _parse_structure_shorthand(self, name: str, style: StyleContext) -> MathNode:
        return StructureLiteral(STRUCTURE_SHORTHANDS[name], style)
