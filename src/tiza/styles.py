"""Style context threaded through the parser.

A StyleContext pairs an abstract font style tag with a size multiplier
relative to the root of the formula (root = 1.0). The parser resolves the
style of every node eagerly; the layout engine maps tags to concrete fonts.

Thread Safety:
StyleContext is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from tiza.charsets import ROMAN_PUNCTUATION, is_digit, is_single_letter


class FontStyle(Enum):
    """Abstract font style tags (closed set)."""

    ROMAN = "roman"
    ITALIC = "italic"
    BOLD = "bold"
    BOLD_ITALIC = "boldItalic"
    CALLIGRAPHIC = "calligraphic"
    BLACKBOARD_BOLD = "blackboardBold"
    FRAKTUR = "fraktur"
    TYPEWRITER = "typewriter"
    SANS_SERIF = "sansSerif"
    SCRIPT = "script"


# Styles kept verbatim for text atoms (no roman/italic refinement)
DECORATIVE_STYLES: frozenset[FontStyle] = frozenset(
    {
        FontStyle.CALLIGRAPHIC,
        FontStyle.BLACKBOARD_BOLD,
        FontStyle.FRAKTUR,
        FontStyle.TYPEWRITER,
        FontStyle.SANS_SERIF,
        FontStyle.SCRIPT,
    }
)

_BOLD_FAMILY: frozenset[FontStyle] = frozenset({FontStyle.BOLD, FontStyle.BOLD_ITALIC})


@dataclass(frozen=True, slots=True)
class StyleContext:
    """Immutable style context: font style tag plus relative size.

    Attributes:
        font_style: Abstract style tag
        size: Size multiplier relative to the formula root

    Examples:
            >>> root = StyleContext()
            >>> root.scaled(0.6)
        StyleContext(font_style=<FontStyle.ROMAN: 'roman'>, size=0.6)

    """

    font_style: FontStyle = FontStyle.ROMAN
    size: float = 1.0

    def scaled(self, factor: float) -> StyleContext:
        """Child context at ``factor`` times this size."""
        return replace(self, size=self.size * factor)

    def with_font_style(self, font_style: FontStyle) -> StyleContext:
        """Same size, different style tag."""
        if font_style is self.font_style:
            return self
        return replace(self, font_style=font_style)

    def roman_like(self) -> StyleContext:
        """Upright variant: BOLD within the bold family, ROMAN otherwise."""
        if self.font_style in _BOLD_FAMILY:
            return self.with_font_style(FontStyle.BOLD)
        return self.with_font_style(FontStyle.ROMAN)

    def italic_like(self) -> StyleContext:
        """Slanted variant: BOLD_ITALIC within the bold family, ITALIC otherwise."""
        if self.font_style in _BOLD_FAMILY:
            return self.with_font_style(FontStyle.BOLD_ITALIC)
        return self.with_font_style(FontStyle.ITALIC)

    def for_text(self, content: str) -> StyleContext:
        """Resolve the style of a text atom from its content.

        Decorative styles are kept as-is. Otherwise digits and operator
        punctuation are upright, a single letter is slanted, and anything
        else falls back to upright.

        """
        if self.font_style in DECORATIVE_STYLES:
            return self
        first = content[:1]
        if is_digit(first) or first in ROMAN_PUNCTUATION:
            return self.roman_like()
        if is_single_letter(content):
            return self.italic_like()
        return self.roman_like()
