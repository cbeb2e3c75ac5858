"""Character sets and Unicode-aware classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Letter and digit tests use Unicode categories rather than ASCII ranges, so
``α`` is a letter and ``٣`` is a digit.

Usage:
    from tiza.charsets import is_letter

    if is_letter(token.content[:1]):
        ...
"""

import unicodedata

import regex

# Escape marker that starts a command or a row break
ESCAPE = "\\"

# Characters the lexer consumes without emitting a token
WHITESPACE: frozenset[str] = frozenset(" \t\n\r")

# Leading characters that resolve a text atom to the roman-like style
ROMAN_PUNCTUATION: frozenset[str] = frozenset("+-=()[].,/!|<>")

# Literal closers that a chemistry subscript or charge may follow
CLOSING_CHARS: frozenset[str] = frozenset(")]")

# Characters a control symbol (``\{``, ``\%``) turns into literal text
ESCAPABLE_CHARS: frozenset[str] = frozenset("{}&%$#_|")

# Hex digits for #RRGGBB color names
HEX_DIGITS: frozenset[str] = frozenset("0123456789abcdefABCDEF")

# One extended grapheme cluster (UAX #29): flags, skin tones, ZWJ sequences
GRAPHEME_CLUSTER = regex.compile(r"\X")


def is_letter(char: str) -> bool:
    """Check if character is a Unicode letter (L* categories)."""
    if not char:
        return False
    return unicodedata.category(char[0]).startswith("L")


def is_digit(char: str) -> bool:
    """Check if character is a Unicode number (N* categories)."""
    if not char:
        return False
    return unicodedata.category(char[0]).startswith("N")


def is_single_letter(text: str) -> bool:
    """A single grapheme whose base character is a letter."""
    if not text or not is_letter(text[0]):
        return False
    return GRAPHEME_CLUSTER.fullmatch(text) is not None


def is_hex_color(name: str) -> bool:
    """Check for a ``#RRGGBB`` color literal."""
    return len(name) == 7 and name[0] == "#" and all(c in HEX_DIGITS for c in name[1:])
