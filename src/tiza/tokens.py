"""Token and TokenType definitions for the Tiza lexer.

The lexer produces a flat list of Token objects that the parser consumes.
Each Token has a type, the literal source text it came from, and its
source span.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Token types produced by the lexer.

    Brackets ``[`` and ``]`` have no type of their own: they are TEXT tokens
    and the parser tells an optional argument from a literal bracket by
    looking at token content.

    """

    COMMAND = auto()  # \frac, \alpha, \ (empty name)
    TEXT = auto()  # a, 1, +, [, ]
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    SUPERSCRIPT = auto()  # ^
    SUBSCRIPT = auto()  # _
    AMPERSAND = auto()  # & (matrix cell separator)
    ROW_BREAK = auto()  # \\ (matrix row separator)
    UNKNOWN = auto()  # never emitted by the lexer; skipped by the parser


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        content: Literal source text. For COMMAND tokens this is the command
            name without the escape marker; for ROW_BREAK it is ``\\\\``.
        offset: Absolute start position in source
        end_offset: Absolute end position in source (exclusive)

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    type: TokenType
    content: str
    offset: int = 0
    end_offset: int = 0

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.content
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.offset})"

    def is_command(self, name: str) -> bool:
        """True if this is the command ``\\name``."""
        return self.type is TokenType.COMMAND and self.content == name

    @property
    def source_text(self) -> str:
        """The token as it would be written in source."""
        if self.type is TokenType.COMMAND:
            return "\\" + self.content
        return self.content
