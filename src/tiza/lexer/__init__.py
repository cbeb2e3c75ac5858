"""Single-pass lexer for Tiza markup.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, tokenize
└── core.py              # Lexer class + tokenize() convenience function

Usage:
    >>> from tiza.lexer import Lexer
    >>> for token in Lexer("a_1").tokenize():
    ...     print(token)
Token(TEXT, 'a', 0)
Token(SUBSCRIPT, '_', 1)
Token(TEXT, '1', 2)

"""

from tiza.lexer.core import Lexer, tokenize

__all__ = ["Lexer", "tokenize"]
