"""Parsing subsystem for the Tiza parser.

Provides mixin classes for modular parsing functionality:
- `TokenNavigationMixin`: Token stream traversal
- `LiteralCaptureMixin`: Brace groups read as strings (names, raw payloads)
- `CommandParsingMixin`: Command dispatch (structures, styles, symbols)
- `MatrixParsingMixin`: \\begin ... \\end environments
- `ChemistryParsingMixin`: The \\ce chemistry scanner

Architecture:
The parser uses a mixin-based design for separation of concerns. Each
mixin handles one sub-grammar; the Parser class supplies sibling runs,
atoms, arguments and scripts.

Example:
    >>> from tiza.parsing import TokenNavigationMixin, CommandParsingMixin
    >>> class Parser(TokenNavigationMixin, CommandParsingMixin):
    ...     pass

"""

from tiza.parsing.chemistry import ChemistryParsingMixin
from tiza.parsing.commands import CommandParsingMixin
from tiza.parsing.literals import LiteralCaptureMixin
from tiza.parsing.matrix import MatrixParsingMixin
from tiza.parsing.protocols import ParserHost
from tiza.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "TokenNavigationMixin",
    "LiteralCaptureMixin",
    "CommandParsingMixin",
    "MatrixParsingMixin",
    "ChemistryParsingMixin",
    "ParserHost",
]
