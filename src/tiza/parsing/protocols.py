"""Protocols defining the parser mixin contracts.

Each mixin documents "Required Host Attributes/Methods" in its docstring;
this module turns the shared core of those requirements into a
type-checkable Protocol.

Thread Safety:
    Protocols are purely structural; no runtime overhead.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from tiza.tokens import Token

if TYPE_CHECKING:
    from tiza.config import ParseConfig
    from tiza.nodes import MathNode
    from tiza.styles import StyleContext


@runtime_checkable
class ParserHost(Protocol):
    """Contract every parsing mixin relies on.

    Provided by: TokenNavigationMixin + Parser
    Required by: CommandParsingMixin, MatrixParsingMixin,
        ChemistryParsingMixin, LiteralCaptureMixin
    """

    _tokens: Sequence[Token]
    _pos: int
    _current: Token | None
    _config: ParseConfig

    def _advance(self) -> Token | None: ...
    def _peek(self, offset: int = 1) -> Token | None: ...
    def _parse_run(
        self,
        style: StyleContext,
        stop: Callable[[Token], bool] | None = None,
    ) -> MathNode: ...
    def _parse_atom(self, style: StyleContext) -> MathNode | None: ...
    def _parse_argument(self, style: StyleContext) -> MathNode: ...
    def _parse_too_deep(self, style: StyleContext) -> MathNode: ...
    def _script_fits(self, base: MathNode) -> bool: ...
