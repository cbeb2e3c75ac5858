"""Literal capture: brace groups read as strings instead of parsed.

Two readers with different contracts:

- ``_read_literal_string``: flat read of a short name (environment names,
  color names). Stops at the first ``}``; nested groups are not tracked.
- ``_capture_raw_group``: brace-balanced reconstruction of a whole group,
  used by structure macros whose payload is not math.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tiza.tokens import TokenType

if TYPE_CHECKING:
    from tiza.tokens import Token


class LiteralCaptureMixin:
    """Mixin reading brace groups as literal text.

    Required Host Attributes:
        - _current: Token | None

    Required Host Methods:
        - _advance() -> Token | None
        - _current_is(token_type) -> bool

    """

    _current: Token | None

    def _read_literal_string(self) -> str:
        """Read ``{name}`` as a string; empty if no group follows.

        Concatenates token contents up to the first ``}``, which is consumed.
        If the input ends first, returns what was read.

        Example: ``{pmatrix}`` -> ``"pmatrix"``, ``{#FF8000}`` -> ``"#FF8000"``
        """
        if not self._current_is(TokenType.LEFT_BRACE):
            return ""
        self._advance()
        parts: list[str] = []
        while (token := self._current) is not None:
            self._advance()
            if token.type is TokenType.RIGHT_BRACE:
                break
            parts.append(token.content)
        return "".join(parts)

    def _capture_raw_group(self) -> str | None:
        """Reconstruct the source text of the following brace group.

        Inner braces are kept and balanced; commands regain their escape
        marker. The outer braces are not part of the result.

        Returns:
            The captured text, or None if no group follows or the group
            is never closed.

        Example: ``{**6(-\\bond{x})}`` -> ``"**6(-\\bond{x})"``
        """
        if not self._current_is(TokenType.LEFT_BRACE):
            return None
        self._advance()
        parts: list[str] = []
        depth = 1
        while (token := self._current) is not None:
            self._advance()
            if token.type is TokenType.LEFT_BRACE:
                depth += 1
            elif token.type is TokenType.RIGHT_BRACE:
                depth -= 1
                if depth == 0:
                    return "".join(parts)
            parts.append(token.source_text)
        return None
