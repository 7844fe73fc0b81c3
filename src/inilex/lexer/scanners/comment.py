"""Comment scanner mixin."""

from __future__ import annotations

from inilex.lexer.buffer import CharBuffer
from inilex.lexer.modes import LexerState
from inilex.location import SourceLocation
from inilex.tokens import CommentToken, Token


class CommentScannerMixin:
    """Mixin accumulating a comment up to the end of the line.

    The marker is pushed back by the state that detected it, so the first
    character seen here is always the marker itself.

    """

    # These will be set by the Tokenizer class
    _buffer: CharBuffer
    _marker: str | None
    _token_start: SourceLocation
    _token: Token | None

    def _scan_comment(self, char: str) -> LexerState | None:
        if self._marker is None:
            self._marker = char
            return LexerState.COMMENT

        if char == "\n":
            self._token = CommentToken(
                self._buffer.take(),
                marker=self._marker,
                location=self._token_start,
            )
            return None

        self._buffer.append(char)
        return LexerState.COMMENT
