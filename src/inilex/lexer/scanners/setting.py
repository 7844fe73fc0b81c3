"""Setting scanner mixin (LEFT and RIGHT states)."""

from __future__ import annotations

from inilex.config import TokenizerConfig
from inilex.errors import NewlineInKeyError, UnexpectedCharacterError
from inilex.lexer.buffer import CharBuffer
from inilex.lexer.modes import LexerState
from inilex.location import SourceLocation
from inilex.tokens import SettingToken, Token


class SettingScannerMixin:
    """Mixin accumulating ``key=value`` settings.

    Keys must fit on one line and cannot contain a comment marker. Values
    end at the newline or at a comment marker; in the latter case the marker
    is pushed back so the comment becomes the next token.

    """

    # These will be set by the Tokenizer class
    _config: TokenizerConfig
    _buffer: CharBuffer
    _key: str
    _char_loc: SourceLocation
    _token_start: SourceLocation
    _token: Token | None

    def _unread(self) -> None:
        """Push the current character back. Implemented by Tokenizer."""
        raise NotImplementedError

    def _enter_escape(self, resume: LexerState) -> LexerState:
        """Switch to ESCAPE. Implemented by EscapeScannerMixin."""
        raise NotImplementedError

    def _scan_left(self, char: str) -> LexerState:
        config = self._config

        if char == "\n":
            raise NewlineInKeyError.at(self._char_loc)
        if char == config.separator:
            self._key = self._buffer.take()
            return LexerState.RIGHT
        if config.is_escape(char):
            return self._enter_escape(LexerState.LEFT)
        if config.is_comment(char):
            raise UnexpectedCharacterError.at(self._char_loc, char)

        self._buffer.append(char)
        return LexerState.LEFT

    def _scan_right(self, char: str) -> LexerState | None:
        config = self._config

        if char == "\n":
            return self._finish_setting()
        if config.is_escape(char):
            return self._enter_escape(LexerState.RIGHT)
        if config.is_comment(char):
            self._unread()
            return self._finish_setting()

        self._buffer.append(char)
        return LexerState.RIGHT

    def _finish_setting(self) -> None:
        self._token = SettingToken(
            self._key,
            self._buffer.take(),
            separator=self._config.separator,
            location=self._token_start,
        )
