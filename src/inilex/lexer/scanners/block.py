"""Between-token scanner mixin (START and WHITESPACE states)."""

from __future__ import annotations

from inilex.config import TokenizerConfig
from inilex.lexer.buffer import CharBuffer
from inilex.lexer.modes import LexerState
from inilex.location import SourceLocation


class BlockScannerMixin:
    """Mixin classifying the first character of each token.

    Blank lines and leading indentation are consumed here without
    producing tokens.

    """

    # These will be set by the Tokenizer class
    _config: TokenizerConfig
    _buffer: CharBuffer
    _char_loc: SourceLocation
    _token_start: SourceLocation

    def _unread(self) -> None:
        """Push the current character back. Implemented by Tokenizer."""
        raise NotImplementedError

    def _scan_start(self, char: str) -> LexerState:
        """Pick the state for the token that begins with char."""
        config = self._config
        self._buffer.clear()
        self._token_start = self._char_loc

        if char == "\n":
            return LexerState.START
        if char.isspace():
            return LexerState.WHITESPACE
        if char == config.section_start:
            return LexerState.SECTION

        self._unread()
        if config.is_comment(char):
            return LexerState.COMMENT
        return LexerState.LEFT

    def _scan_whitespace(self, char: str) -> LexerState:
        """Skip a run of whitespace, including newlines."""
        if self._config.is_comment(char):
            self._token_start = self._char_loc
            self._unread()
            return LexerState.COMMENT
        if char.isspace():
            return LexerState.WHITESPACE

        self._unread()
        return LexerState.START
