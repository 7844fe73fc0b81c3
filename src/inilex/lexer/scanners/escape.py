"""Escape sequence scanner mixin.

Only reachable when TokenizerConfig.escape_char is set. The character after
the marker is looked up in TokenizerConfig.escapes; unmapped characters are
passed through literally (so an escaped comment marker or delimiter loses
its special meaning) unless allow_unknown_escapes is off.

A newline is never escapable: the marker is dropped and the newline goes
back to the resuming state, so keys and values stay on one line.

"""

from __future__ import annotations

from inilex.config import TokenizerConfig
from inilex.errors import UnknownEscapeError
from inilex.lexer.buffer import CharBuffer
from inilex.lexer.modes import LexerState
from inilex.location import SourceLocation


class EscapeScannerMixin:
    """Mixin decoding one escape sequence inside SECTION, LEFT or RIGHT."""

    # These will be set by the Tokenizer class
    _config: TokenizerConfig
    _buffer: CharBuffer
    _char_loc: SourceLocation
    _resume_state: LexerState

    def _unread(self) -> None:
        """Push the current character back. Implemented by Tokenizer."""
        raise NotImplementedError

    def _enter_escape(self, resume: LexerState) -> LexerState:
        """Remember where to resume and switch to ESCAPE."""
        self._resume_state = resume
        return LexerState.ESCAPE

    def _scan_escape(self, char: str) -> LexerState:
        config = self._config

        if char == "\n":
            self._unread()
        elif char in config.escapes:
            self._buffer.append(config.escapes[char])
        elif config.allow_unknown_escapes:
            self._buffer.append(char)
        else:
            raise UnknownEscapeError.at(self._char_loc, char)

        return self._resume_state
