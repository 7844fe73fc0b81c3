"""Section header scanner mixin."""

from __future__ import annotations

from inilex.config import TokenizerConfig
from inilex.errors import UnexpectedCharacterError
from inilex.lexer.buffer import CharBuffer
from inilex.lexer.modes import LexerState
from inilex.location import SourceLocation
from inilex.tokens import SectionToken, Token


class SectionScannerMixin:
    """Mixin accumulating a ``[name]`` header.

    The opening delimiter has already been consumed by START. A newline
    before the closing delimiter is kept as part of the name unless
    strict_sections is set; at end of input an unterminated header
    produces no token.

    """

    # These will be set by the Tokenizer class
    _config: TokenizerConfig
    _buffer: CharBuffer
    _char_loc: SourceLocation
    _token_start: SourceLocation
    _token: Token | None

    def _enter_escape(self, resume: LexerState) -> LexerState:
        """Switch to ESCAPE. Implemented by EscapeScannerMixin."""
        raise NotImplementedError

    def _scan_section(self, char: str) -> LexerState | None:
        config = self._config

        if char == config.section_end:
            self._token = SectionToken(
                self._buffer.take(),
                start=config.section_start,
                end=config.section_end,
                location=self._token_start,
            )
            return None
        if char == config.section_start or config.is_comment(char):
            raise UnexpectedCharacterError.at(self._char_loc, char)
        if config.is_escape(char):
            return self._enter_escape(LexerState.SECTION)
        if char == "\n" and config.strict_sections:
            raise UnexpectedCharacterError.at(self._char_loc, char)

        self._buffer.append(char)
        return LexerState.SECTION
