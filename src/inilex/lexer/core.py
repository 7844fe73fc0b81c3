"""State-machine tokenizer for INI text.

Pulls one character at a time from the source and feeds it to the handler
for the current LexerState until a token is complete. Pushback is a
one-slot lookahead owned by the tokenizer, so the source only ever needs
to produce characters in order.

End of input is signalled by feeding a synthetic newline to the active
state, which lets a trailing setting or comment without a final line break
complete normally.

Thread Safety:
Tokenizer instances are single-use. Create one per source.
All state is instance-local; instances must not be shared between threads.

"""

from __future__ import annotations

from collections.abc import Iterator

from inilex.config import TokenizerConfig, get_tokenizer_config
from inilex.lexer.buffer import CharBuffer
from inilex.lexer.modes import LexerState
from inilex.lexer.scanners import (
    BlockScannerMixin,
    CommentScannerMixin,
    EscapeScannerMixin,
    SectionScannerMixin,
    SettingScannerMixin,
)
from inilex.location import PositionTracker, SourceLocation
from inilex.source import Source, iter_chars
from inilex.tokens import Token
from inilex.utils.logger import get_logger

logger = get_logger(__name__)


class Tokenizer(
    # Shared helpers first so their implementations win over the stubs
    EscapeScannerMixin,
    # State handlers
    BlockScannerMixin,
    SectionScannerMixin,
    CommentScannerMixin,
    SettingScannerMixin,
):
    """Streaming tokenizer for INI-style configuration text.

    Produces one token per next_token() call: SectionToken, SettingToken or
    CommentToken. Returns None once the source is exhausted. Errors are
    sticky: after a failure every call raises the same exception again.

    Usage:
            >>> tokenizer = Tokenizer("[Test 1]\\nThis=is\\n# Comment\\na=test.")
            >>> for token in tokenizer:
            ...     print(repr(token))
        SectionToken(location=..., name='Test 1', start='[', end=']')
        SettingToken(location=..., left='This', right='is', separator='=')
        CommentToken(location=..., text=' Comment', marker='#')
        SettingToken(location=..., left='a', right='test.', separator='=')

    Thread Safety:
        Tokenizer instances are single-use. Create one per source.
        Every call mutates instance state; do not share across threads.

    """

    __slots__ = (
        "_chars",
        "_config",
        "_source_file",
        "_tracker",
        "_state",
        "_resume_state",
        "_failure",
        # Current character and its one-slot pushback
        "_char",
        "_char_loc",
        "_lookahead",
        "_exhausted",
        # Token under construction
        "_buffer",
        "_key",
        "_marker",
        "_token",
        "_token_start",
    )

    def __init__(
        self,
        source: Source,
        config: TokenizerConfig | None = None,
        *,
        source_file: str | None = None,
    ) -> None:
        """Initialize tokenizer over a character source.

        Args:
            source: INI text, a readable text stream, or an iterable of
                string chunks
            config: Tokenizer configuration (uses the context default if None)
            source_file: Optional source file path for error messages
        """
        self._chars: Iterator[str] = iter_chars(source)
        self._config = config if config is not None else get_tokenizer_config()
        self._source_file = source_file
        self._tracker = PositionTracker(source_file)

        self._state = LexerState.START
        self._resume_state = LexerState.START
        self._failure: Exception | None = None

        self._char = ""
        self._char_loc = self._tracker.current()
        self._lookahead: tuple[str, SourceLocation] | None = None
        self._exhausted = False

        self._buffer = CharBuffer()
        self._key = ""
        self._marker: str | None = None
        self._token: Token | None = None
        self._token_start = self._char_loc

    # =========================================================================
    # Public API
    # =========================================================================

    @property
    def config(self) -> TokenizerConfig:
        """Active configuration; may be replaced between next_token() calls."""
        return self._config

    @config.setter
    def config(self, config: TokenizerConfig) -> None:
        if not isinstance(config, TokenizerConfig):
            raise TypeError(
                f"config must be a TokenizerConfig, not {type(config).__name__}"
            )
        self._config = config

    @property
    def state(self) -> LexerState:
        return self._state

    @property
    def location(self) -> SourceLocation:
        """Location of the next unread character."""
        return self._tracker.current()

    @property
    def lineno(self) -> int:
        return self._tracker.lineno

    @property
    def col(self) -> int:
        return self._tracker.col

    def next_token(self) -> Token | None:
        """Advance to the next token.

        Returns:
            The next token, or None at end of stream. Once None has been
            returned, every later call returns None.

        Raises:
            TokenizeError: The input is malformed.
            Exception: Whatever the underlying source raised, unchanged.
            Either way the error is raised again on every later call.
        """
        if self._state is LexerState.FAILED:
            assert self._failure is not None
            raise self._failure
        if self._state is LexerState.DONE:
            return None

        self._token = None
        self._marker = None
        self._key = ""
        self._state = LexerState.START

        try:
            while (char := self._read()) is not None:
                next_state = self._dispatch_state(char)
                if next_state is None:
                    return self._complete()
                self._state = next_state
        except Exception as exc:
            self._fail(exc)
            raise

        self._state = LexerState.DONE
        logger.debug("End of stream at %s", self._tracker.current())
        return None

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the rest of the source.

        Yields:
            Token objects one at a time, until end of stream.
        """
        while (token := self.next_token()) is not None:
            yield token

    def __iter__(self) -> Iterator[Token]:
        """Allow iteration over tokens."""
        return self.tokenize()

    # =========================================================================
    # State machine
    # =========================================================================

    def _dispatch_state(self, char: str) -> LexerState | None:
        """Dispatch char to the handler for the current state.

        Returns:
            The next state, or None when the token is complete.
        """
        state = self._state
        if state is LexerState.START:
            return self._scan_start(char)
        elif state is LexerState.WHITESPACE:
            return self._scan_whitespace(char)
        elif state is LexerState.SECTION:
            return self._scan_section(char)
        elif state is LexerState.COMMENT:
            return self._scan_comment(char)
        elif state is LexerState.LEFT:
            return self._scan_left(char)
        elif state is LexerState.RIGHT:
            return self._scan_right(char)
        elif state is LexerState.ESCAPE:
            return self._scan_escape(char)
        raise RuntimeError(f"no handler for terminal state {state.name}")

    def _complete(self) -> Token:
        """Hand out the finished token and prepare for the next call."""
        token = self._token
        assert token is not None
        self._token = None
        if self._exhausted and self._lookahead is None:
            self._state = LexerState.DONE
            logger.debug("End of stream at %s", self._tracker.current())
        else:
            self._state = LexerState.START
        return token

    def _fail(self, exc: Exception) -> None:
        self._state = LexerState.FAILED
        self._failure = exc
        logger.debug("Tokenizer failed at %s: %s", self._char_loc, exc)

    # =========================================================================
    # Character navigation
    # =========================================================================

    def _read(self) -> str | None:
        """Consume the next character.

        Serves the lookahead slot first. When the source runs dry, a single
        synthetic newline is produced; after that, None.

        Returns:
            The character, or None when nothing is left.
        """
        if self._lookahead is not None:
            self._char, self._char_loc = self._lookahead
            self._lookahead = None
            return self._char
        if self._exhausted:
            return None

        char = next(self._chars, None)
        if char is None:
            self._exhausted = True
            self._char = "\n"
            self._char_loc = self._tracker.current()
        else:
            self._char = char
            self._char_loc = self._tracker.advance(char)
        return self._char

    def _unread(self) -> None:
        """Push the current character back so the next state sees it again."""
        self._lookahead = (self._char, self._char_loc)
