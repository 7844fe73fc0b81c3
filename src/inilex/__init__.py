"""
inilex — Streaming tokenizer for INI-style configuration text

Turns a character stream into section, setting and comment tokens, one
token per call, without building a parse tree. Decoding tokens into dicts
or objects is left to the caller.

Quick Start:
    >>> from inilex import tokenize
    >>> for token in tokenize("[server]\\nhost = example.org ; primary\\n"):
    ...     print(type(token).__name__, str(token))
    SectionToken [server]
    SettingToken host = example.org
    CommentToken ; primary

    >>> # Pull tokens one at a time
    >>> from inilex import Tokenizer
    >>> tokenizer = Tokenizer(open("app.ini", encoding="utf-8"))
    >>> token = tokenizer.next_token()  # None at end of stream

Custom Syntax:
    >>> from inilex import Tokenizer, TokenizerConfig
    >>> config = TokenizerConfig(comment_markers="#", separator=":")
    >>> list(Tokenizer("key: value", config))
    [SettingToken(..., left='key', right=' value', separator=':')]

Installation:
    pip install inilex               # Zero runtime dependencies
"""

from inilex.config import (
    DEFAULT_ESCAPES,
    TokenizerConfig,
    get_tokenizer_config,
    reset_tokenizer_config,
    set_tokenizer_config,
    tokenizer_config_context,
)
from inilex.errors import (
    ConfigError,
    InilexError,
    NewlineInKeyError,
    TokenizeError,
    UnexpectedCharacterError,
    UnknownEscapeError,
)
from inilex.lexer import LexerState, Tokenizer
from inilex.location import PositionTracker, SourceLocation
from inilex.source import CharSource, Source
from inilex.tokens import CommentToken, SectionToken, SettingToken, Token, TokenType

__version__ = "0.1.0"


def tokenize(
    source: Source,
    config: TokenizerConfig | None = None,
    *,
    source_file: str | None = None,
) -> list[Token]:
    """Tokenize INI source into a list of tokens.

    Args:
        source: INI text, a readable text stream, or an iterable of strings
        config: Tokenizer configuration (uses the context default if None)
        source_file: Optional source file path for error messages

    Returns:
        All tokens in source order.

    Raises:
        TokenizeError: The input is malformed.

    Example:
        >>> tokenize("a=1\\nb=2")
        [SettingToken(..., left='a', right='1', ...), SettingToken(..., left='b', right='2', ...)]

    """
    return list(Tokenizer(source, config, source_file=source_file))


__all__ = [
    # Main API
    "tokenize",
    "Tokenizer",
    "LexerState",
    # Tokens
    "Token",
    "TokenType",
    "SectionToken",
    "SettingToken",
    "CommentToken",
    # Configuration
    "DEFAULT_ESCAPES",
    "TokenizerConfig",
    "get_tokenizer_config",
    "set_tokenizer_config",
    "reset_tokenizer_config",
    "tokenizer_config_context",
    # Errors
    "InilexError",
    "ConfigError",
    "TokenizeError",
    "UnexpectedCharacterError",
    "NewlineInKeyError",
    "UnknownEscapeError",
    # Sources and locations
    "CharSource",
    "Source",
    "SourceLocation",
    "PositionTracker",
    # Version
    "__version__",
]
