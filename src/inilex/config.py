"""Tokenizer configuration for inilex.

TokenizerConfig holds the characters the state machine treats as structural:
comment markers, section delimiters, the key/value separator and the
optional escape marker. A default configuration is kept in a ContextVar
(PEP 567) so applications can change it for a context without threading a
config object through every call.

Thread Safety:
    TokenizerConfig is frozen. ContextVars are per-thread/per-context by
    design, so setting the default in one thread never affects another.

Usage:
    # Explicit config
    tokenizer = Tokenizer(source, TokenizerConfig(comment_markers="#"))

    # Context default
    with tokenizer_config_context(TokenizerConfig(separator=":")):
        tokens = tokenize("key: value")

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from types import MappingProxyType

from inilex.errors import ConfigError

DEFAULT_ESCAPES: Mapping[str, str] = MappingProxyType(
    {
        "0": "\0",
        "a": "\a",
        "b": "\b",
        "t": "\t",
        "r": "\r",
        "n": "\n",
    }
)


@dataclass(frozen=True, slots=True)
class TokenizerConfig:
    """Immutable tokenizer configuration.

    A Tokenizer reads its config on every transition, so the owner may swap
    in a new config between next_token() calls. Tokens remember the
    delimiters that produced them, so earlier tokens are unaffected.

    Attributes:
        comment_markers: Characters that start a comment
        section_start: Character that opens a section header
        section_end: Character that closes a section header
        separator: Character between a setting's key and value
        escape_char: Escape marker, or None to disable escapes
        escapes: Escaped character -> replacement text
        allow_unknown_escapes: Pass unmapped escapes through literally
            instead of raising UnknownEscapeError
        strict_sections: Raise on a newline inside a section header
            instead of keeping it as part of the name

    """

    comment_markers: str = "#;"
    section_start: str = "["
    section_end: str = "]"
    separator: str = "="
    escape_char: str | None = None
    escapes: Mapping[str, str] = field(
        default_factory=lambda: DEFAULT_ESCAPES, hash=False
    )
    allow_unknown_escapes: bool = True
    strict_sections: bool = False

    def __post_init__(self) -> None:
        # Accept any iterable of characters, e.g. {"#", ";"}
        if not isinstance(self.comment_markers, str):
            object.__setattr__(
                self, "comment_markers", "".join(sorted(self.comment_markers))
            )
        if not self.comment_markers:
            raise ConfigError("comment_markers must not be empty")

        delimiters = {
            "section_start": self.section_start,
            "section_end": self.section_end,
            "separator": self.separator,
        }
        if self.escape_char is not None:
            delimiters["escape_char"] = self.escape_char
        for i, marker in enumerate(self.comment_markers):
            delimiters[f"comment_markers[{i}]"] = marker

        seen: dict[str, str] = {}
        for name, char in delimiters.items():
            if not isinstance(char, str) or len(char) != 1:
                raise ConfigError(f"{name} must be a single character, got {char!r}")
            if char.isspace():
                raise ConfigError(f"{name} must not be whitespace, got {char!r}")
            if char in seen:
                raise ConfigError(f"{name} and {seen[char]} are both {char!r}")
            seen[char] = name

        for key in self.escapes:
            if len(key) != 1:
                raise ConfigError(f"escape keys must be single characters, got {key!r}")

    def is_comment(self, char: str) -> bool:
        """Check whether char starts a comment."""
        return char in self.comment_markers

    def is_escape(self, char: str) -> bool:
        """Check whether char is the (enabled) escape marker."""
        return self.escape_char is not None and char == self.escape_char

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, object]) -> TokenizerConfig:
        """Create TokenizerConfig from a mapping.

        Only keys that are TokenizerConfig fields are used; unknown keys are
        silently ignored.

        Args:
            config_dict: Config values keyed by attribute name.

        Returns:
            New TokenizerConfig instance.

        Raises:
            ConfigError: The resulting configuration is invalid.

        Example:
            >>> config = TokenizerConfig.from_dict({
            ...     "comment_markers": "#",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.comment_markers
            '#'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "escapes" in filtered:
            filtered["escapes"] = MappingProxyType(dict(filtered["escapes"]))
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TokenizerConfig = TokenizerConfig()

_tokenizer_config: ContextVar[TokenizerConfig] = ContextVar(
    "tokenizer_config",
    default=_DEFAULT_CONFIG,
)


def get_tokenizer_config() -> TokenizerConfig:
    """Get the default tokenizer configuration for the current context."""
    return _tokenizer_config.get()


def set_tokenizer_config(config: TokenizerConfig) -> None:
    """Set the default tokenizer configuration for the current context.

    Only tokenizers created afterwards without an explicit config pick it up.
    """
    _tokenizer_config.set(config)


def reset_tokenizer_config() -> None:
    """Reset the current context to the built-in default configuration."""
    _tokenizer_config.set(_DEFAULT_CONFIG)


@contextmanager
def tokenizer_config_context(config: TokenizerConfig) -> Iterator[None]:
    """Context manager for temporary default config changes.

    Args:
        config: TokenizerConfig to use within the context.

    Yields:
        None

    Example:
        >>> with tokenizer_config_context(TokenizerConfig(separator=":")):
        ...     tokens = tokenize("key:value")
        >>> # Previous default restored here

    """
    token = _tokenizer_config.set(config)
    try:
        yield
    finally:
        _tokenizer_config.reset(token)


__all__ = [
    "DEFAULT_ESCAPES",
    "TokenizerConfig",
    "get_tokenizer_config",
    "set_tokenizer_config",
    "reset_tokenizer_config",
    "tokenizer_config_context",
]
