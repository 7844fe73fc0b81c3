"""Exception classes for inilex.

Provides standardized exceptions for error handling throughout inilex.
Errors raised by the underlying character source are not wrapped; they
propagate to the caller unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from inilex.location import SourceLocation


class InilexError(Exception):
    """Base exception for all inilex errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(InilexError):
    """Invalid tokenizer configuration.

    Raised when a TokenizerConfig is built with delimiters that are not
    single characters, are whitespace, or collide with each other.
    """

    pass


class TokenizeError(InilexError):
    """Error while tokenizing INI text.

    Raised by Tokenizer.next_token() when the input is malformed. Once
    raised, the tokenizer is poisoned and raises the same error again on
    every later call.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize tokenize error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")

    @classmethod
    def at(cls, location: SourceLocation, *args: str) -> TokenizeError:
        """Build the error positioned at a source location."""
        return cls(
            *args,
            lineno=location.lineno,
            col_offset=location.col_offset,
            source_file=location.source_file,
        )


class UnexpectedCharacterError(TokenizeError):
    """A structural character appeared where it is not permitted.

    Examples: a second section-start inside a section header, or a comment
    marker inside a key.
    """

    def __init__(
        self,
        char: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.char = char
        super().__init__(
            f"unexpected character {char!r}", lineno, col_offset, source_file
        )


class NewlineInKeyError(TokenizeError):
    """A line break occurred before the key/value separator."""

    def __init__(
        self,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        super().__init__("newline in key", lineno, col_offset, source_file)


class UnknownEscapeError(TokenizeError):
    """An escape sequence with no mapping, while unknown escapes are disallowed."""

    def __init__(
        self,
        char: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.char = char
        super().__init__(
            f"unknown escape sequence {char!r}", lineno, col_offset, source_file
        )
