"""Token and TokenType definitions for the inilex tokenizer.

The tokenizer produces a stream of Token objects for an external consumer
(for example a decoder that builds a dict of sections). Every token can
render itself back to the INI text that produced it.

Token Hierarchy:
Token (base)
├── SectionToken   [name]
├── SettingToken   left=right
└── CommentToken   # text

Thread Safety:
Tokens are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar

from inilex.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the tokenizer."""

    SECTION = auto()  # [name]
    SETTING = auto()  # key=value
    COMMENT = auto()  # # text


@dataclass(frozen=True, slots=True)
class Token:
    """Base class for all tokens.

    location records where the token started in the source. It is
    keyword-only and excluded from comparison and hashing, so a token
    re-tokenized from its rendered text compares equal to the original.

    """

    type: ClassVar[TokenType]

    location: SourceLocation = field(
        default_factory=SourceLocation.unknown,
        kw_only=True,
        compare=False,
        hash=False,
    )

    def render(self) -> str:
        """Reconstruct the literal INI text for this token."""
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self.location.lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self.location.col_offset


@dataclass(frozen=True, slots=True)
class SectionToken(Token):
    """A section header, e.g. ``[database]``.

    start and end are the delimiters that were active when the token was
    produced.

    """

    type: ClassVar[TokenType] = TokenType.SECTION

    name: str
    start: str = "["
    end: str = "]"

    def render(self) -> str:
        return f"{self.start}{self.name}{self.end}"


@dataclass(frozen=True, slots=True)
class SettingToken(Token):
    """A key/value setting, e.g. ``host=localhost``.

    Whitespace around the separator is preserved in left and right.

    """

    type: ClassVar[TokenType] = TokenType.SETTING

    left: str
    right: str
    separator: str = "="

    def render(self) -> str:
        return f"{self.left}{self.separator}{self.right}"


@dataclass(frozen=True, slots=True)
class CommentToken(Token):
    """A comment line.

    text is everything after the marker up to the end of the line,
    including leading whitespace.

    """

    type: ClassVar[TokenType] = TokenType.COMMENT

    text: str
    marker: str = "#"

    def render(self) -> str:
        return f"{self.marker}{self.text}"
