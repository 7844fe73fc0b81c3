"""Source location tracking for tokens and error messages.

Provides SourceLocation for recording where a token or error occurred, and
PositionTracker, which advances line/column counters as the tokenizer
consumes characters.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.
PositionTracker is owned by a single Tokenizer and is not shared.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    lineno and col_offset are 1-indexed; offset is the 0-indexed character
    offset from the start of the source.

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column offset (1-indexed)
        offset: Absolute character offset in source
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=3, col_offset=5)
            >>> str(loc)
            '3:5'

            >>> loc = SourceLocation(1, 1, 0, "app.ini")
            >>> str(loc)
            'app.ini:1:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "app.ini:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create a placeholder location for synthetically built tokens."""
        return cls(lineno=0, col_offset=0)


class PositionTracker:
    """Line/column counters for the next character to be consumed.

    Purely observational: the tokenizer never branches on position.

    Usage:
            >>> tracker = PositionTracker()
            >>> tracker.advance("a")
            SourceLocation(lineno=1, col_offset=1, offset=0, source_file=None)
            >>> tracker.advance("\\n")
            SourceLocation(lineno=1, col_offset=2, offset=1, source_file=None)
            >>> (tracker.lineno, tracker.col)
            (2, 1)

    """

    __slots__ = ("lineno", "col", "offset", "source_file")

    def __init__(self, source_file: str | None = None) -> None:
        self.lineno = 1
        self.col = 1
        self.offset = 0
        self.source_file = source_file

    def current(self) -> SourceLocation:
        """Location of the next character (one past the last consumed)."""
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col,
            offset=self.offset,
            source_file=self.source_file,
        )

    def advance(self, char: str) -> SourceLocation:
        """Consume one character.

        Args:
            char: The character being consumed.

        Returns:
            The location of the consumed character.
        """
        loc = self.current()
        self.offset += 1
        if char == "\n":
            self.lineno += 1
            self.col = 1
        else:
            self.col += 1
        return loc
