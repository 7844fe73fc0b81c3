"""Accumulation buffer for the token under construction.

Appends to a list, joins once when the token completes: O(n) total vs
O(n²) for repeated string concatenation.

"""

from __future__ import annotations


class CharBuffer:
    """Collects characters for the token being built.

    Usage:
            >>> buf = CharBuffer()
            >>> buf.append("k")
            >>> buf.append("ey")
            >>> buf.take()
            'key'
            >>> bool(buf)
            False

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> None:
        """Append text (empty strings are skipped)."""
        if s:
            self._parts.append(s)

    def build(self) -> str:
        """Join all parts without clearing."""
        return "".join(self._parts)

    def take(self) -> str:
        """Join all parts and clear the buffer."""
        value = "".join(self._parts)
        self._parts.clear()
        return value

    def clear(self) -> None:
        self._parts.clear()

    def __bool__(self) -> bool:
        """Return True if anything has been appended."""
        return bool(self._parts)
