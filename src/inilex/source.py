"""Character sources for the tokenizer.

The tokenizer pulls one character at a time from an iterator. This module
adapts the accepted input shapes into that iterator:

- ``str``: iterated directly
- text streams (anything with ``read(size)``): read one character per call
- any other iterable of strings: chunks are flattened into characters

Buffering is left to the caller; wrap slow streams in ``io.BufferedReader``
/ ``io.TextIOWrapper`` as needed. Exceptions raised by the stream propagate
through unchanged.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class CharSource(Protocol):
    """Anything that can be read like a text stream."""

    def read(self, size: int = -1, /) -> str: ...


Source = str | CharSource | Iterable[str]


def iter_chars(source: Source) -> Iterator[str]:
    """Adapt a source into an iterator of single characters.

    Args:
        source: A string, a readable text stream, or an iterable of strings.

    Returns:
        Iterator yielding one character at a time.

    Raises:
        TypeError: source is none of the accepted shapes (bytes included).
    """
    if isinstance(source, str):
        return iter(source)
    if isinstance(source, (bytes, bytearray)):
        raise TypeError("tokenizer source must be text, not bytes")
    if isinstance(source, CharSource):
        return _read_stream(source)
    if isinstance(source, Iterable):
        return _flatten(source)
    raise TypeError(f"unsupported tokenizer source: {type(source).__name__}")


def _read_stream(stream: CharSource) -> Iterator[str]:
    while char := stream.read(1):
        yield char


def _flatten(chunks: Iterable[str]) -> Iterator[str]:
    for chunk in chunks:
        yield from chunk
