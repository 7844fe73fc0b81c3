"""Modular state-machine tokenizer for INI text.

This package provides a character-at-a-time tokenizer. Each state has a
handler that takes one character and returns the next state, or None once
a token is complete.

Architecture:
lexer/
├── __init__.py          # Re-exports Tokenizer, LexerState
├── core.py              # Tokenizer class (mixin composition + navigation)
├── modes.py             # LexerState enum
├── buffer.py            # CharBuffer accumulation buffer
└── scanners/            # State-specific handlers
    ├── block.py         # START, WHITESPACE
    ├── section.py       # SECTION
    ├── comment.py       # COMMENT
    ├── setting.py       # LEFT, RIGHT
    └── escape.py        # ESCAPE

Usage:
    >>> from inilex.lexer import Tokenizer
    >>> tokenizer = Tokenizer("[server]\\nport=8080\\n")
    >>> [str(token) for token in tokenizer]
    ['[server]', 'port=8080']

"""

from inilex.lexer.core import Tokenizer
from inilex.lexer.modes import LexerState

__all__ = ["LexerState", "Tokenizer"]
