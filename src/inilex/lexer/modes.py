"""Lexer states.

This module defines the finite state machine states for the tokenizer.
"""

from __future__ import annotations

from enum import Enum, auto


class LexerState(Enum):
    """Tokenizer states.

    Every next_token() call starts in START and runs until a token is
    complete. DONE and FAILED are terminal: once entered, the tokenizer
    never leaves them.

    - START: Between tokens, classifying the first character
    - WHITESPACE: Skipping indentation and blank space
    - SECTION: Inside [section] header
    - COMMENT: Inside comment line
    - LEFT: Accumulating a setting's key
    - RIGHT: Accumulating a setting's value
    - ESCAPE: After the escape marker (only when escapes are enabled)
    - DONE: Source exhausted
    - FAILED: A sticky error was raised

    """

    START = auto()
    WHITESPACE = auto()
    SECTION = auto()
    COMMENT = auto()
    LEFT = auto()
    RIGHT = auto()
    ESCAPE = auto()
    DONE = auto()
    FAILED = auto()

    @property
    def is_terminal(self) -> bool:
        return self in _TERMINAL_STATES


_TERMINAL_STATES = frozenset({LexerState.DONE, LexerState.FAILED})
