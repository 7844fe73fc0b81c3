"""State-specific scanners for the inilex tokenizer.

Each scanner is a mixin that handles one or more tokenizer states
(START/WHITESPACE, SECTION, COMMENT, LEFT/RIGHT, ESCAPE). A handler takes
the current character and returns the next state, or None once the token
under construction is complete.
"""

from __future__ import annotations

from inilex.lexer.scanners.block import BlockScannerMixin
from inilex.lexer.scanners.comment import CommentScannerMixin
from inilex.lexer.scanners.escape import EscapeScannerMixin
from inilex.lexer.scanners.section import SectionScannerMixin
from inilex.lexer.scanners.setting import SettingScannerMixin

__all__ = [
    "BlockScannerMixin",
    "CommentScannerMixin",
    "EscapeScannerMixin",
    "SectionScannerMixin",
    "SettingScannerMixin",
]
