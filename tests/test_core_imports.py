"""Verify core module imports work correctly."""

from __future__ import annotations


def test_import_location() -> None:
    """Test SourceLocation import and instantiation."""
    from inilex.location import SourceLocation

    loc = SourceLocation(lineno=1, col_offset=1)
    assert loc.lineno == 1
    assert loc.col_offset == 1
    assert str(loc) == "1:1"


def test_import_tokens() -> None:
    """Test token classes and TokenType imports."""
    from inilex.location import SourceLocation
    from inilex.tokens import SettingToken, TokenType

    tok = SettingToken("key", "value", location=SourceLocation(2, 1, 9))
    assert tok.type == TokenType.SETTING
    assert tok.left == "key"
    assert tok.right == "value"
    assert tok.lineno == 2
    assert tok.col == 1


def test_import_lexer() -> None:
    """Test Tokenizer import and basic tokenization."""
    from inilex.lexer import Tokenizer
    from inilex.tokens import SectionToken

    tokens = list(Tokenizer("[Hello]"))
    assert tokens == [SectionToken("Hello")]


def test_import_scanners() -> None:
    """Test that every state handler is mixed into Tokenizer."""
    from inilex.lexer import Tokenizer
    from inilex.lexer.scanners import (
        BlockScannerMixin,
        CommentScannerMixin,
        EscapeScannerMixin,
        SectionScannerMixin,
        SettingScannerMixin,
    )

    for mixin in (
        BlockScannerMixin,
        CommentScannerMixin,
        EscapeScannerMixin,
        SectionScannerMixin,
        SettingScannerMixin,
    ):
        assert issubclass(Tokenizer, mixin)


def test_import_config() -> None:
    from inilex.config import TokenizerConfig, get_tokenizer_config

    assert isinstance(get_tokenizer_config(), TokenizerConfig)
