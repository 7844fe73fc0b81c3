"""Tests for individual state transitions.

Each class targets one state of the tokenizer and the characters that move
it on.
"""

from __future__ import annotations

import pytest

from inilex import tokenize
from inilex.config import TokenizerConfig
from inilex.errors import NewlineInKeyError, UnexpectedCharacterError
from inilex.lexer import Tokenizer
from inilex.tokens import CommentToken, SectionToken, SettingToken


class TestStartAndWhitespace:
    """Blank lines and indentation never produce tokens."""

    def test_blank_lines_skipped(self) -> None:
        assert tokenize("\n\n  \n\t\nkey=value\n\n") == [SettingToken("key", "value")]

    def test_indented_section_and_key(self) -> None:
        assert tokenize("   [s]\n\t k=v") == [SectionToken("s"), SettingToken("k", "v")]

    def test_indented_comment(self) -> None:
        assert tokenize("   ; note\n") == [CommentToken(" note", marker=";")]

    def test_non_ascii_whitespace_skipped(self) -> None:
        assert tokenize("\u00a0\u2003k=v") == [SettingToken("k", "v")]


class TestSection:
    """[name] headers."""

    def test_simple(self) -> None:
        assert tokenize("[main]\n") == [SectionToken("main")]

    def test_spaces_and_separator_inside(self) -> None:
        assert tokenize("[a = b]") == [SectionToken("a = b")]

    def test_empty_name(self) -> None:
        assert tokenize("[]") == [SectionToken("")]

    def test_text_after_header_starts_next_token(self) -> None:
        assert tokenize("[s]k=v") == [SectionToken("s"), SettingToken("k", "v")]

    def test_nested_section_start(self) -> None:
        with pytest.raises(UnexpectedCharacterError) as excinfo:
            Tokenizer("[a[b]").next_token()

        assert excinfo.value.char == "["
        assert (excinfo.value.lineno, excinfo.value.col_offset) == (1, 3)

    @pytest.mark.parametrize("marker", ["#", ";"])
    def test_comment_marker_inside(self, marker: str) -> None:
        with pytest.raises(UnexpectedCharacterError) as excinfo:
            Tokenizer(f"[a{marker}b]").next_token()

        assert excinfo.value.char == marker


class TestComment:
    """Comment lines."""

    def test_marker_and_text(self) -> None:
        [token] = tokenize("# hello world\n")
        assert token == CommentToken(" hello world", marker="#")
        assert str(token) == "# hello world"

    def test_markers_inside_text(self) -> None:
        assert tokenize("# a ; b # c") == [CommentToken(" a ; b # c")]

    def test_delimiters_inside_text(self) -> None:
        assert tokenize(";[x]=y") == [CommentToken("[x]=y", marker=";")]

    def test_marker_only_at_end_of_input(self) -> None:
        assert tokenize("#") == [CommentToken("")]

    def test_consecutive_comments(self) -> None:
        assert tokenize("#one\n;two\n") == [
            CommentToken("one"),
            CommentToken("two", marker=";"),
        ]


class TestLeft:
    """Key accumulation."""

    def test_key_with_spaces(self) -> None:
        assert tokenize("my key = v") == [SettingToken("my key ", " v")]

    def test_empty_key(self) -> None:
        assert tokenize("=v") == [SettingToken("", "v")]

    def test_section_end_in_key(self) -> None:
        assert tokenize("]k=v") == [SettingToken("]k", "v")]

    def test_newline_in_key(self) -> None:
        with pytest.raises(NewlineInKeyError) as excinfo:
            Tokenizer("abc\ndef=ghi").next_token()

        assert (excinfo.value.lineno, excinfo.value.col_offset) == (1, 4)

    def test_key_without_separator_at_end_of_input(self) -> None:
        with pytest.raises(NewlineInKeyError):
            Tokenizer("abc").next_token()

    def test_comment_marker_in_key(self) -> None:
        with pytest.raises(UnexpectedCharacterError) as excinfo:
            Tokenizer("ke;y=v").next_token()

        assert excinfo.value.char == ";"
        assert excinfo.value.col_offset == 3


class TestRight:
    """Value accumulation."""

    def test_value_keeps_whitespace(self) -> None:
        assert tokenize("k = v \n") == [SettingToken("k ", " v ")]

    def test_separator_in_value(self) -> None:
        assert tokenize("a=b=c") == [SettingToken("a", "b=c")]

    def test_brackets_in_value(self) -> None:
        assert tokenize("k=[v]") == [SettingToken("k", "[v]")]

    def test_empty_value(self) -> None:
        assert tokenize("k=\n") == [SettingToken("k", "")]
        assert tokenize("k=") == [SettingToken("k", "")]

    def test_carriage_return_kept(self) -> None:
        assert tokenize("k=v\r\n") == [SettingToken("k", "v\r")]

    def test_unicode(self) -> None:
        assert tokenize("ключ=значение") == [SettingToken("ключ", "значение")]

    def test_trailing_comment_splits(self) -> None:
        tokenizer = Tokenizer("key=value#comment\n")

        assert tokenizer.next_token() == SettingToken("key", "value")
        assert tokenizer.next_token() == CommentToken("comment")
        assert tokenizer.next_token() is None

    def test_trailing_comment_with_spaces(self) -> None:
        assert tokenize("key = value ; c") == [
            SettingToken("key ", " value "),
            CommentToken(" c", marker=";"),
        ]

    def test_next_line_after_trailing_comment(self) -> None:
        assert tokenize("a=1 # one\nb=2") == [
            SettingToken("a", "1 "),
            CommentToken(" one"),
            SettingToken("b", "2"),
        ]


class TestConfigKnobs:
    """Transitions consult the active config, not hard-coded characters."""

    def test_default_markers_become_plain_text(self) -> None:
        config = TokenizerConfig(comment_markers="!")
        assert tokenize("k=a#b;c", config) == [SettingToken("k", "a#b;c")]

    def test_default_delimiters_become_plain_text(self) -> None:
        config = TokenizerConfig(section_start="{", section_end="}", separator=":")
        assert tokenize("[x]=1:2\n{y}", config) == [
            SettingToken("[x]=1", "2", separator=":"),
            SectionToken("y", start="{", end="}"),
        ]
