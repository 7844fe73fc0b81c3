"""Tests for utility modules and package logging."""

from __future__ import annotations

import io
import logging

import pytest

from inilex import Tokenizer
from inilex.errors import NewlineInKeyError
from inilex.lexer.buffer import CharBuffer
from inilex.source import CharSource, iter_chars


class TestLogger:
    """Tests for logger module."""

    def test_get_logger(self) -> None:
        from inilex.utils.logger import get_logger

        logger = get_logger("mymodule")
        assert logger.name == "inilex.mymodule"

    def test_logger_with_inilex_prefix(self) -> None:
        from inilex.utils.logger import get_logger

        logger = get_logger("inilex.lexer")
        assert logger.name == "inilex.lexer"

    def test_logger_name_starting_with_inilex_not_submodule(self) -> None:
        """Names starting with 'inilex' but not submodules should get prefix."""
        from inilex.utils.logger import get_logger

        logger = get_logger("inilex_other")
        assert logger.name == "inilex.inilex_other"

    def test_logger_exact_inilex_name(self) -> None:
        from inilex.utils.logger import get_logger

        assert get_logger("inilex").name == "inilex"


class TestTokenizerLogging:
    """The tokenizer reports terminal transitions at DEBUG."""

    def test_end_of_stream_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="inilex")
        list(Tokenizer("k=v\n"))

        assert "End of stream at 2:1" in caplog.text

    def test_failure_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="inilex")
        with pytest.raises(NewlineInKeyError):
            Tokenizer("abc\n").next_token()

        assert "Tokenizer failed at 1:4" in caplog.text

    def test_quiet_by_default(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="inilex")
        list(Tokenizer("k=v\n"))

        assert caplog.records == []


class TestCharBuffer:
    def test_take_clears(self) -> None:
        buf = CharBuffer()
        buf.append("ab")
        buf.append("c")

        assert buf.build() == "abc"
        assert buf.take() == "abc"
        assert not buf
        assert buf.take() == ""

    def test_empty_appends_skipped(self) -> None:
        buf = CharBuffer()
        buf.append("")
        assert not buf

    def test_clear(self) -> None:
        buf = CharBuffer()
        buf.append("x")
        buf.clear()
        assert buf.build() == ""


class TestIterChars:
    def test_string(self) -> None:
        assert list(iter_chars("ab")) == ["a", "b"]

    def test_stream(self) -> None:
        assert list(iter_chars(io.StringIO("ab"))) == ["a", "b"]

    def test_chunks(self) -> None:
        assert list(iter_chars(["ab", "", "c"])) == ["a", "b", "c"]

    def test_stream_is_char_source(self) -> None:
        assert isinstance(io.StringIO(), CharSource)
        assert not isinstance("text", CharSource)

    def test_lazy(self) -> None:
        """Nothing is read until a character is requested."""
        stream = io.StringIO("abc")
        chars = iter_chars(stream)

        assert stream.tell() == 0
        assert next(chars) == "a"
        assert stream.tell() == 1
