"""
Unit tests for schem_core/tokenizer.py.

Both strategies are run through the same cases; they must agree span for span.
"""

from pathlib import Path

import pytest

from schem_core.config import SchematicConfig
from schem_core.errors import GrammarError
from schem_core.tokenizer import (
    RegexTokenizer,
    ScanTokenizer,
    get_tokenizer,
)
from schem_core.types import SpanKind, TokenSpan

SAMPLE = (Path(__file__).parent.parent / "fixtures" / "sample" / "schematic.txt").read_text()

STRATEGIES = [RegexTokenizer, ScanTokenizer]


def _spans(tokenizer_cls, text, config=None):
    return list(tokenizer_cls(config).tokenize(text))


@pytest.mark.parametrize("tokenizer_cls", STRATEGIES)
class TestTokenizerGrammar:
    """Grammar rules, per strategy."""

    def test_empty_text(self, tokenizer_cls):
        assert _spans(tokenizer_cls, "") == []

    def test_filler_only(self, tokenizer_cls):
        assert _spans(tokenizer_cls, "....\n....\n") == []

    def test_number_is_maximal_run(self, tokenizer_cls):
        spans = _spans(tokenizer_cls, "..123.4")
        assert spans == [
            TokenSpan(SpanKind.NUMBER, "123", 1, 3),
            TokenSpan(SpanKind.NUMBER, "4", 1, 7),
        ]

    def test_symbols_are_single_characters(self, tokenizer_cls):
        spans = _spans(tokenizer_cls, "*#\n.$")
        assert spans == [
            TokenSpan(SpanKind.SYMBOL, "*", 1, 1),
            TokenSpan(SpanKind.SYMBOL, "#", 1, 2),
            TokenSpan(SpanKind.SYMBOL, "$", 2, 2),
        ]

    def test_symbol_touching_number(self, tokenizer_cls):
        """'617*' splits into a number and a symbol."""
        spans = _spans(tokenizer_cls, "617*")
        assert spans == [
            TokenSpan(SpanKind.NUMBER, "617", 1, 1),
            TokenSpan(SpanKind.SYMBOL, "*", 1, 4),
        ]

    def test_blank_is_separator(self, tokenizer_cls):
        spans = _spans(tokenizer_cls, "12 34")
        assert [s.text for s in spans] == ["12", "34"]

    def test_crlf_line_endings(self, tokenizer_cls):
        assert _spans(tokenizer_cls, "1.\r\n.*\r\n") == _spans(tokenizer_cls, "1.\n.*\n")

    def test_ragged_rows(self, tokenizer_cls):
        """Rows of different width keep their actual positions."""
        spans = _spans(tokenizer_cls, "1\n.....*\n..")
        assert spans == [
            TokenSpan(SpanKind.NUMBER, "1", 1, 1),
            TokenSpan(SpanKind.SYMBOL, "*", 2, 6),
        ]

    def test_letters_are_symbols(self, tokenizer_cls):
        spans = _spans(tokenizer_cls, "a1")
        assert spans[0] == TokenSpan(SpanKind.SYMBOL, "a", 1, 1)

    def test_custom_filler(self, tokenizer_cls):
        """With filler '_', '.' becomes a symbol."""
        config = SchematicConfig(filler="_")
        spans = _spans(tokenizer_cls, "_._5", config)
        assert spans == [
            TokenSpan(SpanKind.SYMBOL, ".", 1, 2),
            TokenSpan(SpanKind.NUMBER, "5", 1, 4),
        ]

    @pytest.mark.parametrize("bad", ["\t", "\x00", "\r"])
    def test_non_printable_raises(self, tokenizer_cls, bad):
        text = f"..\n.{bad}1"
        with pytest.raises(GrammarError) as exc_info:
            _spans(tokenizer_cls, text)
        assert exc_info.value.line == 2
        assert exc_info.value.column == 2


class TestStrategiesAgree:
    """Regex and scanner produce identical streams."""

    def test_sample(self):
        assert _spans(RegexTokenizer, SAMPLE) == _spans(ScanTokenizer, SAMPLE)

    def test_sample_counts(self):
        spans = _spans(RegexTokenizer, SAMPLE)
        numbers = [s for s in spans if s.kind is SpanKind.NUMBER]
        symbols = [s for s in spans if s.kind is SpanKind.SYMBOL]
        assert len(numbers) == 10, f"Expected 10 numbers, got {len(numbers)}"
        assert len(symbols) == 6, f"Expected 6 symbols, got {len(symbols)}"

    def test_mixed_text(self):
        text = "1a2b..33\n%%.9\n  *12*"
        assert _spans(RegexTokenizer, text) == _spans(ScanTokenizer, text)


class TestGetTokenizer:

    def test_by_name(self):
        assert isinstance(get_tokenizer("regex"), RegexTokenizer)
        assert isinstance(get_tokenizer("scan"), ScanTokenizer)

    def test_config_is_passed(self):
        config = SchematicConfig(filler="_")
        assert get_tokenizer("scan", config).config is config

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown tokenizer"):
            get_tokenizer("pest")
