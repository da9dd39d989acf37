"""
Schematic tokenizers.

A tokenizer turns raw text into an ordered stream of classified spans with
their 1-indexed line and column. The rest of the engine only depends on the
Tokenizer protocol, so any scanning strategy can be plugged in.

Grammar:
- A maximal run of ASCII digits is one NUMBER span
- The filler character and blanks separate tokens
- A trailing carriage return on a line is ignored
- Any other printable character is a one-character SYMBOL span
- A non-printable character (tab, NUL, a stray carriage return) is a
  GrammarError

Strategies:
- RegexTokenizer: re-based scanner
- ScanTokenizer: hand-written character scanner
Both produce identical span sequences.
"""

import re
from typing import Iterator, Optional, Protocol

from .config import DEFAULT_CONFIG, SchematicConfig
from .errors import GrammarError
from .types import SpanKind, TokenSpan

DIGITS = "0123456789"
BLANK = " "


class Tokenizer(Protocol):
    """Given text, produce an ordered sequence of classified spans."""

    def tokenize(self, text: str) -> Iterator[TokenSpan]:
        ...


def _split_rows(text: str) -> Iterator[tuple[int, str]]:
    """Yield (line_number, row) with a trailing '\\r' removed."""
    for line_no, row in enumerate(text.split("\n"), start=1):
        if row.endswith("\r"):
            row = row[:-1]
        yield line_no, row


def _check_printable(ch: str, line: int, column: int) -> None:
    if not ch.isprintable():
        raise GrammarError(f"unexpected character {ch!r}", line, column)


class RegexTokenizer:
    """Tokenizer built on a single alternation regex per row."""

    def __init__(self, config: Optional[SchematicConfig] = None):
        self.config = config or DEFAULT_CONFIG
        separators = re.escape(self.config.filler + BLANK)
        self._pattern = re.compile(
            rf"(?P<number>[0-9]+)|(?P<skip>[{separators}]+)|(?P<symbol>.)",
            re.DOTALL,
        )

    def tokenize(self, text: str) -> Iterator[TokenSpan]:
        for line_no, row in _split_rows(text):
            for match in self._pattern.finditer(row):
                kind = match.lastgroup
                if kind == "skip":
                    continue
                column = match.start() + 1
                if kind == "number":
                    yield TokenSpan(SpanKind.NUMBER, match.group(), line_no, column)
                else:
                    ch = match.group()
                    _check_printable(ch, line_no, column)
                    yield TokenSpan(SpanKind.SYMBOL, ch, line_no, column)


class ScanTokenizer:
    """Tokenizer that walks each row one character at a time."""

    def __init__(self, config: Optional[SchematicConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def tokenize(self, text: str) -> Iterator[TokenSpan]:
        separators = {self.config.filler, BLANK}
        for line_no, row in _split_rows(text):
            i = 0
            width = len(row)
            while i < width:
                ch = row[i]
                if ch in DIGITS:
                    start = i
                    while i < width and row[i] in DIGITS:
                        i += 1
                    yield TokenSpan(SpanKind.NUMBER, row[start:i], line_no, start + 1)
                    continue
                if ch not in separators:
                    _check_printable(ch, line_no, i + 1)
                    yield TokenSpan(SpanKind.SYMBOL, ch, line_no, i + 1)
                i += 1


TOKENIZERS = {
    "regex": RegexTokenizer,
    "scan": ScanTokenizer,
}


def get_tokenizer(name: str, config: Optional[SchematicConfig] = None) -> Tokenizer:
    """Instantiate a tokenizer strategy by name ('regex' or 'scan')."""
    try:
        cls = TOKENIZERS[name]
    except KeyError:
        raise ValueError(f"Unknown tokenizer '{name}'. Must be one of {sorted(TOKENIZERS)}") from None
    return cls(config)
