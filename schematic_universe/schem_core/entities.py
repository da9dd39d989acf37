"""
Entity extraction: token spans → Symbols and Numbers.

Each span is converted independently. Numbers get a stable NumberId in the
order they are seen, which is what the index uses for identity. A single
malformed span fails the whole extraction.
"""

import logging
from typing import Iterable, Optional

from .config import DEFAULT_CONFIG, SchematicConfig
from .errors import CoordinateRangeError, GrammarError, NumberFormatError
from .tokenizer import BLANK, DIGITS
from .types import Entity, Number, NumberId, Point, SpanKind, Symbol, TokenSpan

logger = logging.getLogger(__name__)


def _start_point(span: TokenSpan, config: SchematicConfig) -> Point:
    """Cell of the span's first character, checked against the coordinate range."""
    for name, value in (("line", span.line), ("column", span.column)):
        if not 1 <= value <= config.max_coordinate:
            raise CoordinateRangeError(
                f"{name} {value} outside 1..{config.max_coordinate}", span.line, span.column
            )
    return Point(span.column, span.line)


def to_symbol(span: TokenSpan, config: SchematicConfig = DEFAULT_CONFIG) -> Symbol:
    """
    Build a Symbol from a SYMBOL span.

    Which characters are filler is decided by the tokenizer that produced the
    span, so the filler is not re-checked here.

    Raises:
        GrammarError: If the text is not one printable, non-digit, non-blank character
        CoordinateRangeError: If the position is not representable
    """
    ch = span.text
    if (
        len(ch) != 1
        or ch in DIGITS
        or ch == BLANK
        or not ch.isprintable()
    ):
        raise GrammarError(f"not a symbol character {ch!r}", span.line, span.column)
    return Symbol(char=ch, cell=_start_point(span, config))


def to_number(span: TokenSpan, number_id: int,
              config: SchematicConfig = DEFAULT_CONFIG) -> Number:
    """
    Build a Number from a NUMBER span.

    Cells run rightward from the span's start, one per digit, on the same row.

    Raises:
        NumberFormatError: Non-digit content, or value wider than config.number_bits
        CoordinateRangeError: If the last digit's column is not representable
    """
    text = span.text
    if not text or any(ch not in DIGITS for ch in text):
        raise NumberFormatError(text, span.line, span.column)

    value = int(text)
    if value > config.max_number:
        raise NumberFormatError(
            text, span.line, span.column,
            reason=f"overflows {config.number_bits}-bit integer:",
        )

    start = _start_point(span, config)
    last_col = start.col + len(text) - 1
    if last_col > config.max_coordinate:
        raise CoordinateRangeError(
            f"number of length {len(text)} extends to column {last_col}, "
            f"beyond {config.max_coordinate}",
            span.line, span.column,
        )

    cells = tuple(Point(start.col + offset, start.row) for offset in range(len(text)))
    return Number(number_id=NumberId(number_id), value=value, cells=cells)


def extract_entities(spans: Iterable[TokenSpan],
                     config: Optional[SchematicConfig] = None) -> list[Entity]:
    """
    Convert a span stream into entities, preserving order.

    NumberIds are assigned 0, 1, 2, ... in span order.
    """
    config = config or DEFAULT_CONFIG
    entities: list[Entity] = []
    next_id = 0

    for span in spans:
        if span.kind is SpanKind.SYMBOL:
            entities.append(to_symbol(span, config))
        elif span.kind is SpanKind.NUMBER:
            entities.append(to_number(span, next_id, config))
            next_id += 1
        else:
            raise GrammarError(f"unknown span kind {span.kind!r}", span.line, span.column)

    logger.debug("extracted %d entities (%d numbers)", len(entities), next_id)
    return entities
