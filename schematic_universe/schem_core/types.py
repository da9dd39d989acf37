"""
Core type definitions for the schematic engine.

Coordinates are (col, row), both 1-indexed as reported by the tokenizer.
Neighbor cells may step outside the text (col 0, row 0, or negative); they
simply never match anything in the index.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType, Union

# Stable id assigned to each Number at extraction time
NumberId = NewType("NumberId", int)


# Cell coordinates (col, row)
@dataclass(frozen=True, order=True)
class Point:
    """Grid cell in (col, row) order."""
    col: int
    row: int

    def __iter__(self):
        """Allow tuple unpacking: c, r = point"""
        return iter((self.col, self.row))


class SpanKind(Enum):
    """Rule kind of a token span."""
    SYMBOL = "symbol"
    NUMBER = "number"


@dataclass(frozen=True)
class TokenSpan:
    """
    Classified span produced by a tokenizer.

    - kind: SYMBOL or NUMBER
    - text: Raw text of the span
    - line: 1-indexed line of the first character
    - column: 1-indexed column of the first character
    """
    kind: SpanKind
    text: str
    line: int
    column: int


@dataclass(frozen=True)
class Symbol:
    """Single-cell marker character."""
    char: str
    cell: Point


@dataclass(frozen=True)
class Number:
    """
    Integer occupying a contiguous horizontal run of cells.

    - number_id: Identity, unique within one schematic
    - value: Parsed integer value
    - cells: Occupied cells, one per digit, left to right on one row

    Equality and hashing include number_id, so two Numbers with the same value
    at different positions are always distinct.
    """
    number_id: NumberId
    value: int
    cells: tuple[Point, ...]


Entity = Union[Symbol, Number]
