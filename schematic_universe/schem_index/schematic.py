"""
Schematic index and aggregate queries.

Build pipeline: text → spans (tokenizer) → entities → index.

The index holds:
- symbols: cell → symbol character (later symbols overwrite earlier ones on
  the same cell)
- adjacent_numbers: cell → every Number whose 8-neighborhood contains the
  cell, deduplicated by NumberId
- numbers: all Numbers in extraction order

Queries:
- part_numbers / part_number_sum: Numbers next to at least one symbol
- gear_powers / gear_power_sum: product of the two Numbers around each gear
  marker that has exactly two

Everything is read-only once built; queries can run any number of times in
any order.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from schem_core.config import DEFAULT_CONFIG, SchematicConfig
from schem_core.coords import neighbors
from schem_core.entities import extract_entities
from schem_core.tokenizer import RegexTokenizer, Tokenizer
from schem_core.types import Entity, Number, Point, Symbol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Schematic:
    """
    Parsed schematic with its adjacency index.

    - symbols: Symbol character per symbol cell
    - adjacent_numbers: Numbers adjacent to each cell (reverse index)
    - numbers: All Numbers
    - gear_marker: Symbol character treated as a gear
    """
    symbols: Mapping[Point, str]
    adjacent_numbers: Mapping[Point, frozenset[Number]]
    numbers: tuple[Number, ...]
    gear_marker: str = DEFAULT_CONFIG.gear_marker

    def part_number_entities(self) -> list[Number]:
        """
        Numbers adjacent to at least one symbol, in extraction order.

        Membership is derived from each Number's own neighborhood, not from the
        reverse index.
        """
        return [
            number for number in self.numbers
            if any(cell in self.symbols for cell in neighbors(number.cells))
        ]

    def part_numbers(self) -> list[int]:
        """Values of all part numbers (equal values are kept separately)."""
        return [number.value for number in self.part_number_entities()]

    def part_number_sum(self) -> int:
        return sum(self.part_numbers())

    def gear_powers(self) -> list[tuple[Point, int]]:
        """
        (cell, power) for every gear marker with exactly two adjacent Numbers.

        Cells with 0, 1 or 3+ adjacent Numbers are left out. Sorted row-major.
        """
        powers = []
        for cell, char in self.symbols.items():
            if char != self.gear_marker:
                continue
            adjacent = self.adjacent_numbers.get(cell, frozenset())
            if len(adjacent) != 2:
                continue
            first, second = adjacent
            powers.append((cell, first.value * second.value))

        powers.sort(key=lambda item: (item[0].row, item[0].col))
        return powers

    def gear_power_sum(self) -> int:
        return sum(power for _, power in self.gear_powers())

    @property
    def extent(self) -> tuple[int, int]:
        """(rows, cols) covering every symbol and number cell; (0, 0) when empty."""
        cells = list(self.symbols)
        for number in self.numbers:
            cells.extend(number.cells)
        if not cells:
            return (0, 0)
        return (max(p.row for p in cells), max(p.col for p in cells))


def build_index(entities: Iterable[Entity],
                config: Optional[SchematicConfig] = None) -> Schematic:
    """
    Build the schematic index in a single forward pass.

    Args:
        entities: Symbols and Numbers in any order
        config: Supplies the gear marker

    Returns:
        Read-only Schematic
    """
    config = config or DEFAULT_CONFIG
    symbols: dict[Point, str] = {}
    adjacent: dict[Point, set[Number]] = {}
    numbers: list[Number] = []

    for entity in entities:
        if isinstance(entity, Symbol):
            symbols[entity.cell] = entity.char
        elif isinstance(entity, Number):
            for cell in neighbors(entity.cells):
                adjacent.setdefault(cell, set()).add(entity)
            numbers.append(entity)
        else:
            raise TypeError(f"Expected Symbol or Number, got {type(entity).__name__}")

    logger.debug(
        "indexed %d symbols, %d numbers, %d adjacent cells",
        len(symbols), len(numbers), len(adjacent),
    )

    return Schematic(
        symbols=MappingProxyType(symbols),
        adjacent_numbers=MappingProxyType(
            {cell: frozenset(members) for cell, members in adjacent.items()}
        ),
        numbers=tuple(numbers),
        gear_marker=config.gear_marker,
    )


def build(text: str, tokenizer: Optional[Tokenizer] = None,
          config: Optional[SchematicConfig] = None) -> Schematic:
    """
    Parse schematic text into a Schematic.

    Args:
        text: Raw schematic, rows separated by newlines
        tokenizer: Any Tokenizer strategy (default: RegexTokenizer)
        config: Marker characters and numeric limits

    Returns:
        Built Schematic

    Raises:
        ParseError: GrammarError, NumberFormatError or CoordinateRangeError;
            no partial Schematic is returned
    """
    config = config or DEFAULT_CONFIG
    tokenizer = tokenizer or RegexTokenizer(config)
    entities = extract_entities(tokenizer.tokenize(text), config)
    return build_index(entities, config)
