"""
Configuration for schematic parsing and indexing.

Key Classes:
    - SchematicConfig: Marker characters and numeric limits
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SchematicConfig:
    """
    Settings shared by the tokenizer, entity extraction and the index.

    Attributes:
        gear_marker: Symbol character that takes part in gear power. Defaults to '*'.
        filler: Separator character that is neither symbol nor digit. Defaults to '.'.
        number_bits: Signed integer width numbers must fit in. Defaults to 32.
        max_coordinate: Largest representable line/column. Defaults to 2**31 - 1.
    """
    gear_marker: str = "*"
    filler: str = "."
    number_bits: int = 32
    max_coordinate: int = 2**31 - 1

    def __post_init__(self):
        for name in ("gear_marker", "filler"):
            value = getattr(self, name)
            if len(value) != 1:
                raise ValueError(f"{name} must be a single character, got {value!r}")
            if value.isdigit() or value.isspace():
                raise ValueError(f"{name} cannot be a digit or blank, got {value!r}")
        if self.gear_marker == self.filler:
            raise ValueError("gear_marker and filler must differ")
        if self.number_bits < 2:
            raise ValueError(f"number_bits must be at least 2, got {self.number_bits}")
        if self.max_coordinate < 1:
            raise ValueError(f"max_coordinate must be positive, got {self.max_coordinate}")

    @property
    def max_number(self) -> int:
        """Largest value a Number may hold (signed width)."""
        return 2 ** (self.number_bits - 1) - 1


DEFAULT_CONFIG = SchematicConfig()
