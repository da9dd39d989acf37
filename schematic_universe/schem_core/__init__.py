"""
schem_core: Core primitives for the schematic engine.

Provides:
- types: Point, Symbol, Number, TokenSpan
- errors: ParseError and its GrammarError / NumberFormatError / CoordinateRangeError kinds
- config: SchematicConfig (marker characters, numeric limits)
- coords: 8-connected neighborhoods
- tokenizer: Tokenizer protocol with regex and scanner strategies
- entities: Span → Symbol / Number extraction
"""

__all__ = [
    "config",
    "coords",
    "entities",
    "errors",
    "tokenizer",
    "types",
]
