"""
schem_index: Schematic adjacency index and queries.

Modules:
- schematic.py: build(), build_index(), Schematic with part-number and gear-power queries
- render.py: numpy masks of part-number cells
- cli.py: schematic-analyze command line
"""

from .schematic import Schematic, build, build_index

__all__ = [
    "Schematic",
    "build",
    "build_index",
]
