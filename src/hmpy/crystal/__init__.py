"""
This module implements the components of Hermann-Mauguin symbols
(`Axis`), the symbols themselves (`HermannMauguin`) for dimensions
1 to 3, and tables of canonical symbols (`SymbolTable`).
"""

from .axis import Axis
from .hermann_mauguin import (
    HermannMauguin,
    HermannMauguin1D,
    HermannMauguin2D,
    HermannMauguin3D,
)
from .symbols import SymbolTable, default_symbol_table

__all__ = [
    "Axis",
    "HermannMauguin",
    "HermannMauguin1D",
    "HermannMauguin2D",
    "HermannMauguin3D",
    "SymbolTable",
    "default_symbol_table",
]
