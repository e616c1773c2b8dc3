"""
Parsing, validation and rendering of Hermann-Mauguin symbols
for point groups and space groups in 1, 2 and 3 dimensions.
"""
from .crystal import Axis, HermannMauguin, SymbolTable
from .errors import (
    HermannMauguinError,
    IndexOutOfRangeError,
    InvalidAxisError,
    InvalidCenteringError,
    InvalidRotationOrderError,
    InvalidSymbolError,
)

__all__ = [
    "Axis",
    "HermannMauguin",
    "HermannMauguinError",
    "IndexOutOfRangeError",
    "InvalidAxisError",
    "InvalidCenteringError",
    "InvalidRotationOrderError",
    "InvalidSymbolError",
    "SymbolTable",
]
