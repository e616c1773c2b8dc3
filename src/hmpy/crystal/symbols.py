"""
Read-only tables of canonical Hermann-Mauguin symbols, indexed by
dimension and (1-based) group number.
"""
import functools
import json
import logging
import numbers
import os
from typing import Mapping, Sequence

from hmpy.errors import IndexOutOfRangeError

LOG = logging.getLogger(__name__)

DEFAULT_SYMBOL_DATA = os.path.join(os.path.dirname(__file__), "hmdata.json")


class SymbolTable:
    """
    An immutable table of notation strings for each dimension.

    The 3D entries of the bundled table are long-form space group
    symbols, listing one axis for each symmetry direction.

    Examples:
        >>> table = SymbolTable({3: ["P 1", "P -1"]})
        >>> table.lookup(3, 2)
        'P -1'
        >>> table.count(3)
        2
    """

    def __init__(self, symbols: Mapping[int, Sequence[str]]):
        self._symbols = {int(k): tuple(v) for k, v in symbols.items()}

    @classmethod
    def from_json(cls, filename) -> "SymbolTable":
        """
        Load a symbol table from a JSON file mapping each
        dimension to a list of symbols.

        Args:
            filename (str): path to the JSON file

        Returns:
            SymbolTable: the loaded table
        """
        LOG.debug("Loading symbol table from %s", filename)
        with open(filename, encoding="utf-8") as f:
            return cls(json.load(f))

    @property
    def dimensions(self):
        return tuple(sorted(self._symbols))

    def count(self, dimension: int) -> int:
        "The number of symbols stored for `dimension`"
        return len(self._symbols_for(dimension))

    def lookup(self, dimension: int, number: int) -> str:
        """
        Get the symbol of a group from its number.

        Args:
            dimension (int): the dimension of the group
            number (int): the group number, starting at 1

        Returns:
            str: the notation string of the group

        Raises:
            IndexOutOfRangeError: if `number` is outside the table
        """
        symbols = self._symbols_for(dimension)
        if not isinstance(number, numbers.Integral) or isinstance(number, bool):
            raise TypeError(f"Group number must be an integer, got {number!r}")
        if number < 1 or number > len(symbols):
            raise IndexOutOfRangeError(
                f"{dimension}D group number must be between [1, {len(symbols)}], "
                f"got {number}"
            )
        return symbols[number - 1]

    def _symbols_for(self, dimension):
        try:
            return self._symbols[dimension]
        except KeyError:
            raise ValueError(f"No symbols available for dimension {dimension!r}")

    def __repr__(self):
        counts = ", ".join(f"{d}D: {self.count(d)}" for d in self.dimensions)
        return f"<SymbolTable {counts}>"


@functools.lru_cache(maxsize=None)
def default_symbol_table() -> SymbolTable:
    "The symbol table bundled with this package, loaded on first use"
    return SymbolTable.from_json(DEFAULT_SYMBOL_DATA)
