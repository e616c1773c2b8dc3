"""
Exceptions raised while constructing Hermann-Mauguin symbols.

All of them are raised at construction time, values are never
left in a partially valid state.
"""


class HermannMauguinError(Exception):
    """Base class for exceptions in this package."""

    pass


class InvalidAxisError(HermannMauguinError, ValueError):
    """Raised for a zero rotation order, an unknown glide
    or reflection letter, or an axis token that cannot be parsed."""

    pass


class InvalidCenteringError(HermannMauguinError, ValueError):
    """Raised for a centering letter outside the alphabet of
    the symbol's dimension."""

    pass


class InvalidRotationOrderError(HermannMauguinError, ValueError):
    """Raised when a space group has an axis whose order is
    not allowed by the crystallographic restriction theorem."""

    pass


class InvalidSymbolError(HermannMauguinError, ValueError):
    """Raised when a symbol has the wrong number of axes."""

    pass


class IndexOutOfRangeError(HermannMauguinError, IndexError):
    """Raised for a group number outside the bounds of a symbol table."""

    pass
