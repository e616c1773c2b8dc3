import logging
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from hmpy.errors import InvalidSymbolError
from hmpy.util.text import subscript_string, to_underscore
from .axis import IDENTITY, INVERSION, Axis
from .restrictions import (
    check_dimension,
    check_rotation_orders,
    normalize_centering,
)
from .symbols import default_symbol_table

LOG = logging.getLogger(__name__)

# axis orders of trigonal groups with a onefold placeholder axis e.g. P 3 1 2
TRIGONAL_ORDERS = ((3, 1, 2), (3, 2, 1))


class _HermannMauguinMeta(type):
    def __getitem__(cls, dimension):
        return _DIMENSION_CLASSES[check_dimension(dimension)]


@dataclass(frozen=True)
class HermannMauguin(metaclass=_HermannMauguinMeta):
    """
    A Hermann-Mauguin symbol of dimension N, for N from 1 to 3.

    The concrete class for a dimension is obtained by indexing,
    i.e. `HermannMauguin[3]` is `HermannMauguin3D`.

    Attributes:
        centering (str): the upper case centering letter of a space group,
            or `None` for a point group
        axes (Tuple[Axis]): one axis per symmetry direction, in order

    Examples:
        >>> hm = HermannMauguin[3].from_string("F 4_1/d -3 2/m")
        >>> hm.long_form()
        'F 4₁/d -3 2/m'
        >>> hm.short_form()
        'Fd-3m'
        >>> hm.axis_orders
        (4, 3, 2)
    """

    centering: Optional[str]
    axes: Tuple[Axis, ...]

    dimension: ClassVar[Optional[int]] = None

    def __post_init__(self):
        if self.dimension is None:
            raise TypeError(
                "HermannMauguin needs a dimension: use HermannMauguin[n] "
                "or HermannMauguin.from_axes"
            )
        axes = tuple(self.axes)
        if len(axes) != self.dimension:
            raise InvalidSymbolError(
                f"{self.dimension}D symbol needs {self.dimension} axes, got {len(axes)}"
            )
        for ax in axes:
            if not isinstance(ax, Axis):
                raise TypeError(f"Expected an Axis, got {ax!r}")
        centering = normalize_centering(self.centering, self.dimension)
        if centering is not None:
            check_rotation_orders(tuple(ax.order for ax in axes))
        object.__setattr__(self, "centering", centering)
        object.__setattr__(self, "axes", axes)

    @classmethod
    def from_axes(cls, centering, *axes) -> "HermannMauguin":
        """
        Construct a symbol whose dimension is the number of axes given.

        >>> HermannMauguin.from_axes("P", Axis(2), Axis(2), Axis(2))
        <HermannMauguin[3]: P 2 2 2>
        """
        return cls[len(axes)](centering, axes)

    @classmethod
    def from_string(cls, s: str) -> "HermannMauguin":
        """
        Construct a symbol from a string holding a long Hermann-Mauguin
        symbol, with axis tokens separated by whitespace.

        A single letter leading token is read as the centering, unless it
        is the reflection m. Missing trailing axes are onefold axes.

        Args:
            s (str): the symbol e.g. 'P 2_1/c' or '-6 m 2'

        Returns:
            HermannMauguin: the parsed symbol

        Raises:
            InvalidSymbolError: if there are more axis tokens than dimensions
        """
        if cls.dimension is None:
            raise TypeError("Use HermannMauguin[n].from_string to parse a symbol")
        tokens = s.split()
        centering = None
        if tokens and tokens[0].startswith("m"):
            # leading reflection e.g. m m 2, not a centering
            pass
        elif tokens and len(tokens[0]) == 1 and tokens[0].isalpha():
            centering = tokens.pop(0)
        LOG.debug("Parsing %r: centering = %s, axes = %s", s, centering, tokens)
        if len(tokens) > cls.dimension:
            raise InvalidSymbolError(
                f"Too many axes for a {cls.dimension}D symbol: {s!r}"
            )
        tokens += ["1"] * (cls.dimension - len(tokens))
        return cls(centering, tuple(Axis.from_string(x) for x in tokens))

    @classmethod
    def from_number(cls, number: int, table=None) -> "HermannMauguin":
        """
        Construct the symbol of a space group from its number.

        Args:
            number (int): the group number, starting at 1
            table (SymbolTable, optional): the symbols to look up,
                defaults to the table bundled with this package

        Returns:
            HermannMauguin: the symbol of the group

        Raises:
            IndexOutOfRangeError: if `number` is outside the table
        """
        if cls.dimension is None:
            raise TypeError("Use HermannMauguin[n].from_number to look up a symbol")
        if table is None:
            table = default_symbol_table()
        s = table.lookup(cls.dimension, number)
        LOG.debug("%dD group %d has symbol %r", cls.dimension, number, s)
        return cls.from_string(s)

    @property
    def axis_orders(self) -> Tuple[int, ...]:
        "the rotation order of each axis"
        return tuple(ax.order for ax in self.axes)

    @property
    def is_point_group(self) -> bool:
        return self.centering is None

    @property
    def is_space_group(self) -> bool:
        return self.centering is not None

    def _centering_prefix(self):
        return "" if self.centering is None else self.centering + " "

    def _is_trivial(self):
        return all(ax == IDENTITY for ax in self.axes)

    def long_form(self, subscripts=True) -> str:
        "All axes of the symbol, separated by spaces"
        s = self._centering_prefix() + " ".join(str(ax) for ax in self.axes)
        return s if subscripts else to_underscore(s)

    def short_form(self, subscripts=True) -> str:
        "The centering followed by the non-trivial axes"
        axes = "".join(str(ax) for ax in self.axes if ax != IDENTITY) or "1"
        s = (self.centering or "") + axes
        return s if subscripts else to_underscore(s)

    def describe(self) -> str:
        kind = "point" if self.is_point_group else "space"
        return "\n".join(
            (
                f"Hermann-Mauguin symbol for a {self.dimension}-dimensional {kind} group:",
                f"Long form:\t{self.long_form()}",
                f"Short form:\t{self.short_form()}",
            )
        )

    def __str__(self):
        return self.long_form()

    def __repr__(self):
        return f"<HermannMauguin[{self.dimension}]: {self.long_form()}>"


class HermannMauguin1D(HermannMauguin):
    dimension = 1


class HermannMauguin2D(HermannMauguin):
    dimension = 2

    @classmethod
    def from_string(cls, s):
        # plane group symbols such as p 3 1 m carry more axis
        # positions than there are dimensions
        raise NotImplementedError("Parsing 2D Hermann-Mauguin symbols is not supported")


class HermannMauguin3D(HermannMauguin):
    dimension = 3

    def _has_inversion(self):
        return INVERSION in self.axes

    def _is_primitive_trigonal(self):
        """Primitive trigonal groups with point groups 32, 3m and -3 2/m,
        where the onefold axis fixes the orientation e.g. P 3 1 2 vs P 3 2 1"""
        return self.centering == "P" and self.axis_orders in TRIGONAL_ORDERS

    def _restores_rotation(self, block):
        """The leading rotation of a high order even axis is lost when
        only letters are kept, unless the group is cubic"""
        orders = self.axis_orders
        return (
            block[0].isalpha()
            and orders[0] > 2
            and orders[0] % 2 == 0
            and orders[1] != 3
        )

    def _rotation_prefix(self):
        first = self.axes[0]
        screw = subscript_string(first.screw) if first.screw else ""
        return f"{first.rotation}{screw}/"

    def long_form(self, subscripts=True) -> str:
        """
        The long form of the symbol, e.g. 'P 2₁/b 2₁/c 2₁/a'.

        Onefold axes are left out of non-primitive trigonal symbols
        such as 'R -3 2/m', where they do not fix an orientation.
        """
        prefix = self._centering_prefix()
        if any(ax.rotation == -1 for ax in self.axes):
            s = prefix + "-1"
        elif self._is_trivial():
            s = prefix + "1"
        else:
            axes = [str(ax) for ax in self.axes]
            if self.centering != "P" and self.axis_orders in TRIGONAL_ORDERS:
                axes = [x for x in axes if x != "1"]
            s = prefix + " ".join(axes)
        return s if subscripts else to_underscore(s)

    def short_form(self, subscripts=True) -> str:
        """
        The short form of the symbol, e.g. 'Pbca' or 'I4₁/amd'.

        Only the glide and reflection letters of each axis are kept when
        there is more than one non-trivial axis.
        """
        centering = self.centering or ""
        if self._is_trivial():
            s = centering + "1"
        elif self._has_inversion():
            s = centering + "-1"
        else:
            if self._is_primitive_trigonal():
                axes = [str(ax) for ax in self.axes]
            else:
                axes = [str(ax) for ax in self.axes if ax != IDENTITY]
            if len(axes) > 1:
                block = "".join(x[-1] if x[-1].isalpha() else x for x in axes)
                if self._restores_rotation(block):
                    block = self._rotation_prefix() + block
            else:
                block = axes[0]
            s = centering + block
        return s if subscripts else to_underscore(s)

    def standardize(self) -> "HermannMauguin3D":
        """
        Convert the symbol to its standard setting as described by the IUCr.

        For triclinic cells, this fixes the centering to primitive.

        For monoclinic cells, this fixes the centering to either primitive or
        C-centering, and the b-axis is the unique axis (with β ≠ 90°).

        For orthorhombic cells with point group mm2, this defines the twofold
        rotation or screw axis to be the z-axis.

        For tetragonal cells, F-centered and C-centered cells are transformed
        to I-centered and primitive cells, respectively.

        For trigonal cells, H-centered cells are converted to P-centered cells.

        For hexagonal and cubic cells, no changes are made.

        Raises:
            NotImplementedError: always, standardization is not available yet
        """
        raise NotImplementedError("Standardization of Hermann-Mauguin symbols")


_DIMENSION_CLASSES = {
    1: HermannMauguin1D,
    2: HermannMauguin2D,
    3: HermannMauguin3D,
}
