import logging
import numbers
from dataclasses import dataclass
from typing import Optional

from hmpy.errors import InvalidAxisError
from hmpy.util.text import (
    SUBSCRIPT_DIGITS,
    from_subscript_string,
    subscript_string,
    to_subscript,
)
from .restrictions import normalize_glide

LOG = logging.getLogger(__name__)

_ROTATION_CHARS = frozenset("0123456789-–")


@dataclass(frozen=True)
class Axis:
    """
    One of the axes described in a long-form Hermann-Mauguin symbol.

    For instance, in space group 51 (P 2₁/m 2/m 2/a or Pmma), there
    are three axes: 2₁/m, 2/m and 2/a.

    Attributes:
        rotation (int): the rotation order of the axis, negative for
            rotoinversions. Must be nonzero.
        screw (int): the order of the screw component, 0 for a pure
            rotation. Always less than the rotation order, and 0 for
            rotoinversions.
        glide (str): the glide or reflection letter (one of a, b, c, d,
            e, g, m, n), or `None`

    Examples:
        >>> Axis(4, 2, "m")
        <Axis: 4₂/m>
        >>> Axis(2, glide="c")
        <Axis: 2/c>
        >>> Axis(glide="m").order
        2
    """

    rotation: int = 1
    screw: int = 0
    glide: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.rotation, numbers.Integral) or not isinstance(
            self.screw, numbers.Integral
        ):
            raise InvalidAxisError(
                f"Rotation and screw orders must be integers, got "
                f"{self.rotation!r}, {self.screw!r}"
            )
        if self.rotation == 0:
            raise InvalidAxisError("Rotation order cannot be zero")
        screw = self.screw % self.rotation if self.rotation > 0 else 0
        object.__setattr__(self, "rotation", int(self.rotation))
        object.__setattr__(self, "screw", int(screw))
        object.__setattr__(self, "glide", normalize_glide(self.glide))

    @classmethod
    def from_string(cls, s: str) -> "Axis":
        """
        Construct an axis from one token of a Hermann-Mauguin symbol.

        Screw orders may be given either as an underscore followed by a digit,
        or as unicode subscripts. A token starting with -2 is always read
        as the reflection m.

        >>> Axis.from_string("4_2/m")
        <Axis: 4₂/m>
        >>> Axis.from_string("-3")
        <Axis: -3>

        Args:
            s (str): the axis token, e.g. '2_1/c' or 'm'

        Returns:
            Axis: the parsed axis, the identity axis for an empty token

        Raises:
            InvalidAxisError: if the token cannot be read as an axis
        """
        if not s:
            return cls()
        # TODO: keep -2 as a rotoinversion once it renders as m
        if s.lstrip().startswith("-2"):
            return cls(1, 0, "m")
        s = to_subscript(s)
        rotation = "".join(c for c in s if c in _ROTATION_CHARS)
        screw = "".join(c for c in s if c in SUBSCRIPT_DIGITS)
        glide = [c for c in s if c.isalpha()]
        if len(glide) > 1:
            raise InvalidAxisError(f"More than one glide operation in axis: {s!r}")
        r, sc, g = 1, 0, None
        if rotation:
            try:
                r = int(rotation.replace("–", "-"))
            except ValueError:
                raise InvalidAxisError(f"Could not parse rotation order from {s!r}")
        if screw:
            sc = from_subscript_string(screw)
        if glide:
            g = glide[0]
        LOG.debug("Parsed axis %r -> (%d, %d, %s)", s, r, sc, g)
        return cls(r, sc, g)

    @property
    def order(self) -> int:
        """
        The rotation order of the axis: the absolute value of the rotation,
        but 2 if the rotation is onefold and there is a glide or reflection.
        """
        r = abs(self.rotation)
        if r == 1 and self.glide is not None:
            return 2
        return r

    @property
    def is_identity(self) -> bool:
        return self == IDENTITY

    def __str__(self):
        r = str(self.rotation)
        # rotoinversions have no screw/glide components
        if self.rotation < 0:
            return r
        if self.rotation == 1 and self.glide is not None:
            return self.glide
        if self.screw != 0:
            r += subscript_string(self.screw)
        if self.glide is not None:
            r += "/" + self.glide
        return r

    def __repr__(self):
        return f"<Axis: {self}>"


IDENTITY = Axis(1)
INVERSION = Axis(-1)
