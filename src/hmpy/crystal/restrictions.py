"""
Validation rules shared by `Axis` and `HermannMauguin` symbols:
the allowed glide/reflection letters, the centering alphabet of each
dimension and the crystallographic restriction on rotation orders.
"""
import logging

from hmpy.errors import (
    InvalidAxisError,
    InvalidCenteringError,
    InvalidRotationOrderError,
)

LOG = logging.getLogger(__name__)

# symbols are only defined up to 3 dimensions
MAXIMUM_DIMENSION = 3

# glide operations, including the reflection m
GLIDES = frozenset("abcdegmn")

CENTERINGS = {
    1: frozenset("P"),
    2: frozenset("PC"),
    3: frozenset("ABCFHIPR"),
}

# crystallographic restriction theorem
CRYSTALLOGRAPHIC_ORDERS = (1, 2, 3, 4, 6)


def check_dimension(dimension):
    if dimension not in CENTERINGS:
        raise ValueError(
            "Dimension must be between [1, {}], got {!r}".format(
                MAXIMUM_DIMENSION, dimension
            )
        )
    return dimension


def normalize_glide(glide):
    """
    Normalize a glide or reflection letter to lower case.

    Args:
        glide (str, optional): the glide letter, `None` or an
            empty string for no glide

    Returns:
        str: the lower case glide letter, or `None`

    Raises:
        InvalidAxisError: if the letter is not one of a, b, c, d, e, g, m, n
    """
    if not glide:
        return None
    g = str(glide).lower()
    if g not in GLIDES:
        raise InvalidAxisError(f"Invalid reflection or glide operation: {glide!r}")
    return g


def normalize_centering(centering, dimension):
    """
    Normalize a centering letter to upper case and check it belongs
    to the centering alphabet of the given dimension.

    Args:
        centering (str, optional): the centering letter, `None` or an
            empty string for a point group
        dimension (int): the dimension of the symbol

    Returns:
        str: the upper case centering letter, or `None`

    Raises:
        InvalidCenteringError: if the letter is not valid for `dimension`
    """
    if not centering:
        return None
    c = str(centering).upper()
    if c not in CENTERINGS[check_dimension(dimension)]:
        raise InvalidCenteringError(
            f"Invalid centering type for {dimension}D symbol: {centering!r}"
        )
    return c


def check_rotation_orders(orders):
    """
    Raises:
        InvalidRotationOrderError: if any of `orders` is not 1, 2, 3, 4 or 6
    """
    bad = [x for x in orders if x not in CRYSTALLOGRAPHIC_ORDERS]
    if bad:
        LOG.debug("Rejecting axis orders %s", orders)
        raise InvalidRotationOrderError(
            "Order of rotations must be 1, 2, 3, 4, or 6 in space groups, "
            f"got {tuple(orders)}"
        )
