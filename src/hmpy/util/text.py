import re

# offset between an ASCII digit and its unicode subscript, e.g. '0' -> '₀'
SUBSCRIPT_OFFSET = 0x2050

SUBSCRIPT_MAP = {
    "0": "₀",
    "1": "₁",
    "2": "₂",
    "3": "₃",
    "4": "₄",
    "5": "₅",
    "6": "₆",
    "7": "₇",
    "8": "₈",
    "9": "₉",
}

UNDERSCORE_MAP = {v: "_" + k for k, v in SUBSCRIPT_MAP.items()}

SUBSCRIPT_DIGITS = frozenset(SUBSCRIPT_MAP.values())

_UNDERSCORE_DIGIT_REGEX = re.compile(r"_([0-9])")


def subscript(x: str) -> str:
    """
    Convert the provided digit to its subscript
    equivalent in unicode

    Args:
        x (str): the character to be converted

    Returns:
        str: the converted character, or `x` unchanged if it is not a digit
    """
    return SUBSCRIPT_MAP.get(x, x)


def to_subscript(s: str) -> str:
    """
    Replace every underscore followed by a digit with the
    unicode subscript form of that digit.

    >>> to_subscript("P 4_2/m 2_1/c 2/m")
    'P 4₂/m 2₁/c 2/m'

    Args:
        s (str): the string to be converted

    Returns:
        str: the converted string, other text is left as is
    """
    return _UNDERSCORE_DIGIT_REGEX.sub(lambda m: subscript(m.group(1)), s)


def to_underscore(s: str) -> str:
    """
    Replace every unicode subscript digit with an underscore
    followed by the ordinary digit.

    >>> to_underscore("P 4₂/m 2₁/c 2/m")
    'P 4_2/m 2_1/c 2/m'

    Args:
        s (str): the string to be converted

    Returns:
        str: the converted string
    """
    return "".join(UNDERSCORE_MAP.get(c, c) for c in s)


def subscript_string(n: int) -> str:
    """
    Write the decimal digits of a non-negative integer
    as unicode subscript digits.

    >>> subscript_string(21)
    '₂₁'

    Args:
        n (int): the integer to be converted

    Returns:
        str: the subscript digits of n
    """
    return "".join(chr(ord(c) + SUBSCRIPT_OFFSET) for c in str(abs(n)))


def from_subscript_string(s: str) -> int:
    """
    Decode a string of unicode subscript digits, i.e. the
    inverse of `subscript_string`.

    >>> from_subscript_string('₂₁')
    21

    Args:
        s (str): a non-empty string of subscript digits

    Returns:
        int: the decoded integer
    """
    return int("".join(chr(ord(c) - SUBSCRIPT_OFFSET) for c in s))
