"""Roman numeral conversion for interpretation indices (A.R. 1.3.2.IV)."""

from .errors import InvalidRomanNumeralError

_NUMERALS = [
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
]

_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def to_roman(value: int) -> str:
    """Render 1..3999 as an upper-case roman numeral"""
    if not 0 < value < 4000:
        raise ValueError(f"Cannot render {value} as roman numeral")

    parts = []
    for number, numeral in _NUMERALS:
        count, value = divmod(value, number)
        parts.append(numeral * count)
    return "".join(parts)


def from_roman(numeral: str) -> int:
    """
    Parse a canonical roman numeral

    Args:
        numeral: Upper-case numeral such as "XIV"

    Returns:
        The integer value

    Raises:
        InvalidRomanNumeralError: Empty, unknown characters or a non-canonical
            form such as "IIII" or "VX"
    """
    if not numeral or any(char not in _VALUES for char in numeral):
        raise InvalidRomanNumeralError(numeral)

    total = 0
    for i, char in enumerate(numeral):
        value = _VALUES[char]
        if i + 1 < len(numeral) and value < _VALUES[numeral[i + 1]]:
            total -= value
        else:
            total += value

    # Only accept the canonical spelling of the value
    if total <= 0 or total >= 4000 or to_roman(total) != numeral:
        raise InvalidRomanNumeralError(numeral)
    return total
