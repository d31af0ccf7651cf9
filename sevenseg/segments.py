"""Segment patterns for seven-segment digits and helpers for choosing them.

Each pattern is a byte whose bits map to segments in the order
``DP G F E D C B A``, so bit 0 is segment A and bit 7 is the decimal point.
"""

from __future__ import annotations

__all__ = [
    "SEGMENT_CODES",
    "ZERO",
    "BLANK",
    "MINUS",
    "DECIMAL_POINT",
    "DEGREE",
    "UNDERSCORE",
    "LETTER_C",
    "LETTER_F",
    "segment_code",
    "char_to_segment",
    "is_character_supported",
    "count_digits",
]

#: Patterns indexed by digit value (0-15 double as hexadecimal digits),
#: then letters A-Z at 10-35, followed by the special symbols.
SEGMENT_CODES: tuple[int, ...] = (
    # GFEDCBA      index  symbol     7-segment map:
    0b00111111,  # 0      '0'          AAA
    0b00000110,  # 1      '1'         F   B
    0b01011011,  # 2      '2'         F   B
    0b01001111,  # 3      '3'          GGG
    0b01100110,  # 4      '4'         E   C
    0b01101101,  # 5      '5'         E   C
    0b01111101,  # 6      '6'          DDD
    0b00000111,  # 7      '7'
    0b01111111,  # 8      '8'
    0b01101111,  # 9      '9'
    0b01110111,  # 10     'A'
    0b01111100,  # 11     'b'
    0b00111001,  # 12     'C'
    0b01011110,  # 13     'd'
    0b01111001,  # 14     'E'
    0b01110001,  # 15     'F'
    0b00111101,  # 16     'G'
    0b01110110,  # 17     'H'
    0b00110000,  # 18     'I'
    0b00001110,  # 19     'J'
    0b01110110,  # 20     'K'  same as 'H'
    0b00111000,  # 21     'L'
    0b00000000,  # 22     'M'  cannot be shown
    0b01010100,  # 23     'n'
    0b00111111,  # 24     'O'
    0b01110011,  # 25     'P'
    0b01100111,  # 26     'q'
    0b01010000,  # 27     'r'
    0b01101101,  # 28     'S'
    0b01111000,  # 29     't'
    0b00111110,  # 30     'U'
    0b00111110,  # 31     'V'  same as 'U'
    0b00000000,  # 32     'W'  cannot be shown
    0b01110110,  # 33     'X'  same as 'H'
    0b01101110,  # 34     'y'
    0b01011011,  # 35     'Z'  same as '2'
    0b00000000,  # 36     ' '  blank
    0b01000000,  # 37     '-'  dash / minus
    0b10000000,  # 38     '.'  decimal point
    0b01100011,  # 39     '*'  degree
    0b00001000,  # 40     '_'  underscore
)

ZERO = 0
LETTER_C = 12
LETTER_F = 15
BLANK = 36
MINUS = 37
DECIMAL_POINT = 38
DEGREE = 39
UNDERSCORE = 40

_SYMBOLS = {
    " ": BLANK,
    "-": MINUS,
    ".": DECIMAL_POINT,
    "*": DEGREE,
    "_": UNDERSCORE,
}


def segment_code(index: int) -> int:
    """Return the segment pattern stored at ``index``."""
    if not 0 <= index < len(SEGMENT_CODES):
        raise IndexError(f"segment code index out of range: {index}")
    return SEGMENT_CODES[index]


def _code_index(char: str) -> int | None:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    if "a" <= char <= "z":
        # Upper and lower case look the same on seven segments.
        char = char.upper()
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 10
    return _SYMBOLS.get(char)


def char_to_segment(char: str) -> int:
    """Return the segment pattern for a single character.

    Raises ``ValueError`` if the character cannot be displayed.
    """
    index = _code_index(char)
    if index is None:
        raise ValueError(f"character cannot be displayed: {char!r}")
    return SEGMENT_CODES[index]


def is_character_supported(char: str) -> bool:
    """Tell whether a single character can be displayed."""
    return _code_index(char) is not None


def count_digits(number: int, base: int) -> int:
    """Return how many display positions ``number`` needs in ``base``.

    A negative number takes one extra position for the minus sign.
    """
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    if number == 0:
        return 1
    count = 0
    if number < 0:
        count += 1
        number = -number
    while number > 0:
        count += 1
        number //= base
    return count