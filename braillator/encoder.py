from __future__ import annotations

from braillator.base import (
    CAPITAL_FOLLOWS,
    DIGIT_TO_BRAILLE,
    LETTER_TO_BRAILLE,
    NUMBER_FOLLOWS,
    SPACE_CELL,
)
from braillator.errors import UnsupportedCharacterError


def english_to_braille(text: str) -> str:
    """Translate English letters, digits and spaces to Braille cells.

    Uppercase letters get a CAPITAL_FOLLOWS cell of their own. A run of digits
    is introduced by a single NUMBER_FOLLOWS cell, and the run ends at the next
    letter or space.

    Args:
        text: The text to translate.

    Returns:
        The concatenated cells, six characters each, with no separator.

    Raises:
        UnsupportedCharacterError: for anything other than ASCII letters,
            ASCII digits and spaces.

    Examples:
        >>> english_to_braille("Ab")
        '.....OO.....O.O...'

        >>> english_to_braille("1")
        '.O.OOOO.....'
    """
    cells = []
    in_number_mode = False
    for index, ch in enumerate(text):
        if ch in DIGIT_TO_BRAILLE:
            if not in_number_mode:
                cells.append(NUMBER_FOLLOWS)
                in_number_mode = True
            cells.append(DIGIT_TO_BRAILLE[ch])
            continue

        in_number_mode = False
        if ch == " ":
            cells.append(SPACE_CELL)
        elif ch in LETTER_TO_BRAILLE:
            cells.append(LETTER_TO_BRAILLE[ch])
        elif ch.isascii() and ch.isupper() and (lower := ch.lower()) in LETTER_TO_BRAILLE:
            cells.append(CAPITAL_FOLLOWS)
            cells.append(LETTER_TO_BRAILLE[lower])
        else:
            raise UnsupportedCharacterError(ch, index)

    return "".join(cells)


__all__ = ("english_to_braille",)
