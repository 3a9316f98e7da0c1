from __future__ import annotations

from braillator.base import (
    BRAILLE_TO_DIGIT,
    BRAILLE_TO_LETTER,
    CAPITAL_FOLLOWS,
    NUMBER_FOLLOWS,
    SPACE_CELL,
)
from braillator.cells import describe_cell, split_cells
from braillator.errors import (
    DanglingCapitalError,
    InvalidSequenceError,
    UnknownCellError,
)


def braille_to_english(braille: str) -> str:
    """Translate Braille cells back to English.

    The decoder keeps two flags while it walks the cells:

    - capital pending, set by CAPITAL_FOLLOWS and consumed by the next letter;
    - number mode, set by NUMBER_FOLLOWS and kept until a space cell or the end
      of the input. Cells read in number mode are digits.

    Nothing is returned unless the whole input decodes.

    Args:
        braille: A string of raised ("O") and flat (".") dots.

    Returns:
        The decoded text.

    Raises:
        TruncatedCellError: if the input is not a whole number of cells.
        UnknownCellError: if a cell is not in the letter or digit table in use.
        InvalidSequenceError: if a capital indicator is followed by another
            capital indicator, a number indicator, a space or a digit.
        DanglingCapitalError: if the input ends with a capital indicator.

    Examples:
        >>> braille_to_english(".....OO.....O.O...OO....")
        'Abc'

        >>> braille_to_english(".O.OOOO.....O.O...")
        '12'
    """
    cells = split_cells(braille)

    chars = []
    capital_pending = False
    in_number_mode = False
    for index, cell in enumerate(cells):
        if cell == CAPITAL_FOLLOWS:
            if capital_pending:
                raise InvalidSequenceError(cell, index, "capital indicator repeated")
            capital_pending = True
        elif cell == NUMBER_FOLLOWS:
            if capital_pending:
                raise InvalidSequenceError(cell, index, "capital indicator before number indicator")
            in_number_mode = True
        elif cell == SPACE_CELL:
            if capital_pending:
                raise InvalidSequenceError(cell, index, "capital indicator before space")
            chars.append(" ")
            in_number_mode = False
        elif in_number_mode:
            if cell not in BRAILLE_TO_DIGIT:
                raise UnknownCellError(cell, index, f"{describe_cell(cell)} is not a digit")
            if capital_pending:
                raise InvalidSequenceError(cell, index, "capital indicator before digit")
            chars.append(BRAILLE_TO_DIGIT[cell])
        else:
            if cell not in BRAILLE_TO_LETTER:
                raise UnknownCellError(cell, index, describe_cell(cell))
            letter = BRAILLE_TO_LETTER[cell]
            chars.append(letter.upper() if capital_pending else letter)
            capital_pending = False

    if capital_pending:
        last = len(cells) - 1
        raise DanglingCapitalError(cells[last], last)

    return "".join(chars)


__all__ = ("braille_to_english",)
