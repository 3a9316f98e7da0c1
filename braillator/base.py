from typing import Final

CELL_WIDTH: Final[int] = 6
CELL_COLS: Final[int] = 2
CELL_ROWS: Final[int] = 3

RAISED: Final[str] = "O"
FLAT: Final[str] = "."

SPACE_CELL: Final[str] = "......"
CAPITAL_FOLLOWS: Final[str] = ".....O"  # dot 6
NUMBER_FOLLOWS: Final[str] = ".O.OOO"  # dots 3-4-5-6

# Cell characters are laid out row by row, so (column, row) -> string index.
coords_cell_index: Final[dict[tuple[int, int], int]] = {
    (0, 0): 0,  # dot 1
    (1, 0): 1,  # dot 4
    (0, 1): 2,  # dot 2
    (1, 1): 3,  # dot 5
    (0, 2): 4,  # dot 3
    (1, 2): 5,  # dot 6
}
cell_index_dot_number: Final[dict[int, int]] = {0: 1, 1: 4, 2: 2, 3: 5, 4: 3, 5: 6}

LETTER_TO_BRAILLE: Final[dict[str, str]] = {
    "a": "O.....",
    "b": "O.O...",
    "c": "OO....",
    "d": "OO.O..",
    "e": "O..O..",
    "f": "OOO...",
    "g": "OOOO..",
    "h": "O.OO..",
    "i": ".OO...",
    "j": ".OOO..",
    "k": "O...O.",
    "l": "O.O.O.",
    "m": "OO..O.",
    "n": "OO.OO.",
    "o": "O..OO.",
    "p": "OOO.O.",
    "q": "OOOOO.",
    "r": "O.OOO.",
    "s": ".OO.O.",
    "t": ".OOOO.",
    "u": "O...OO",
    "v": "O.O.OO",
    "w": ".OOO.O",
    "x": "OO..OO",
    "y": "OO.OOO",
    "z": "O..OOO",
    " ": SPACE_CELL,
}

# Digits share their cells with a-j; NUMBER_FOLLOWS tells them apart.
DIGIT_TO_BRAILLE: Final[dict[str, str]] = {
    digit: LETTER_TO_BRAILLE[letter] for digit, letter in zip("1234567890", "abcdefghij")
}

BRAILLE_TO_LETTER: Final[dict[str, str]] = {v: k for k, v in LETTER_TO_BRAILLE.items()}
BRAILLE_TO_DIGIT: Final[dict[str, str]] = {v: k for k, v in DIGIT_TO_BRAILLE.items()}

CONTROL_CELLS: Final[dict[str, str]] = {
    CAPITAL_FOLLOWS: "CAPITAL_FOLLOWS",
    NUMBER_FOLLOWS: "NUMBER_FOLLOWS",
}
KNOWN_CELLS: Final[frozenset[str]] = frozenset(
    (*LETTER_TO_BRAILLE.values(), *DIGIT_TO_BRAILLE.values(), *CONTROL_CELLS)
)

__all__ = (
    "CELL_WIDTH",
    "CELL_COLS",
    "CELL_ROWS",
    "RAISED",
    "FLAT",
    "SPACE_CELL",
    "CAPITAL_FOLLOWS",
    "NUMBER_FOLLOWS",
    "coords_cell_index",
    "cell_index_dot_number",
    "LETTER_TO_BRAILLE",
    "DIGIT_TO_BRAILLE",
    "BRAILLE_TO_LETTER",
    "BRAILLE_TO_DIGIT",
    "CONTROL_CELLS",
    "KNOWN_CELLS",
)
