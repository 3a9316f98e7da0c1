from __future__ import annotations

from typing import Iterator

from bitarray import bitarray

from braillator.base import (
    BRAILLE_TO_LETTER,
    CELL_WIDTH,
    CONTROL_CELLS,
    FLAT,
    RAISED,
    SPACE_CELL,
    cell_index_dot_number,
)
from braillator.errors import TruncatedCellError

_TO_BITS = str.maketrans({RAISED: "1", FLAT: "0"})
_FROM_BITS = str.maketrans({"1": RAISED, "0": FLAT})


def is_cell(s: str) -> bool:
    """Return whether `s` is exactly one cell of raised and flat dots."""
    return len(s) == CELL_WIDTH and all(ch in (RAISED, FLAT) for ch in s)


def iter_cells(s: str) -> Iterator[str]:
    """Yield consecutive cells of a Braille string.

    The string must already be cell-aligned; see `split_cells` for the
    checked version.
    """
    for start in range(0, len(s), CELL_WIDTH):
        yield s[start : start + CELL_WIDTH]


def split_cells(s: str) -> list[str]:
    """Split a Braille string into its cells.

    Raises:
        TruncatedCellError: if the length of `s` is not a multiple of the cell width.

    Examples:
        >>> split_cells(".....OO.....")
        ['.....O', 'O.....']
    """
    if len(s) % CELL_WIDTH:
        raise TruncatedCellError(len(s))
    return list(iter_cells(s))


def cell_to_dots(cell: str) -> bitarray:
    """Return the dot pattern of a cell, one bit per cell position.

    Examples:
        >>> cell_to_dots("O.O...")
        bitarray('101000')
    """
    if not is_cell(cell):
        raise ValueError(f"Invalid cell {cell!r}")
    return bitarray(cell.translate(_TO_BITS))


def dots_to_cell(dots: bitarray) -> str:
    """Return the cell string for a dot pattern made by `cell_to_dots`."""
    if len(dots) != CELL_WIDTH:
        raise ValueError(f"Dot pattern must have {CELL_WIDTH} bits, got {len(dots)}")
    return dots.to01().translate(_FROM_BITS)


def raised_dots(cell: str) -> tuple[int, ...]:
    """Return the Braille dot numbers (1 to 6) raised in a cell, in ascending order.

    Examples:
        >>> raised_dots(".O.OOO")
        (3, 4, 5, 6)
    """
    dots = cell_to_dots(cell)
    return tuple(sorted(cell_index_dot_number[i] for i, bit in enumerate(dots) if bit))


def describe_cell(cell: str) -> str:
    """Return a short human-readable name for a cell, for diagnostics."""
    if cell in CONTROL_CELLS:
        return CONTROL_CELLS[cell]
    if cell == SPACE_CELL:
        return "space"
    if cell in BRAILLE_TO_LETTER:
        return BRAILLE_TO_LETTER[cell]
    if not is_cell(cell):
        return "malformed"
    return "dots " + "-".join(map(str, raised_dots(cell)))


__all__ = (
    "is_cell",
    "iter_cells",
    "split_cells",
    "cell_to_dots",
    "dots_to_cell",
    "raised_dots",
    "describe_cell",
)
