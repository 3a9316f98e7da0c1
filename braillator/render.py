from __future__ import annotations

from typing import TYPE_CHECKING

from braillator.base import CELL_COLS, CELL_ROWS, coords_cell_index
from braillator.cells import cell_to_dots, split_cells

if TYPE_CHECKING:
    from PIL.Image import Image


def braille_to_grid(braille: str, separator: str = " ") -> str:
    """Draw Braille cells as a three line grid of dots.

    Args:
        braille: A cell-aligned string of raised ("O") and flat (".") dots.
        separator: The text placed between neighbouring cells.

    Returns:
        Three lines, one per dot row, without a trailing newline.

    Examples:
        >>> print(braille_to_grid(".....OO....."))
        .. O.
        .. ..
        .O ..
    """
    cells = split_cells(braille)
    lines = []
    for row in range(CELL_ROWS):
        start = row * CELL_COLS
        lines.append(separator.join(cell[start : start + CELL_COLS] for cell in cells))
    return "\n".join(lines)


def braille_to_image(
    braille: str,
    dot_radius: int = 4,
    dot_spacing: int = 4,
    cell_spacing: int = 12,
    margin: int = 8,
) -> Image:
    """Draw Braille cells as an image, one circle per dot position.

    Raised dots are filled black; flat positions are drawn as a light outline
    so the shape of each cell stays visible.

    Args:
        braille: A cell-aligned string of raised ("O") and flat (".") dots.
        dot_radius: The radius of each dot, in pixels.
        dot_spacing: The gap between neighbouring dots of one cell, in pixels.
        cell_spacing: The gap between neighbouring cells, in pixels.
        margin: The blank border around the drawing, in pixels.

    Returns:
        An RGB Pillow image.
    """
    try:
        from PIL import Image, ImageDraw
    except ImportError as e:
        raise ImportError(
            "ImportError while trying to import Pillow."
            "\nImage previews require the Pillow library to be installed:"
            "\n    pip install Pillow"
        ) from e

    cells = split_cells(braille)
    pitch = 2 * dot_radius + dot_spacing
    cell_width = CELL_COLS * pitch - dot_spacing
    cell_height = CELL_ROWS * pitch - dot_spacing

    width = 2 * margin + len(cells) * cell_width + max(len(cells) - 1, 0) * cell_spacing
    height = 2 * margin + cell_height
    image = Image.new("RGB", (width, height), color="white")
    draw = ImageDraw.Draw(image)

    for n, cell in enumerate(cells):
        dots = cell_to_dots(cell)
        left = margin + n * (cell_width + cell_spacing)
        for (col, row), index in coords_cell_index.items():
            x = left + col * pitch
            y = margin + row * pitch
            box = (x, y, x + 2 * dot_radius, y + 2 * dot_radius)
            if dots[index]:
                draw.ellipse(box, fill="black")
            else:
                draw.ellipse(box, outline=(200, 200, 200))

    return image


__all__ = ("braille_to_grid", "braille_to_image")
