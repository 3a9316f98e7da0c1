from __future__ import annotations

import argparse
import sys
import textwrap
from functools import partial
from pathlib import Path
from typing import Sequence

from braillator.cells import split_cells
from braillator.classify import InputKind, classify
from braillator.errors import MissingArgumentsError, TranslationError
from braillator.render import braille_to_grid, braille_to_image
from braillator.translator import translate_as


def join_arguments(args: Sequence[str]) -> str:
    """Join command line words with single spaces and trim the result.

    Raises:
        MissingArgumentsError: if nothing but whitespace is left.
    """
    text = " ".join(args).strip()
    if not text:
        raise MissingArgumentsError()
    return text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="braillator",
        description="Translate between English and Braille.",
        usage=textwrap.dedent(
            """
            Translate English text to Braille, or Braille back to English.
            The direction is detected from the input: text made only of "O" and "."
            is read as Braille, text made of letters, digits and spaces as English.

              Examples:

                Translate English to Braille:
                $ braillator Hello world

                # Translate Braille to English:
                $ braillator .....OO.OO...OO...

                # Show the dots of each cell below the translation:
                $ braillator Abc 123 --grid

                # Save a picture of the Braille cells:
                $ braillator Abc 123 --image abc.png
            """.strip()
        ),
        add_help=True,
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="The text to translate. Several words are joined with single spaces.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Output logs verbosely",
    )
    parser.add_argument(
        "-g",
        "--grid",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Write the Braille cells as a grid of dots to stderr",
    )
    parser.add_argument(
        "-i",
        "--image",
        type=Path,
        default=None,
        help="Save a picture of the Braille cells to this file",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_intermixed_args(argv)
    log = partial(print, file=sys.stderr) if args.verbose else lambda message: None

    try:
        text = join_arguments(args.text)
    except MissingArgumentsError as e:
        print(f"invalid args: {e}", file=sys.stderr)
        sys.exit(1)

    kind = classify(text)
    log(f"Input classified as {kind.value}")

    try:
        result = translate_as(text, kind)
    except TranslationError as e:
        print(f"error: {e.kind}: {e}", file=sys.stderr)
        sys.exit(1)

    braille = text if kind is InputKind.BRAILLE else result
    log(f"Translated {len(split_cells(braille))} cells")
    print(result)

    if args.grid:
        print(braille_to_grid(braille), file=sys.stderr)

    if (image_file := args.image) is not None:
        log(f"Writing image to {image_file}")
        braille_to_image(braille).save(image_file)
        log(f"Image written to {image_file}")


if __name__ == "__main__":
    main()
