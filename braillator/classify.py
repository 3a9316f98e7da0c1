from __future__ import annotations

from enum import Enum

from braillator.base import FLAT, RAISED


class InputKind(Enum):
    BRAILLE = "braille"
    ENGLISH = "english"
    OTHER = "other"


def is_braille(s: str) -> bool:
    """Return whether every character of a non-empty string is a raised or flat dot.

    Whether the length is a whole number of cells is left to the decoder.
    """
    return bool(s) and all(ch in (RAISED, FLAT) for ch in s)


def is_english(s: str) -> bool:
    """Return whether a non-empty string holds only letters, digits and spaces.

    Letters and digits are checked by their Unicode category, so accented
    letters still classify as English and are rejected later by the encoder.
    """
    return bool(s) and all(ch.isalpha() or ch.isnumeric() or ch == " " for ch in s)


def classify(s: str) -> InputKind:
    """Decide which direction a string should be translated in.

    Braille is tested first: a string such as "O" is Braille, not English.

    Examples:
        >>> classify("O.....")
        <InputKind.BRAILLE: 'braille'>

        >>> classify("Hello world")
        <InputKind.ENGLISH: 'english'>

        >>> classify("hello!")
        <InputKind.OTHER: 'other'>
    """
    if is_braille(s):
        return InputKind.BRAILLE
    if is_english(s):
        return InputKind.ENGLISH
    return InputKind.OTHER


__all__ = ("InputKind", "classify", "is_braille", "is_english")
