from __future__ import annotations

from braillator.classify import InputKind, classify
from braillator.decoder import braille_to_english
from braillator.encoder import english_to_braille
from braillator.errors import UnclassifiableInputError


def translate_as(text: str, kind: InputKind) -> str:
    """Translate `text` in the direction given by an already computed `kind`."""
    if kind is InputKind.BRAILLE:
        return braille_to_english(text)
    elif kind is InputKind.ENGLISH:
        return english_to_braille(text)
    raise UnclassifiableInputError(repr(text) if text else "empty input")


def translate(text: str) -> str:
    """Translate Braille to English or English to Braille, whichever `text` is.

    Examples:
        >>> translate("Hi")
        '.....OO.OO...OO...'

        >>> translate(".....OO.OO...OO...")
        'Hi'
    """
    return translate_as(text, classify(text))


__all__ = ("translate", "translate_as")
