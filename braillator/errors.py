from __future__ import annotations


class TranslationError(Exception):
    """Base class for every error raised while translating.

    Each subclass names one error kind. The string form is a single line
    made of the message and, when given, its context.
    """

    kind: str = "TranslationError"
    message: str = "translation failed"

    def __init__(self, context: str | None = None) -> None:
        self.context = context
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.context:
            return f"{self.message}: {self.context}"
        return self.message


class MissingArgumentsError(TranslationError):
    kind = "MissingArguments"
    message = "missing required cli arguments"


class UnclassifiableInputError(TranslationError):
    kind = "UnclassifiableInput"
    message = "the supplied arguments are not Alphanumeric or Braille"


class UnsupportedCharacterError(TranslationError):
    kind = "UnsupportedCharacter"
    message = "no Braille cell for character"

    def __init__(self, char: str, index: int) -> None:
        self.char = char
        self.index = index
        super().__init__(f"{char!r} at index {index}")


class TruncatedCellError(TranslationError):
    kind = "TruncatedCell"
    message = "Braille input length is not a multiple of 6"

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"got {length} characters")


class _CellError(TranslationError):
    """An error tied to one cell of a Braille input."""

    def __init__(self, cell: str, index: int, detail: str | None = None) -> None:
        self.cell = cell
        self.index = index
        context = f"cell {index} {cell!r}"
        if detail:
            context = f"{context} ({detail})"
        super().__init__(context)


class UnknownCellError(_CellError):
    kind = "UnknownCell"
    message = "invalid braille alphabet token"


class InvalidSequenceError(_CellError):
    kind = "InvalidSequence"
    message = "invalid control cell sequence"


class DanglingCapitalError(_CellError):
    kind = "DanglingCapital"
    message = "input ends with an unresolved capital indicator"


__all__ = (
    "TranslationError",
    "MissingArgumentsError",
    "UnclassifiableInputError",
    "UnsupportedCharacterError",
    "TruncatedCellError",
    "UnknownCellError",
    "InvalidSequenceError",
    "DanglingCapitalError",
)
