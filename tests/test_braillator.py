from __future__ import annotations

import pytest

from braillator import (
    CAPITAL_FOLLOWS,
    DIGIT_TO_BRAILLE,
    KNOWN_CELLS,
    LETTER_TO_BRAILLE,
    NUMBER_FOLLOWS,
    SPACE_CELL,
    DanglingCapitalError,
    InputKind,
    InvalidSequenceError,
    TruncatedCellError,
    UnclassifiableInputError,
    UnknownCellError,
    UnsupportedCharacterError,
    braille_to_english,
    classify,
    english_to_braille,
    split_cells,
    translate,
    translate_as,
)


def test_tables():
    assert len(LETTER_TO_BRAILLE) == 27
    assert len(set(LETTER_TO_BRAILLE.values())) == 27
    assert LETTER_TO_BRAILLE[" "] == SPACE_CELL == "......"

    for digit, letter in zip("123456789", "abcdefghi"):
        assert DIGIT_TO_BRAILLE[digit] == LETTER_TO_BRAILLE[letter]
    assert DIGIT_TO_BRAILLE["0"] == LETTER_TO_BRAILLE["j"]

    for control in (CAPITAL_FOLLOWS, NUMBER_FOLLOWS):
        assert control not in LETTER_TO_BRAILLE.values()
        assert control not in DIGIT_TO_BRAILLE.values()


def test_classify():
    assert classify("O.....") is InputKind.BRAILLE
    assert classify("O") is InputKind.BRAILLE
    assert classify(".O.OO") is InputKind.BRAILLE
    assert classify("hello") is InputKind.ENGLISH
    assert classify("Abc 123") is InputKind.ENGLISH
    assert classify("café") is InputKind.ENGLISH
    assert classify("hello!") is InputKind.OTHER
    assert classify("O.. x") is InputKind.OTHER
    assert classify("a\tb") is InputKind.OTHER
    assert classify("") is InputKind.OTHER


def test_encode_single_characters():
    assert english_to_braille("a") == "O....."
    assert english_to_braille("A") == ".....OO....."
    assert english_to_braille("1") == ".O.OOOO....."
    assert english_to_braille("0") == ".O.OOO.OOO.."
    assert english_to_braille(" ") == "......"


def test_encode_mixed_case_and_digits():
    assert (
        english_to_braille("Abc 123")
        == ".....OO.....O.O...OO...........O.OOOO.....O.O...OO...."
    )
    assert english_to_braille("42 a") == ".O.OOOOO.O..O.O.........O....."
    assert english_to_braille("Hello world") == (
        ".....OO.OO..O..O..O.O.O.O.O.O.O..OO........OOO.OO..OO.O.OOO.O.O.O.OO.O.."
    )


def test_encode_number_mode_scope():
    # One indicator per run of digits.
    assert english_to_braille("123") == NUMBER_FOLLOWS + "O.....O.O...OO...."
    # A letter ends the run, so the next digit needs a new indicator.
    assert english_to_braille("1a2") == (
        NUMBER_FOLLOWS + "O....." + "O....." + NUMBER_FOLLOWS + "O.O..."
    )
    # An uppercase letter after a digit still gets its capital indicator.
    assert english_to_braille("1A") == NUMBER_FOLLOWS + "O....." + CAPITAL_FOLLOWS + "O....."
    assert english_to_braille("1 2") == NUMBER_FOLLOWS + "O....." + SPACE_CELL + NUMBER_FOLLOWS + "O.O..."


def test_encode_unsupported_characters():
    for text, char, index in (
        ("hello!", "!", 5),
        ("a-b", "-", 1),
        ("tab\there", "\t", 3),
        ("café", "é", 3),
        ("É", "É", 0),
        ("٣", "٣", 0),  # arabic-indic digit three
        ("\u212a", "\u212a", 0),  # kelvin sign, lowercases to "k"
    ):
        with pytest.raises(UnsupportedCharacterError) as exc_info:
            english_to_braille(text)
        assert exc_info.value.char == char
        assert exc_info.value.index == index


def test_encode_invariants():
    for text in ("Abc 123", "42 a", "x1Y22 z 333Q", "The 3 Little Pigs", "a1b2c3"):
        braille = english_to_braille(text)
        assert len(braille) % 6 == 0

        digit_runs = sum(
            1 for i, ch in enumerate(text) if ch.isdigit() and (i == 0 or not text[i - 1].isdigit())
        )
        expected_cells = (
            sum(ch.isalpha() for ch in text)
            + sum(ch.isdigit() for ch in text)
            + text.count(" ")
            + sum(ch.isupper() for ch in text)
            + digit_runs
        )
        cells = split_cells(braille)
        assert len(cells) == expected_cells
        assert set(cells) <= KNOWN_CELLS


def test_decode():
    assert braille_to_english(".....OO.....O.O...OO....") == "Abc"
    assert braille_to_english(".O.OOOO.....O.O.........O.....") == "12 a"
    assert braille_to_english("O.....") == "a"
    assert braille_to_english(".O.OOO.OOO..") == "0"
    assert braille_to_english("......") == " "


def test_decode_number_mode_scope():
    # Number mode lasts until a space cell...
    assert braille_to_english(NUMBER_FOLLOWS + "O.....O....." + SPACE_CELL + "O.....") == "11 a"
    # ...or the end of the input.
    assert braille_to_english("O....." + NUMBER_FOLLOWS + "O.O...") == "a2"
    # A repeated indicator inside a run is harmless.
    assert braille_to_english(NUMBER_FOLLOWS + "O....." + NUMBER_FOLLOWS + "O.O...") == "12"


def test_decode_errors():
    with pytest.raises(TruncatedCellError):
        braille_to_english(".O.OO")
    with pytest.raises(TruncatedCellError):
        braille_to_english("O......")

    with pytest.raises(DanglingCapitalError):
        braille_to_english(".....O")
    with pytest.raises(DanglingCapitalError):
        braille_to_english("O..........O")

    with pytest.raises(InvalidSequenceError):
        braille_to_english(CAPITAL_FOLLOWS + CAPITAL_FOLLOWS + "O.....")
    with pytest.raises(InvalidSequenceError):
        braille_to_english(CAPITAL_FOLLOWS + NUMBER_FOLLOWS + "O.....")
    with pytest.raises(InvalidSequenceError):
        braille_to_english(CAPITAL_FOLLOWS + SPACE_CELL)
    with pytest.raises(InvalidSequenceError):
        braille_to_english(NUMBER_FOLLOWS + "O....." + CAPITAL_FOLLOWS + "O.....")

    # Six flat-and-raised dots that are not a letter.
    with pytest.raises(UnknownCellError) as exc_info:
        braille_to_english("O....." + "OOOOOO")
    assert exc_info.value.index == 1
    assert exc_info.value.cell == "OOOOOO"

    # "k" is a letter but not a digit.
    with pytest.raises(UnknownCellError):
        braille_to_english(NUMBER_FOLLOWS + "O...O.")


def test_round_trip_english():
    for text in ("a", "hello world", "the quick brown fox jumps over the lazy dog"):
        assert braille_to_english(english_to_braille(text)) == text

    for text in ("Abc 123", "42 a", "Hello World", "ABC", "Room 101", "x 9 Y 0", "7"):
        assert braille_to_english(english_to_braille(text)) == text


def test_round_trip_braille():
    for braille in (
        ".....OO.....O.O...OO....",
        ".O.OOOO.....O.O.........O.....",
        ".O.OOO.OOO..",
        "O.OO..O..O..O.O.O.O.O.O.O..OO.",
    ):
        assert english_to_braille(braille_to_english(braille)) == braille


def test_round_trip_braille_non_canonical():
    # Accepted by the decoder, but re-encoding gives the canonical form.
    for braille, text, canonical in (
        ("O.O..." + NUMBER_FOLLOWS, "b", "O.O..."),
        (NUMBER_FOLLOWS + NUMBER_FOLLOWS + "O.....", "1", NUMBER_FOLLOWS + "O....."),
        (NUMBER_FOLLOWS + "O....." + NUMBER_FOLLOWS + "O.O...", "12", NUMBER_FOLLOWS + "O.....O.O..."),
    ):
        assert braille_to_english(braille) == text
        assert english_to_braille(text) == canonical
        assert canonical != braille


def test_translate_as():
    assert translate_as("Ab", InputKind.ENGLISH) == ".....OO.....O.O..."
    assert translate_as(".....OO.....O.O...", InputKind.BRAILLE) == "Ab"
    with pytest.raises(UnclassifiableInputError):
        translate_as("Ab", InputKind.OTHER)


def test_translate():
    assert translate("Abc 123") == ".....OO.....O.O...OO...........O.OOOO.....O.O...OO...."
    assert translate(".....OO.....O.O...OO....") == "Abc"
    assert translate("42") == ".O.OOOOO.O..O.O..."

    with pytest.raises(UnclassifiableInputError):
        translate("hello!")
    with pytest.raises(UnclassifiableInputError):
        translate("")
    with pytest.raises(TruncatedCellError):
        translate(".O.OO")
    with pytest.raises(DanglingCapitalError):
        translate(".....O")
    with pytest.raises(UnsupportedCharacterError):
        translate("naïve")


def test_error_messages():
    with pytest.raises(UnsupportedCharacterError) as exc_info:
        english_to_braille("ab?")
    assert exc_info.value.kind == "UnsupportedCharacter"
    assert str(exc_info.value) == "no Braille cell for character: '?' at index 2"

    with pytest.raises(TruncatedCellError) as exc_info:
        braille_to_english(".O.OO")
    assert str(exc_info.value) == "Braille input length is not a multiple of 6: got 5 characters"

    with pytest.raises(DanglingCapitalError) as exc_info:
        braille_to_english(".....O")
    assert exc_info.value.index == 0
    assert "\n" not in str(exc_info.value)
