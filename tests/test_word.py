"""Tests for single-word shortening rules."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from crunch_str import Word, SUBSTITUTIONS


def new_word(s):
    return Word.from_token(s, 0)


def test_priority_is_length():
    """Priority of a plain word is its length."""
    assert new_word("abcd").priority() == 4
    assert new_word("abcd   ").priority() == 4
    print("✓ test_priority_is_length")


def test_priority_bonus_for_substitutions():
    """Substitutable words get a bonus, matched case-insensitively."""
    assert new_word("you").priority() == 13
    assert new_word("You").priority() == 13
    assert new_word("yours").priority() == 5
    print("✓ test_priority_bonus_for_substitutions")


def test_from_token_keeps_trailing_whitespace():
    word = Word.from_token("hello\t\n", 3)
    assert word.text == "hello"
    assert word.trailing_whitespace == "\t\n"
    assert word.order == 3
    assert len(word) == 5
    assert str(word) == "hello\t\n"
    print("✓ test_from_token_keeps_trailing_whitespace")


def test_removes_double_letters():
    word = new_word("bookkeeper")
    assert word.shorten() == 1
    assert word.shorten() == 1
    assert word.shorten() == 1
    assert word.text == "bokeper"
    print("✓ test_removes_double_letters")


def test_removes_inner_vowels():
    word = new_word("delicious")
    assert word.shorten() == 1
    assert word.text == "dlicious"
    print("✓ test_removes_inner_vowels")


def test_removes_trailing_vowels():
    word = new_word("the")
    assert word.shorten() == 1
    assert word.text == "th"
    print("✓ test_removes_trailing_vowels")


def test_removes_inner_consonants():
    word = new_word("qwerty")
    assert word.shorten() == 1  # the vowel
    assert word.shorten() == 1
    assert word.shorten() == 1
    assert word.text == "qty"
    print("✓ test_removes_inner_consonants")


def test_removes_punctuation():
    word = new_word("!?.,:")
    for _ in range(5):
        assert word.shorten() == 1, word.text
    assert word.text == ""
    assert word.shorten() == 0
    print("✓ test_removes_punctuation")


def test_substitutes_shorter_meanings():
    """Every table entry replaces the whole word and reports the saving."""
    for key, sub in SUBSTITUTIONS.items():
        word = new_word(key)
        assert word.shorten() == len(key) - len(sub)
        assert word.text == sub
    print("✓ test_substitutes_shorter_meanings")


def test_keeps_case_of_untouched_letters():
    word = new_word("Creative")
    word.shorten()
    assert word.text == "Crative"

    word = new_word("BOOK")
    word.shorten()
    assert word.text == "BOK"
    print("✓ test_keeps_case_of_untouched_letters")


def test_short_stuck_word_becomes_initial():
    """A word no rule can touch collapses to its initial and loses its spacing."""
    word = new_word("of ")
    assert word.shorten() == 0
    assert word.text == "O"
    assert str(word) == "O"

    word = new_word("a ")
    assert word.shorten() == 0
    assert str(word) == "A"
    print("✓ test_short_stuck_word_becomes_initial")


def test_long_stuck_word_is_left_alone():
    """Digits and non-ASCII letters are neither vowels nor consonants."""
    for text in ("12345", "café"):
        word = Word.from_token(text + " ", 0)
        assert word.shorten() == 0
        assert str(word) == text + " "
    print("✓ test_long_stuck_word_is_left_alone")


def test_sharp_s_initial_does_not_grow():
    word = Word.from_token("ß ", 0)
    assert len(word) == 2
    assert word.shorten() == 0
    assert word.text == "ß"
    assert str(word) == "ß"
    print("✓ test_sharp_s_initial_does_not_grow")


def test_length_is_utf8_bytes():
    word = Word.from_token("café ", 0)
    assert len(word) == 5
    assert word.priority() == 5
    print("✓ test_length_is_utf8_bytes")


def test_empty_word():
    word = Word.from_token("   ", 0)
    assert word.text == ""
    assert word.shorten() == 0
    assert str(word) == "   "
    print("✓ test_empty_word")


def test_punctuation_after_vowel():
    """'me,' loses its vowel, then the comma, then becomes an initial."""
    word = new_word("me,")
    assert word.shorten() == 1
    assert word.text == "m,"
    assert word.shorten() == 1
    assert word.text == "m"
    assert word.shorten() == 0
    assert word.text == "M"
    print("✓ test_punctuation_after_vowel")


if __name__ == "__main__":
    test_priority_is_length()
    test_priority_bonus_for_substitutions()
    test_from_token_keeps_trailing_whitespace()
    test_removes_double_letters()
    test_removes_inner_vowels()
    test_removes_trailing_vowels()
    test_removes_inner_consonants()
    test_removes_punctuation()
    test_substitutes_shorter_meanings()
    test_keeps_case_of_untouched_letters()
    test_short_stuck_word_becomes_initial()
    test_long_stuck_word_is_left_alone()
    test_sharp_s_initial_does_not_grow()
    test_length_is_utf8_bytes()
    test_empty_word()
    test_punctuation_after_vowel()
    print("\n🎉 All tests passed!")
