import pytest

from classicalgos.text import (
    CharacterCounts,
    count_characters,
    is_palindrome,
    is_vowel,
    reverse_string,
    word_frequencies,
    zigzag,
)


def test_zigzag_worked_example():
    assert zigzag("ILOVECODING", 3) == "IEILVCDNOOG"


@pytest.mark.parametrize("rows", [1, 2, 3, 5, 20])
def test_zigzag_is_a_permutation(rows):
    text = "ILOVECODING"
    assert sorted(zigzag(text, rows)) == sorted(text)


def test_zigzag_single_row_is_identity():
    assert zigzag("hello", 1) == "hello"


def test_zigzag_rows_beyond_length_is_identity():
    assert zigzag("abc", 10) == "abc"


def test_zigzag_rejects_zero_rows():
    with pytest.raises(ValueError):
        zigzag("abc", 0)


@pytest.mark.parametrize("char", list("aeiouAEIOU"))
def test_is_vowel_true(char):
    assert is_vowel(char) is True


@pytest.mark.parametrize("char", list("bzY1 "))
def test_is_vowel_false(char):
    assert is_vowel(char) is False


def test_is_vowel_requires_one_character():
    with pytest.raises(ValueError):
        is_vowel("ab")


def test_count_vowels_only():
    line = "aeiouAEIOU"
    assert count_characters(line) == CharacterCounts(vowels=len(line))


def test_count_each_category():
    vowels, consonants, numbers, spaces = "aE", "bcD", "0123", "  "
    counts = count_characters(vowels + consonants + numbers + spaces)
    assert counts == CharacterCounts(
        vowels=len(vowels),
        consonants=len(consonants),
        digits=len(numbers),
        spaces=len(spaces),
    )


def test_count_ignores_other_characters():
    assert count_characters("!?.\té") == CharacterCounts()


def test_counts_never_exceed_length():
    line = "C++ Programming 2024!"
    counts = count_characters(line)
    total = counts.vowels + counts.consonants + counts.digits + counts.spaces
    assert total <= len(line)


@pytest.mark.parametrize("word", ["a", "ab", "level", "xyz"])
def test_mirrored_text_is_palindrome(word):
    assert is_palindrome(word + word[::-1])
    assert is_palindrome(word + word[-2::-1])


def test_not_palindrome():
    assert is_palindrome("ab") is False


def test_reverse_string_round_trip():
    text = "Hello, World"
    assert reverse_string(reverse_string(text)) == text
    assert reverse_string(text)[0] == text[-1]


def test_word_frequencies_example():
    assert word_frequencies("I am a a boy") == {"I": 1, "am": 1, "a": 2, "boy": 1}


def test_word_frequencies_sentence():
    result = word_frequencies("I am a good boy I love coding")
    assert result["I"] == 2
    assert list(result) == ["I", "am", "a", "good", "boy", "love", "coding"]


def test_word_frequencies_empty():
    assert word_frequencies("   ") == {}