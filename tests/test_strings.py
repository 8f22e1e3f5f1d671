import pytest

from codekata.strings import (
    is_anagram,
    is_isomorphic,
    is_palindrome,
    longest_common_prefix,
    maximum_length,
    roman_to_int,
    str_str,
)

_NUMERALS = [
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
]


def _to_roman(number):
    parts = []
    for value, symbol in _NUMERALS:
        count, number = divmod(number, value)
        parts.append(symbol * count)
    return "".join(parts)


def _count_overlapping(text, sub):
    return sum(1 for start in range(len(text) - len(sub) + 1) if text.startswith(sub, start))


@pytest.mark.parametrize("text", ["A man, a plan, a canal: Panama", " ", "No 'x' in Nixon", "0P0"])
def test_is_palindrome_true(text):
    assert is_palindrome(text)


@pytest.mark.parametrize("text", ["race a car", "0P", "ab"])
def test_is_palindrome_false(text):
    assert not is_palindrome(text)


@pytest.mark.parametrize("s, t", [("egg", "add"), ("paper", "title"), ("", "")])
def test_is_isomorphic_true(s, t):
    assert is_isomorphic(s, t)
    assert is_isomorphic(t, s)


@pytest.mark.parametrize("s, t", [("foo", "bar"), ("badc", "baba"), ("ab", "aa")])
def test_is_isomorphic_false(s, t):
    assert not is_isomorphic(s, t)
    assert not is_isomorphic(t, s)


def test_is_isomorphic_length_mismatch():
    assert not is_isomorphic("abc", "ab")


def test_is_anagram_true():
    assert is_anagram("anagram", "nagaram")


def test_is_anagram_false():
    assert not is_anagram("rat", "car")
    assert not is_anagram("ab", "abb")


def test_is_anagram_reversed_word():
    word = "listen"
    assert is_anagram(word, word[::-1])


def test_longest_common_prefix_worked_example():
    assert longest_common_prefix(["flower", "flow", "flight"]) == "fl"


def test_longest_common_prefix_none_shared():
    assert not longest_common_prefix(["dog", "racecar", "car"])


@pytest.mark.parametrize(
    "words", [["interspecies", "interstellar", "interstate"], ["same", "same"], ["solo"]]
)
def test_longest_common_prefix_is_maximal_prefix(words):
    prefix = longest_common_prefix(words)
    assert all(word.startswith(prefix) for word in words)
    longer = {word[: len(prefix) + 1] for word in words}
    assert len(longer) > 1 or any(len(word) == len(prefix) for word in words)


def test_longest_common_prefix_empty_raises():
    with pytest.raises(ValueError):
        longest_common_prefix([])


@pytest.mark.parametrize("haystack, needle", [("leetcode", "leeto"), ("a", "aa"), ("", "x")])
def test_str_str_missing(haystack, needle):
    assert str_str(haystack, needle) == -1


@pytest.mark.parametrize("text", ["aaaa", "abcaba", "abcccccdddd", "aaabbbccc", "aaa"])
def test_maximum_length_is_longest_thrice_special(text):
    length = maximum_length(text)
    chars = set(text)
    assert any(_count_overlapping(text, ch * length) >= 3 for ch in chars)
    assert not any(_count_overlapping(text, ch * (length + 1)) >= 3 for ch in chars)


def test_maximum_length_none():
    assert maximum_length("abcdef") == -1


@pytest.mark.parametrize("number", [1, 3, 4, 9, 14, 40, 58, 90, 400, 1994, 2024, 3999])
def test_roman_to_int_round_trip(number):
    assert roman_to_int(_to_roman(number)) == number


def test_roman_to_int_empty():
    assert not roman_to_int("")


def test_roman_to_int_invalid_character():
    with pytest.raises(ValueError):
        roman_to_int("XIZ")