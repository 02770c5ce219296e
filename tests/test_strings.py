import pytest

from drillbook.strings import (
    is_anagram,
    largest_odd_prefix,
    remove_outer_parentheses,
    reverse_words,
)


def test_anagram_source_example_fails():
    assert is_anagram("RULES", "LESRT") is False


def test_anagram_integer_example():
    assert is_anagram("INTEGER", "TEGERNI") is True


@pytest.mark.parametrize("word", ["", "a", "listen", "aabbcc"])
def test_anagram_of_reversal(word):
    assert is_anagram(word, word[::-1]) is True


def test_anagram_counts_matter():
    assert is_anagram("aab", "abb") is False


def test_largest_odd_prefix_source_example():
    assert largest_odd_prefix("50497348") == "504973"


@pytest.mark.parametrize("s", ["", "2468", "0"])
def test_largest_odd_prefix_none(s):
    assert largest_odd_prefix(s) == ""


@pytest.mark.parametrize("s", ["35", "50497348", "1", "1234"])
def test_largest_odd_prefix_invariants(s):
    prefix = largest_odd_prefix(s)
    assert s.startswith(prefix)
    assert int(prefix[-1]) % 2 == 1
    assert all(int(c) % 2 == 0 for c in s[len(prefix):])


def test_remove_outer_parentheses_source_example():
    assert remove_outer_parentheses("(()())(())()") == "()()()"


def test_remove_outer_parentheses_single_pairs():
    assert remove_outer_parentheses("()()()") == ""


def test_remove_outer_parentheses_nested_wrap():
    inner = "(())()"
    assert remove_outer_parentheses("(" + inner + ")") == inner


def test_reverse_words_source_example():
    text = "TUF is great for interview preparation"
    assert reverse_words(text) == "preparation interview for great is TUF"


@pytest.mark.parametrize("text", ["", "one", "a b c", "two  spaces"])
def test_reverse_words_round_trip(text):
    assert reverse_words(reverse_words(text)) == text


def test_reverse_words_keeps_words():
    text = "alpha beta gamma"
    assert reverse_words(text).split(" ") == text.split(" ")[::-1]