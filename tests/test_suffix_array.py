import random

import pytest

from algokit.suffix_array import lcp_array, suffix_array


def _random_strings():
    rng = random.Random(3)
    return ["".join(rng.choice("abc") for _ in range(rng.randint(1, 40))) for _ in range(30)]


def test_banana():
    sa = suffix_array("banana")
    assert sa == [5, 3, 1, 0, 4, 2]
    assert lcp_array("banana", sa) == [1, 3, 0, 0, 2]


def test_empty_string():
    assert suffix_array("") == []
    assert lcp_array("", []) == []


@pytest.mark.parametrize("s", _random_strings())
def test_suffixes_strictly_increasing(s):
    sa = suffix_array(s)
    assert sorted(sa) == list(range(len(s)))
    for a, b in zip(sa, sa[1:]):
        assert s[a:] < s[b:]


@pytest.mark.parametrize("s", _random_strings())
def test_lcp_lengths(s):
    sa = suffix_array(s)
    lcp = lcp_array(s, sa)
    assert len(lcp) == len(s) - 1
    for (a, b), k in zip(zip(sa, sa[1:]), lcp):
        assert s[a : a + k] == s[b : b + k]
        if a + k < len(s) and b + k < len(s):
            assert s[a + k] != s[b + k]


def test_single_character_repeated():
    s = "aaaa"
    sa = suffix_array(s)
    assert sa == list(range(len(s)))[::-1]


def test_lcp_length_mismatch():
    with pytest.raises(ValueError):
        lcp_array("abc", [0, 1])