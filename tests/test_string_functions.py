import random

import pytest

from algokit.string_functions import prefix_function, z_function


def _random_strings():
    rng = random.Random(11)
    return ["".join(rng.choice("ab") for _ in range(rng.randint(1, 30))) for _ in range(40)]


def test_prefix_function_pinned():
    assert prefix_function("abab") == [0, 0, 1, 2]


def test_z_function_pinned():
    assert z_function("aaaa") == [0, 3, 2, 1]


def test_empty_inputs():
    assert prefix_function("") == []
    assert z_function("") == []


@pytest.mark.parametrize("s", _random_strings())
def test_prefix_function_borders(s):
    p = prefix_function(s)
    assert len(p) == len(s)
    for i, k in enumerate(p):
        assert k <= i
        assert s[:k] == s[i - k + 1 : i + 1]
        longer = k + 1
        if longer <= i:
            assert s[:longer] != s[i - longer + 1 : i + 1]


@pytest.mark.parametrize("s", _random_strings())
def test_z_function_matches(s):
    z = z_function(s)
    assert z[0] == 0
    for i in range(1, len(s)):
        k = z[i]
        assert s[:k] == s[i : i + k]
        if i + k < len(s):
            assert s[k] != s[i + k]


def test_works_on_lists():
    data = [1, 2, 1, 2, 1]
    assert prefix_function(data) == prefix_function("ababa")
    assert z_function(data) == z_function("ababa")