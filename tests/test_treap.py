import random

import pytest

from algokit.treap import Treap


@pytest.mark.parametrize("seed", range(4))
def test_iterates_in_sorted_order(seed):
    rng = random.Random(seed)
    keys = [rng.randint(-50, 50) for _ in range(200)]
    treap = Treap(seed)
    for key in keys:
        treap.insert(key)
    assert list(treap) == sorted(keys)


def test_erase_removes_all_duplicates():
    treap = Treap(1)
    keys = [3, 1, 3, 2, 3, 5]
    for key in keys:
        treap.insert(key)
    treap.erase(3)
    assert list(treap) == sorted(k for k in keys if k != 3)


def test_erase_missing_key_keeps_contents():
    treap = Treap(2)
    for key in (10, 20, 30):
        treap.insert(key)
    treap.erase(15)
    assert list(treap) == [10, 20, 30]


def test_random_inserts_and_erases_match_model():
    rng = random.Random(9)
    treap = Treap(9)
    model = []
    for _ in range(300):
        key = rng.randint(0, 30)
        if rng.random() < 0.6:
            treap.insert(key)
            model.append(key)
        else:
            treap.erase(key)
            model = [k for k in model if k != key]
        assert list(treap) == sorted(model)


def test_empty_treap_is_empty():
    treap = Treap()
    treap.erase(4)
    assert list(treap) == []


def test_result_independent_of_seed():
    keys = list(range(50, 0, -3))
    a, b = Treap(1), Treap(2)
    for key in keys:
        a.insert(key)
        b.insert(key)
    assert list(a) == list(b) == sorted(keys)