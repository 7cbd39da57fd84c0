import random

import pytest

from algokit.implicit_treap import ImplicitTreap


def test_reverse_middle_of_ten():
    treap = ImplicitTreap(seed=0)
    for i in range(10):
        treap.insert(i, i)
    assert list(treap) == list(range(10))
    treap.reverse(3, 7)
    expected = list(range(10))
    expected[3:7] = expected[3:7][::-1]
    assert list(treap) == expected


def test_construct_from_values():
    values = ["a", "b", "c", "d"]
    treap = ImplicitTreap(values, seed=3)
    assert list(treap) == values
    assert len(treap) == len(values)


def test_cut_and_paste():
    treap = ImplicitTreap(range(8), seed=5)
    piece = treap.cut(2, 5)
    assert list(piece) == [2, 3, 4]
    assert list(treap) == [0, 1, 5, 6, 7]
    treap.paste(4, piece)
    assert list(treap) == [0, 1, 5, 6, 2, 3, 4, 7]
    assert len(piece) == 0


def _apply_random_step(rng, treap, model, step, cut_pieces, cut_segments):
    op = rng.randrange(4)
    if op == 0 or not model:
        i = rng.randint(0, len(model))
        treap.insert(i, step)
        model.insert(i, step)
    elif op == 1:
        i = rng.randrange(len(model))
        treap.erase(i)
        del model[i]
    elif op == 2:
        l = rng.randint(0, len(model))
        r = rng.randint(l, len(model))
        treap.reverse(l, r)
        model[l:r] = model[l:r][::-1]
    else:
        l = rng.randint(0, len(model))
        r = rng.randint(l, len(model))
        piece = treap.cut(l, r)
        segment = model[l:r]
        del model[l:r]
        cut_pieces.append(list(piece))
        cut_segments.append(segment)
        i = rng.randint(0, len(model))
        treap.paste(i, piece)
        model[i:i] = segment


@pytest.mark.parametrize("seed", range(4))
def test_random_operations_match_list(seed):
    rng = random.Random(seed)
    treap = ImplicitTreap(seed=seed)
    model = []
    cut_pieces = []
    cut_segments = []
    for step in range(300):
        _apply_random_step(rng, treap, model, step, cut_pieces, cut_segments)
        assert list(treap) == model
        assert len(treap) == len(model)
    assert cut_pieces == cut_segments


def test_index_errors():
    treap = ImplicitTreap([1, 2, 3])
    with pytest.raises(IndexError):
        treap.insert(5, 0)
    with pytest.raises(IndexError):
        treap.erase(3)
    with pytest.raises(IndexError):
        treap.reverse(2, 1)
    with pytest.raises(IndexError):
        treap.cut(0, 4)


def test_paste_into_self_rejected():
    treap = ImplicitTreap([1, 2])
    with pytest.raises(ValueError):
        treap.paste(0, treap)