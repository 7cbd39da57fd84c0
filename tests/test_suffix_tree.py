from itertools import product

import pytest

from algokit.suffix_tree import State, SuffixTree

TEXTS = ["", "a", "aa", "banana", "abracadabra", "mississippi", "abcabxabcd"]


def substrings(text):
    return {text[i:j] for i in range(len(text)) for j in range(i + 1, len(text) + 1)}


def node_label(tree, node):
    parts = []
    while node is not tree.root:
        parts.append(tree.text[node.l : node.r])
        node = node.parent
    return "".join(reversed(parts))


def state_label(tree, state):
    if state.index == state.node.length:
        return node_label(tree, state.node)
    return node_label(tree, state.node.parent) + tree.text[
        state.node.l : state.node.l + state.index
    ]


def walk(tree, word):
    state = State.at(tree.root)
    for c in word:
        state = tree.go(state, c)
        if state is None:
            return None
    return state


def leaves(node):
    if not node.children:
        return 1
    return sum(leaves(child) for child in node.children.values())


@pytest.mark.parametrize("text", TEXTS)
def test_contains_exactly_the_substrings(text):
    tree = SuffixTree(text)
    present = substrings(text)
    alphabet = sorted(set(text)) + ["z"]
    for length in range(1, 4):
        for chars in product(alphabet, repeat=length):
            word = "".join(chars)
            assert tree.contains(word) == (word in present)


@pytest.mark.parametrize("text", TEXTS)
def test_one_leaf_per_suffix(text):
    tree = SuffixTree(text)
    assert leaves(tree.root) == len(text) + 1


@pytest.mark.parametrize("text", TEXTS)
def test_walk_reaches_state_labelled_by_the_word(text):
    tree = SuffixTree(text)
    for sub in substrings(text):
        assert state_label(tree, walk(tree, sub)) == sub


@pytest.mark.parametrize("text", ["banana", "abracadabra", "mississippi"])
def test_state_link_drops_first_character(text):
    tree = SuffixTree(text)
    for sub in substrings(text):
        linked = tree.state_link(walk(tree, sub))
        assert state_label(tree, linked) == sub[1:]


def test_terminator_in_text_is_rejected():
    with pytest.raises(ValueError):
        SuffixTree("a$b")


def test_go_with_missing_character_returns_none():
    tree = SuffixTree("abc")
    assert tree.go(State.at(tree.root), "z") is None
    assert tree.go_range(State.at(tree.root), 0, 0) == State.at(tree.root)


def test_split_and_link_at_root():
    tree = SuffixTree("abab")
    assert tree.split(State.at(tree.root)) is tree.root
    assert tree.link(tree.root) is tree.root
    assert tree.contains("")


def test_internal_node_links_point_to_suffix():
    tree = SuffixTree("banana")
    stack = [tree.root]
    while stack:
        node = stack.pop()
        stack.extend(node.children.values())
        if node is tree.root or not node.children:
            continue
        assert node_label(tree, tree.link(node)) == node_label(tree, node)[1:]