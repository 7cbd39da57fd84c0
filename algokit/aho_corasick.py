"""Aho-Corasick automaton and a dynamic variant that accepts new words over time."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class _Node:
    parent: _Node | None = None
    char: str = ""
    children: dict[str, _Node] = field(default_factory=dict)
    transitions: dict[str, _Node] = field(default_factory=dict)
    suffix_link: _Node | None = None
    matches: int | None = None
    terminal: bool = False


class AhoCorasick:
    """Dictionary automaton with lazily computed suffix links and transitions.

    Links, transitions and match counts are cached, so every word should be
    added before the automaton is queried.
    """

    def __init__(self) -> None:
        self.root = _Node()

    def add(self, word: str) -> None:
        """Insert ``word`` into the dictionary."""
        node = self.root
        for c in word:
            child = node.children.get(c)
            if child is None:
                child = node.children[c] = _Node(node, c)
            node = child
        node.terminal = True

    def link(self, node: _Node) -> _Node:
        """Suffix link: the node of the longest proper suffix present in the trie."""
        if node.suffix_link is None:
            if node is self.root or node.parent is self.root:
                node.suffix_link = self.root
            else:
                assert node.parent is not None
                node.suffix_link = self.go(self.link(node.parent), node.char)
        return node.suffix_link

    def go(self, node: _Node, c: str) -> _Node:
        """Automaton transition from ``node`` on character ``c``."""
        target = node.transitions.get(c)
        if target is None:
            if c in node.children:
                target = node.children[c]
            elif node is self.root:
                target = self.root
            else:
                target = self.go(self.link(node), c)
            node.transitions[c] = target
        return target

    def count(self, node: _Node) -> int:
        """Number of dictionary words that end at this automaton state."""
        if node is self.root:
            return 0
        if node.matches is None:
            node.matches = int(node.terminal) + self.count(self.link(node))
        return node.matches

    def count_matches(self, text: str) -> int:
        """Total number of occurrences of dictionary words in ``text``."""
        node = self.root
        total = 0
        for c in text:
            node = self.go(node, c)
            total += self.count(node)
        return total

    def clear(self) -> None:
        """Forget every word."""
        self.root = _Node()


class DynamicAhoCorasick:
    """Word set supporting insertions between queries via binary grouping."""

    def __init__(self) -> None:
        self._groups: list[tuple[list[str], AhoCorasick]] = []

    def add(self, word: str) -> None:
        """Insert ``word``; groups are rebuilt like carries in binary addition."""
        words = [word]
        i = 0
        while i < len(self._groups) and self._groups[i][0]:
            group_words, automaton = self._groups[i]
            words.extend(group_words)
            group_words.clear()
            automaton.clear()
            i += 1
        if i == len(self._groups):
            self._groups.append(([], AhoCorasick()))
        group_words, automaton = self._groups[i]
        for w in words:
            automaton.add(w)
        group_words.extend(words)

    def count(self, text: str) -> int:
        """Total number of occurrences of the stored words in ``text``."""
        return sum(
            automaton.count_matches(text) for words, automaton in self._groups if words
        )