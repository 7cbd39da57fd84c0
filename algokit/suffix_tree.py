"""Online suffix tree construction (Ukkonen) with explicit tree positions."""

from __future__ import annotations

from dataclasses import dataclass, field

TERMINATOR = "$"


@dataclass(eq=False)
class Node:
    """A tree node; its incoming edge is labelled ``text[l:r]``."""

    parent: Node | None = None
    l: int = 0
    r: int = 0
    children: dict[str, Node] = field(default_factory=dict)
    link: Node | None = None

    @property
    def length(self) -> int:
        return self.r - self.l


@dataclass(frozen=True)
class State:
    """A position in the tree: ``index`` characters down the edge into ``node``."""

    node: Node
    index: int

    @classmethod
    def at(cls, node: Node) -> State:
        """The position exactly at ``node``."""
        return cls(node, node.length)

    @property
    def on_edge(self) -> bool:
        return 0 < self.index < self.node.length

    @property
    def in_parent(self) -> bool:
        return self.index == 0 and self.node.length != 0

    @property
    def in_node(self) -> bool:
        return self.index == self.node.length


class SuffixTree:
    """Suffix tree of ``text`` followed by a ``$`` terminator."""

    def __init__(self, text: str) -> None:
        if TERMINATOR in text:
            raise ValueError(f"text must not contain {TERMINATOR!r}")
        self.text = text + TERMINATOR
        self.root = Node()
        s = self.text
        n = len(s)
        state = State.at(self.root)
        for i in range(n):
            while True:
                moved = self.go_range(state, i, i + 1)
                if moved is not None:
                    state = moved
                    break
                node = self.split(state)
                node.children[s[i]] = Node(node, i, n)
                state = State.at(self.link(node))
                if node is self.root:
                    break

    def go(self, state: State, c: str) -> State | None:
        """Move one character down from ``state``, or None if impossible."""
        if state.in_node:
            child = state.node.children.get(c)
            return None if child is None else State(child, 1)
        if self.text[state.node.l + state.index] != c:
            return None
        return State(state.node, state.index + 1)

    def go_range(self, state: State, l: int, r: int) -> State | None:
        """Move down along ``text[l:r]``, checking only the first character of each edge."""
        s = self.text
        node, index = state.node, state.index
        while l < r:
            if index == node.length:
                child = node.children.get(s[l])
                if child is None:
                    return None
                node, index = child, 0
            if s[node.l + index] != s[l]:
                return None
            step = min(node.length - index, r - l)
            index += step
            l += step
        return State(node, index)

    def split(self, state: State) -> Node:
        """Return a node at ``state``, splitting its edge if needed."""
        if state.in_node:
            return state.node
        if state.in_parent:
            assert state.node.parent is not None
            return state.node.parent
        lower = state.node
        parent = lower.parent
        assert parent is not None
        middle = Node(parent, lower.l, lower.l + state.index)
        lower.l += state.index
        lower.parent = middle
        parent.children[self.text[middle.l]] = middle
        middle.children[self.text[lower.l]] = lower
        return middle

    def link(self, node: Node) -> Node:
        """Suffix link of ``node``, computed and cached on first use."""
        if node.link is None:
            if node is self.root:
                node.link = self.root
            else:
                parent = node.parent
                assert parent is not None
                target = self.go_range(
                    State.at(self.link(parent)), node.l + (parent is self.root), node.r
                )
                assert target is not None
                node.link = self.split(target)
        return node.link

    def state_link(self, state: State) -> State | None:
        """Position of the string at ``state`` with its first character removed."""
        if state.in_node:
            return State.at(self.link(state.node))
        parent = state.node.parent
        assert parent is not None
        if state.in_parent:
            return State.at(self.link(parent))
        start = state.node.l + (parent is self.root)
        return self.go_range(
            State.at(self.link(parent)), start, state.node.l + state.index
        )

    def contains(self, pattern: str) -> bool:
        """True if ``pattern`` occurs in the text (the terminator included)."""
        state: State | None = State.at(self.root)
        for c in pattern:
            assert state is not None
            state = self.go(state, c)
            if state is None:
                return False
        return True