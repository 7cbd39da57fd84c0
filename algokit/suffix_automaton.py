"""Suffix automaton with end-position counts."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class State:
    """A state of the automaton: a class of substrings sharing end positions."""

    length: int = 0
    link: State | None = None
    next: dict[str, State] = field(default_factory=dict)
    endpos: int = 0


class SuffixAutomaton:
    """Minimal automaton recognising every substring of the text built so far."""

    def __init__(self, text: str = "") -> None:
        self.root = State()
        self.last = self.root
        self.states: list[State] = []
        self.extend(text)

    def extend(self, text: str) -> None:
        """Append every character of ``text``."""
        for c in text:
            self.extend_char(c)

    def extend_char(self, c: str) -> None:
        """Append one character."""
        cur = State(length=self.last.length + 1, endpos=1)
        self.states.append(cur)
        p: State | None = self.last
        while p is not None and c not in p.next:
            p.next[c] = cur
            p = p.link
        self.last = cur
        if p is None:
            cur.link = self.root
            return
        q = p.next[c]
        if p.length + 1 == q.length:
            cur.link = q
            return
        clone = State(length=p.length + 1, link=q.link, next=dict(q.next))
        while p is not None and p.next.get(c) is q:
            p.next[c] = clone
            p = p.link
        cur.link = q.link = clone
        self.states.append(clone)

    def count_endpos(self) -> None:
        """Fill ``endpos`` with the number of occurrences of each state's substrings.

        Call once, after the whole text has been added.
        """
        for state in sorted(self.states, key=lambda s: s.length, reverse=True):
            assert state.link is not None
            state.link.endpos += state.endpos