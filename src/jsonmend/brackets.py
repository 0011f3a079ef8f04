from __future__ import annotations

from dataclasses import dataclass, field

from .constants import CLOSER_FOR, CLOSERS, OPENER_FOR, OPENERS
from .literal import LiteralTracker


@dataclass
class BracketState:
    literal: LiteralTracker = field(default_factory=LiteralTracker)
    stack: list[str] = field(default_factory=list)
    out: list[str] = field(default_factory=list)
    position: int = 0
    edited: bool = False

    @property
    def in_string(self) -> bool:
        return self.literal.in_string

    def feed(self, ch: str) -> None:
        self.position += 1
        if self.literal.consume(ch):
            self.out.append(ch)
            return

        if ch in OPENERS:
            self.stack.append(ch)
            self.out.append(ch)
            return

        if ch in CLOSERS:
            if not self.stack:
                # orphan closer
                self.edited = True
                return
            opener = self.stack.pop()
            if opener != OPENER_FOR[ch]:
                self.edited = True
            self.out.append(CLOSER_FOR[opener])
            return

        self.out.append(ch)

    def closers(self) -> str:
        return "".join(CLOSER_FOR[opener] for opener in reversed(self.stack))

    def result(self) -> str:
        return "".join(self.out) + self.closers()


def scan_brackets(text: str, state: BracketState | None = None) -> BracketState:
    current = state or BracketState()
    for ch in text:
        current.feed(ch)
    return current


def balance_brackets(text: str) -> str:
    """Close missing brackets, drop orphan closers and fix mismatched ones.

    Input that ends inside a string literal is returned untouched: a truncated
    string body cannot be closed safely.
    """
    state = scan_brackets(text)
    if state.in_string:
        return text
    if not state.edited and not state.stack:
        return text
    return state.result()
