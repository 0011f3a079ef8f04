from __future__ import annotations

from dataclasses import dataclass, field

from .constants import CLOSERS, COMMA
from .literal import LiteralTracker


@dataclass
class CommaState:
    literal: LiteralTracker = field(default_factory=LiteralTracker)
    out: list[str] = field(default_factory=list)
    position: int = 0
    skipping: bool = False

    @property
    def in_string(self) -> bool:
        return self.literal.in_string

    @property
    def escaping(self) -> bool:
        return self.literal.escaping

    def text(self) -> str:
        return "".join(self.out)


class TrailingCommaScanner:
    """Single forward pass over ``text`` that drops commas with nothing left to separate.

    A comma is trailing when the next character that is neither whitespace nor
    another comma is a closing bracket, or when no such character exists.
    Once a trailing comma is found the scanner skips the rest of the comma run
    and keeps the whitespace around it, so only the comma characters vanish.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.state = CommaState()
        self._lookahead_index = -1
        self._lookahead_char: str | None = None

    @property
    def done(self) -> bool:
        return self.state.position >= len(self.text)

    def step(self) -> None:
        s = self.state
        i = s.position
        ch = self.text[i]
        s.position += 1

        if s.literal.consume(ch):
            s.out.append(ch)
            return

        if s.skipping:
            if ch == COMMA:
                return
            if not ch.isspace():
                s.skipping = False
            s.out.append(ch)
            return

        if ch == COMMA:
            nxt = self._next_meaningful(i + 1)
            if nxt is None or nxt in CLOSERS:
                s.skipping = True
                return

        s.out.append(ch)

    def run(self) -> CommaState:
        while not self.done:
            self.step()
        return self.state

    def _next_meaningful(self, start: int) -> str | None:
        # Every index before the cached hit is whitespace or a comma, so any
        # start inside that span resolves to the same character.
        if start <= self._lookahead_index:
            return self._lookahead_char
        j = start
        n = len(self.text)
        while j < n and (self.text[j] == COMMA or self.text[j].isspace()):
            j += 1
        self._lookahead_index = j
        self._lookahead_char = self.text[j] if j < n else None
        return self._lookahead_char


def strip_trailing_commas(text: str) -> str:
    state = TrailingCommaScanner(text).run()
    if state.in_string:
        return text
    return state.text()
