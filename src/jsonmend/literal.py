from __future__ import annotations

from dataclasses import dataclass

from .constants import BACKSLASH, QUOTE


@dataclass
class LiteralTracker:
    in_string: bool = False
    escaping: bool = False

    def consume(self, ch: str) -> bool:
        """Track one character; True means it belongs to a string literal."""
        if not self.in_string:
            if ch == QUOTE:
                self.in_string = True
                self.escaping = False
                return True
            return False

        if ch == BACKSLASH:
            self.escaping = not self.escaping
        elif ch == QUOTE and not self.escaping:
            self.in_string = False
            self.escaping = False
        else:
            self.escaping = False
        return True


def has_unterminated_literal(text: str) -> bool:
    tracker = LiteralTracker()
    for ch in text:
        tracker.consume(ch)
    return tracker.in_string
