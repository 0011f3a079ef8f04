from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class FixName(str, Enum):
    PREFIX = "prefix"
    COMMAS = "commas"
    BRACKETS = "brackets"

    @classmethod
    def parse(cls, value: str | None) -> "FixName":
        v = (value or "").strip().lower().replace("_", "-")
        if v in {"prefix", "empty-object-prefix"}:
            return cls.PREFIX
        if v in {"commas", "trailing-commas"}:
            return cls.COMMAS
        if v in {"brackets", "braces", "balance"}:
            return cls.BRACKETS
        raise ValueError(f"Invalid fix name: {value}")


@dataclass(frozen=True)
class RepairOutcome:
    source: str
    original: str
    text: str
    applied: list[FixName] = field(default_factory=list)
    unterminated_literal: bool = False

    @property
    def changed(self) -> bool:
        return self.text != self.original
