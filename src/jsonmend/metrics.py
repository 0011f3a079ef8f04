from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from .models import RepairOutcome


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class RepairMetrics:
    started_at: datetime = field(default_factory=_utcnow)
    total_inputs: int = 0
    changed_inputs: int = 0
    unterminated_inputs: int = 0
    total_chars: int = 0
    fix_counts: Counter[str] = field(default_factory=Counter)
    failed_sources: list[str] = field(default_factory=list)

    def record_outcome(self, outcome: RepairOutcome) -> None:
        self.total_inputs += 1
        self.total_chars += len(outcome.original)
        if outcome.changed:
            self.changed_inputs += 1
        if outcome.unterminated_literal:
            self.unterminated_inputs += 1
        for fix in outcome.applied:
            self.fix_counts[fix.value] += 1

    def record_failure(self, source: str) -> None:
        self.failed_sources.append(source)

    def elapsed_seconds(self) -> float:
        return max(0.0, (_utcnow() - self.started_at).total_seconds())

    def format_summary(self) -> str:
        lines = [
            "--- Repair Summary ---",
            f"Duration: {format_duration(timedelta(seconds=self.elapsed_seconds()))}",
            f"Inputs: {self.total_inputs} (changed={self.changed_inputs}, chars={self.total_chars})",
            f"Unterminated literals: {self.unterminated_inputs}",
        ]
        if self.fix_counts:
            ranked = sorted(self.fix_counts.items(), key=lambda item: item[1], reverse=True)
            lines.append("Fixes: " + ", ".join(f"{k}={v}" for k, v in ranked if v > 0))
        if self.failed_sources:
            lines.append(f"Failed sources: {', '.join(self.failed_sources)}")
        return "\n".join(lines)


def format_duration(d: timedelta) -> str:
    total = max(0.0, d.total_seconds())
    minutes, seconds = divmod(total, 60)
    if minutes >= 1:
        return f"{int(minutes)}m{seconds:04.1f}s"
    return f"{seconds:.1f}s"
