from __future__ import annotations

from typing import Callable

from .brackets import balance_brackets
from .commas import strip_trailing_commas
from .literal import has_unterminated_literal
from .metrics import RepairMetrics
from .models import FixName, RepairOutcome
from .prefix import strip_empty_object_prefix

FIXERS: dict[FixName, Callable[[str], str]] = {
    FixName.PREFIX: strip_empty_object_prefix,
    FixName.COMMAS: strip_trailing_commas,
    FixName.BRACKETS: balance_brackets,
}


def apply_fixes(
    text: str,
    fixes: list[FixName],
    *,
    source: str = "<string>",
    metrics: RepairMetrics | None = None,
) -> RepairOutcome:
    current = text
    applied: list[FixName] = []
    for fix in fixes:
        repaired = FIXERS[fix](current)
        if repaired != current:
            applied.append(fix)
        current = repaired

    outcome = RepairOutcome(
        source=source,
        original=text,
        text=current,
        applied=applied,
        unterminated_literal=has_unterminated_literal(current),
    )
    if metrics:
        metrics.record_outcome(outcome)
    return outcome
