from __future__ import annotations

import os
import sys
from pathlib import Path

from .constants import DEFAULT_FIX_ORDER, FIXES_ENV_VAR, STDIN_SOURCE
from .models import FixName


def parse_fix_list(raw: str | None) -> list[FixName]:
    input_text = (raw or DEFAULT_FIX_ORDER).strip()
    out: list[FixName] = []
    for token in input_text.split(","):
        if not token.strip():
            continue
        fix = FixName.parse(token)
        if fix in out:
            raise ValueError(f"Fix listed more than once: {fix.value}")
        out.append(fix)
    if not out:
        raise ValueError("At least one fix is required")
    return out


def resolve_fixes(options: list[str] | None) -> list[FixName]:
    if options:
        return parse_fix_list(",".join(options))
    return parse_fix_list(os.getenv(FIXES_ENV_VAR))


def read_source(source: str) -> str:
    if source == STDIN_SOURCE:
        return sys.stdin.read()
    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"Input file does not exist: {path}")
    return path.read_text(encoding="utf-8")


def write_output(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
