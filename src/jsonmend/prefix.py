from __future__ import annotations

from .constants import EMPTY_OBJECT_PREFIX


def strip_empty_object_prefix(text: str) -> str:
    # Only the first "{}" goes, and only when something follows it.
    if text.startswith(EMPTY_OBJECT_PREFIX) and len(text) > len(EMPTY_OBJECT_PREFIX):
        return text[len(EMPTY_OBJECT_PREFIX):]
    return text
