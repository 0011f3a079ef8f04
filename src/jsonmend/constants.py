from __future__ import annotations

OPENERS = "{["
CLOSERS = "}]"
CLOSER_FOR = {"{": "}", "[": "]"}
OPENER_FOR = {"}": "{", "]": "["}

QUOTE = '"'
BACKSLASH = "\\"
COMMA = ","
EMPTY_OBJECT_PREFIX = "{}"

DEFAULT_FIX_ORDER = "prefix,commas,brackets"
FIXES_ENV_VAR = "JSONMEND_FIXES"
HTTP_TOKEN_ENV_VAR = "JSONMEND_HTTP_TOKEN"

DEFAULT_TIMEOUT_SECONDS = 30
STDIN_SOURCE = "-"
