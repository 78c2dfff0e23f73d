"""Logging helpers with redaction."""

import re
from typing import Any

_SENSITIVE_KEYS = re.compile(r"(token|secret|api[_-]?key|password|authorization)", re.IGNORECASE)

REDACTED = "***REDACTED***"


def redact_payload(payload: Any) -> Any:
    """Return a copy of ``payload`` with sensitive keys masked, recursively."""
    if isinstance(payload, dict):
        redacted: dict[Any, Any] = {}
        for key, value in payload.items():
            if isinstance(key, str) and _SENSITIVE_KEYS.search(key):
                redacted[key] = REDACTED
            else:
                redacted[key] = redact_payload(value)
        return redacted
    if isinstance(payload, list):
        return [redact_payload(item) for item in payload]
    return payload
