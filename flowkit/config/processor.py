"""Pre-processing of raw configuration documents."""

from __future__ import annotations

import json
from typing import Any

_FIELDS = ("accounts", "contracts", "networks", "deployments", "emulators")

_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _field_for(key: str) -> str | None:
    if key in _FIELDS:
        return key
    lowered = key.lower()
    return next((name for name in _FIELDS if name == lowered), None)


def _normalise(value: Any) -> Any:
    """Sort object keys and print integral numbers without a fraction."""
    if isinstance(value, dict):
        return {key: _normalise(value[key]) for key in sorted(value)}
    if isinstance(value, list):
        return [_normalise(item) for item in value]
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return int(value)
    return value


def processor_run(raw: bytes) -> bytes:
    """Keep only the known top-level sections and re-encode them compactly.

    Invalid documents become an empty object; empty account sections and
    null sections are dropped.
    """
    try:
        document = json.loads(raw)
    except (ValueError, UnicodeDecodeError):
        document = None

    sections: dict[str, Any] = {}
    if isinstance(document, dict):
        for key, value in document.items():
            name = _field_for(key)
            if name is not None:
                sections[name] = value

    output: dict[str, Any] = {}
    for name in _FIELDS:
        value = sections.get(name)
        if name == "accounts":
            if not isinstance(value, dict) or not value:
                continue
            value = {
                account: entry if isinstance(entry, dict) else None
                for account, entry in value.items()
            }
        elif value is None:
            continue
        output[name] = _normalise(value)

    text = json.dumps(output, separators=(",", ":"), ensure_ascii=False)
    for char, escaped in _ESCAPES.items():
        text = text.replace(char, escaped)
    return text.encode("utf-8")