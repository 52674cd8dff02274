"""Helpers for pulling usable content out of free-form model text."""

import json
import re
from typing import Any, TypeVar

_OPENING_FENCE = re.compile(r"^```[\w+-]*[ \t]*\n?")
_CLOSING_FENCE = re.compile(r"\n?```\s*$")
_DECODER = json.JSONDecoder()

T = TypeVar("T", dict, list)


def strip_code_fences(text: str) -> str:
    """Remove one surrounding markdown code fence (any language tag), if present."""
    text = text.strip()
    text = _OPENING_FENCE.sub("", text, count=1)
    text = _CLOSING_FENCE.sub("", text, count=1)
    return text.strip()


def first_json_value(raw: str, kind: type[T]) -> T | None:
    """Return the first well-formed JSON value of *kind* (dict or list) in *raw*.

    Surrounding prose and code fences are skipped. Returns None when no
    candidate decodes.
    """
    opener = "{" if kind is dict else "["
    start = raw.find(opener)
    while start != -1:
        try:
            value: Any
            value, _end = _DECODER.raw_decode(raw, start)
        except json.JSONDecodeError:
            value = None
        if isinstance(value, kind):
            return value
        start = raw.find(opener, start + 1)
    return None
