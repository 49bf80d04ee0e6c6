"""Native-data conversion: Python objects ↔ Value, and literal parsing."""

from __future__ import annotations

import datetime as dt
import json
import math
import re

from .values import Value, VBool, VDict, VList, VNull, VNumber, VText

_NUMBER_RE = re.compile(r"^-?\d+(\.\d+)?([eE][-+]?\d+)?$")


def from_native(obj: object) -> Value:
    """Convert decoded Python data into a Value tree.

    - ``None`` → VNull
    - ``bool`` → VBool (checked before numbers)
    - ``int`` / ``float`` → VNumber
    - dates, times and datetimes → VText in ISO-8601 form
    - ``dict`` → VDict (keys stringified, order kept)
    - ``list`` / ``tuple`` → VList
    - anything else → VText of its ``str()``
    """
    if obj is None:
        return VNull()
    if isinstance(obj, bool):
        return VBool(obj)
    if isinstance(obj, (int, float)):
        return VNumber(float(obj))
    if isinstance(obj, str):
        return VText(obj)
    if isinstance(obj, (dt.datetime, dt.date, dt.time)):
        return VText(obj.isoformat())
    if isinstance(obj, dict):
        return VDict({str(k): from_native(v) for k, v in obj.items()})
    if isinstance(obj, (list, tuple)):
        return VList([from_native(v) for v in obj])
    return VText(str(obj))


def to_native(value: Value) -> object:
    """Convert a Value tree back into plain Python data.

    Integral numbers come back as ``int`` so encoders do not write ``1.0``.
    """
    if isinstance(value, VNull):
        return None
    if isinstance(value, VBool):
        return value.value
    if isinstance(value, VNumber):
        v = value.value
        if math.isfinite(v) and v == int(v):
            return int(v)
        return v
    if isinstance(value, VText):
        return value.value
    if isinstance(value, VList):
        return [to_native(v) for v in value.items]
    if isinstance(value, VDict):
        return {k: to_native(v) for k, v in value.entries.items()}
    raise TypeError(f"not a tree value: {value!r}")


def parse_literal(text: str) -> Value:
    """Interpret user-typed text as a Value.

    JSON literals (``42``, ``true``, ``null``, ``[1, 2]``, ``{"a": 1}``,
    ``"quoted"``) are decoded; anything else is kept as plain text.
    """
    stripped = text.strip()
    if _NUMBER_RE.match(stripped):
        return VNumber(float(stripped))
    try:
        return from_native(json.loads(stripped))
    except ValueError:
        return VText(text)
