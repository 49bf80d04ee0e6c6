"""Compact text forms of values, shared by search and the shell."""

from __future__ import annotations

from .values import Value, VBool, VDict, VList, VNull, VNumber, VText

PREVIEW_LENGTH = 100
ELLIPSIS = "..."


def text_of(value: Value) -> str:
    """The natural string form of a value.

    Containers render as their count descriptor, never their contents.
    """
    if isinstance(value, VList):
        return f"Sequence({len(value.items)})"
    if isinstance(value, VDict):
        return f"Mapping({len(value.entries)} keys)"
    if isinstance(value, (VNull, VBool, VNumber, VText)):
        return str(value)
    raise TypeError(f"not a tree value: {value!r}")


def preview(value: Value, limit: int = PREVIEW_LENGTH) -> str:
    """Short human-readable form; strings longer than *limit* are truncated."""
    if isinstance(value, VText):
        if len(value.value) > limit:
            return value.value[:limit] + ELLIPSIS
        return value.value
    return text_of(value)
