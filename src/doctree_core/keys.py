"""Key enumeration: every reachable path string, depth-first."""

from __future__ import annotations

from .values import Value, VDict, VList

SEQUENCE_LIMIT = 10


def enumerate_keys(tree: Value, max_depth: int = 5) -> list[str]:
    """List paths in pre-order, down to *max_depth* container levels.

    Mapping children are ``parent.key``; sequence children are ``parent[i]``.
    Sequences longer than ten emit ten index paths and one
    ``parent[...N more items]`` marker.
    """
    out: list[str] = []
    _walk(tree, "", max_depth, 0, out)
    return out


def _walk(value: Value, prefix: str, max_depth: int, depth: int, out: list[str]) -> None:
    if depth >= max_depth:
        return

    if isinstance(value, VList):
        for i, item in enumerate(value.items[:SEQUENCE_LIMIT]):
            item_path = f"{prefix}[{i}]"
            out.append(item_path)
            _walk(item, item_path, max_depth, depth + 1, out)
        extra = len(value.items) - SEQUENCE_LIMIT
        if extra > 0:
            out.append(f"{prefix}[...{extra} more items]")
        return

    if isinstance(value, VDict):
        for key, item in value.entries.items():
            full = f"{prefix}.{key}" if prefix else key
            out.append(full)
            _walk(item, full, max_depth, depth + 1, out)
