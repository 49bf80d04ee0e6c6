"""Structural summaries: a bounded sketch of a tree, and aggregate stats."""

from __future__ import annotations

from dataclasses import dataclass

from .values import Value, VDict, VList, type_name

SEQUENCE_SAMPLE = 3
MAPPING_KEYS = 20

# A Shape is plain JSON-ready data: str, list or dict of Shapes.
Shape = object


def summarize_structure(tree: Value, max_depth: int = 3) -> Shape:
    """Return a lossy structural summary of *tree*.

    - At the depth limit: ``"{Mapping with K keys}"``, ``"{Sequence(N)}"``
      or the scalar type name
    - Scalars: type name (``null``, ``bool``, ``number``, ``string``)
    - Sequences: ``["Sequence(N):", [...]]`` over the first three items,
      header ``"Sequence(N) - sample:"`` when there are more
    - Mappings: first twenty keys, the rest folded into ``"..."``
    """
    return _summarize(tree, max_depth, 0)


def _summarize(value: Value, max_depth: int, depth: int) -> Shape:
    if depth >= max_depth:
        if isinstance(value, VDict):
            return f"{{Mapping with {len(value.entries)} keys}}"
        if isinstance(value, VList):
            return f"{{Sequence({len(value.items)})}}"
        return type_name(value)

    if isinstance(value, VList):
        if not value.items:
            return []
        n = len(value.items)
        sample = [_summarize(v, max_depth, depth + 1) for v in value.items[:SEQUENCE_SAMPLE]]
        header = f"Sequence({n}) - sample:" if n > SEQUENCE_SAMPLE else f"Sequence({n}):"
        return [header, sample]

    if isinstance(value, VDict):
        result: dict[str, Shape] = {}
        keys = list(value.entries)
        for key in keys[:MAPPING_KEYS]:
            result[key] = _summarize(value.entries[key], max_depth, depth + 1)
        if len(keys) > MAPPING_KEYS:
            result["..."] = f"{len(keys) - MAPPING_KEYS} more keys"
        return result

    return type_name(value)


@dataclass
class Stats:
    type: str
    size: int = 0
    depth: int = 0
    keys: int = 0


def summarize_stats(tree: Value) -> Stats:
    """Aggregate counts over the whole tree.

    ``size`` sums the children of every container, ``keys`` the mapping keys
    only, and ``depth`` is the deepest level at which a container sits.
    """
    stats = Stats(type=type_name(tree))

    def walk(value: Value, depth: int) -> None:
        if isinstance(value, VList):
            children = value.items
        elif isinstance(value, VDict):
            children = list(value.entries.values())
            stats.keys += len(children)
        else:
            return
        stats.depth = max(stats.depth, depth)
        stats.size += len(children)
        for child in children:
            walk(child, depth + 1)

    walk(tree, 0)
    return stats
