"""Path resolution and in-place mutation for DocTree Core.

Paths are dot-separated mapping keys. ``""`` addresses the whole tree.
Numeric segments get no special treatment: ``a.0`` looks up the key ``"0"``
in a mapping and never indexes into a sequence.
"""

from __future__ import annotations

from .errors import NotASequenceError, PathError
from .values import Value, VDict, VList, _Missing, Missing


def split_path(path: str) -> list[str]:
    """Split *path* into segments; the empty path has none."""
    if path == "":
        return []
    return path.split(".")


def resolve(tree: Value, path: str) -> Value | _Missing:
    """Return the value at *path*, or ``Missing`` when any step fails."""
    current: Value = tree
    for key in split_path(path):
        if isinstance(current, VDict) and key in current.entries:
            current = current.entries[key]
        else:
            return Missing
    return current


def assign(tree: Value, path: str, value: Value) -> Value:
    """Set *value* at *path*, creating intermediate mappings as needed.

    Any missing or non-mapping intermediate is replaced by an empty VDict.
    The final key is overwritten regardless of its previous type.
    Returns *tree*, mutated in place.
    """
    keys = split_path(path)
    if not keys:
        return _replace_root(tree, value)
    if not isinstance(tree, VDict):
        raise PathError("Cannot assign into a tree whose root is not a mapping")

    current = tree
    for key in keys[:-1]:
        nxt = current.entries.get(key)
        if not isinstance(nxt, VDict):
            nxt = VDict()
            current.entries[key] = nxt
        current = nxt

    current.entries[keys[-1]] = value
    return tree


def _replace_root(tree: Value, value: Value) -> Value:
    # Root identity is preserved; only its contents change.
    if isinstance(tree, VDict) and isinstance(value, VDict):
        entries = dict(value.entries)
        tree.entries.clear()
        tree.entries.update(entries)
        return tree
    if isinstance(tree, VList) and isinstance(value, VList):
        tree.items[:] = list(value.items)
        return tree
    raise PathError("The empty path can only replace a mapping or sequence root "
                    "with a value of the same kind")


def remove(tree: Value, path: str) -> Value:
    """Delete the key at *path*; a path that does not exist is a no-op.

    Returns *tree*, mutated in place.
    """
    keys = split_path(path)
    if not keys:
        return tree

    current = tree
    for key in keys[:-1]:
        if not isinstance(current, VDict):
            return tree
        nxt = current.entries.get(key)
        if nxt is None:
            return tree
        current = nxt

    if isinstance(current, VDict):
        current.entries.pop(keys[-1], None)
    return tree


def append(tree: Value, path: str, value: Value) -> Value:
    """Append *value* to the sequence at *path*.

    Raises NotASequenceError when *path* is missing or not a VList.
    """
    target = resolve(tree, path)
    if not isinstance(target, VList):
        raise NotASequenceError(path)
    target.items.append(value)
    return tree
