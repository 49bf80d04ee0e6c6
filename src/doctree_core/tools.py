"""Tool calls: load a document, run one engine operation, report an Outcome.

Every function here returns an ``Outcome`` instead of raising; a
``DocTreeError`` or ``OSError`` becomes ``Outcome(ok=False, message="Error: ...")``.
Mutating tools only write the file after the operation succeeded.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass
from typing import Callable

from .config import DocTreeConfig
from .convert import to_native
from .document import Document, validate_file
from .errors import DocTreeError
from .keys import enumerate_keys
from .paths import append, assign, remove, resolve
from .search import SearchOptions, search
from .shape import summarize_stats, summarize_structure
from .values import Value, _Missing

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]


@dataclass
class Outcome:
    ok: bool
    message: str
    data: object = None


def _report(data: object) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def _run(action: str, fn: Callable[[], Outcome]) -> Outcome:
    try:
        return fn()
    except (DocTreeError, OSError) as exc:
        logger.warning("%s failed: %s", action, exc)
        return Outcome(False, f"Error: {exc}")


# ---------------------------------------------------------------------------
# Read-only tools
# ---------------------------------------------------------------------------

def read_document(file_path: PathLike, fmt: str | None = None,
                  config: DocTreeConfig | None = None) -> Outcome:
    def op() -> Outcome:
        doc = Document.load(file_path, fmt, config)
        native = to_native(doc.tree)
        return Outcome(True, _report(native), doc.tree)
    return _run("read", op)


def get_value(file_path: PathLike, path: str, fmt: str | None = None,
              config: DocTreeConfig | None = None) -> Outcome:
    def op() -> Outcome:
        doc = Document.load(file_path, fmt, config)
        value = resolve(doc.tree, path)
        if isinstance(value, _Missing):
            return Outcome(True, f"Path not found: {path}", value)
        return Outcome(True, _report(to_native(value)), value)
    return _run("get", op)


def list_keys(file_path: PathLike, max_depth: int | None = None, fmt: str | None = None,
              config: DocTreeConfig | None = None) -> Outcome:
    config = config or DocTreeConfig()

    def op() -> Outcome:
        doc = Document.load(file_path, fmt, config)
        depth = config.keys_depth if max_depth is None else max_depth
        keys = enumerate_keys(doc.tree, depth)
        return Outcome(True, _report(keys), keys)
    return _run("keys", op)


def structure(file_path: PathLike, max_depth: int | None = None, fmt: str | None = None,
              config: DocTreeConfig | None = None) -> Outcome:
    config = config or DocTreeConfig()

    def op() -> Outcome:
        doc = Document.load(file_path, fmt, config)
        depth = config.structure_depth if max_depth is None else max_depth
        shape = summarize_structure(doc.tree, depth)
        return Outcome(True, _report(shape), shape)
    return _run("structure", op)


def summary(file_path: PathLike, fmt: str | None = None,
            config: DocTreeConfig | None = None) -> Outcome:
    def op() -> Outcome:
        doc = Document.load(file_path, fmt, config)
        stats = summarize_stats(doc.tree)
        return Outcome(True, _report(asdict(stats)), stats)
    return _run("summary", op)


def search_document(file_path: PathLike, keyword: str, options: SearchOptions | None = None,
                    fmt: str | None = None, config: DocTreeConfig | None = None) -> Outcome:
    config = config or DocTreeConfig()
    options = options or SearchOptions(max_results=config.max_results,
                                       preview_length=config.preview_length)

    def op() -> Outcome:
        doc = Document.load(file_path, fmt, config)
        matches = search(doc.tree, keyword, options)
        report = {
            "keyword": keyword,
            "totalResults": len(matches),
            "results": [asdict(m) for m in matches],
        }
        return Outcome(True, _report(report), matches)
    return _run("search", op)


def validate_document(file_path: PathLike, fmt: str | None = None,
                      config: DocTreeConfig | None = None) -> Outcome:
    def op() -> Outcome:
        valid, message = validate_file(file_path, fmt, config)
        return Outcome(valid, message)
    return _run("validate", op)


# ---------------------------------------------------------------------------
# Mutating tools
# ---------------------------------------------------------------------------

def _mutate(action: str, file_path: PathLike, fmt: str | None, config: DocTreeConfig | None,
            change: Callable[[Value], object], message: str) -> Outcome:
    config = config or DocTreeConfig()

    def op() -> Outcome:
        doc = Document.load(file_path, fmt, config)
        change(doc.tree)
        doc.save(indent=config.indent)
        return Outcome(True, message)
    return _run(action, op)


def set_value(file_path: PathLike, path: str, value: Value, fmt: str | None = None,
              config: DocTreeConfig | None = None) -> Outcome:
    return _mutate("set", file_path, fmt, config,
                   lambda tree: assign(tree, path, value),
                   f"Successfully set value at path: {path}")


def delete_value(file_path: PathLike, path: str, fmt: str | None = None,
                 config: DocTreeConfig | None = None) -> Outcome:
    return _mutate("delete", file_path, fmt, config,
                   lambda tree: remove(tree, path),
                   f"Successfully deleted path: {path}")


def append_value(file_path: PathLike, path: str, value: Value, fmt: str | None = None,
                 config: DocTreeConfig | None = None) -> Outcome:
    return _mutate("append", file_path, fmt, config,
                   lambda tree: append(tree, path, value),
                   f"Successfully appended value to sequence at: {path}")


def create_document(file_path: PathLike, tree: Value, fmt: str | None = None,
                    config: DocTreeConfig | None = None) -> Outcome:
    config = config or DocTreeConfig()

    def op() -> Outcome:
        written = Document.create(file_path, tree, fmt).save(indent=config.indent)
        return Outcome(True, f"Successfully created file: {written}")
    return _run("create", op)


def minify_document(file_path: PathLike, output_path: PathLike | None = None,
                    fmt: str | None = None, config: DocTreeConfig | None = None) -> Outcome:
    def op() -> Outcome:
        doc = Document.load(file_path, fmt, config)
        written = doc.save(output_path, compact=True)
        return Outcome(True, f"Successfully minified {doc.format.name.upper()} to: {written}")
    return _run("minify", op)
