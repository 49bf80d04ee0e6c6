"""DocTreeRepl — interactive editing session over one document.

Also provides the ``doctree`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import json
import logging
import os
import shlex
import sys
from dataclasses import asdict
from typing import IO

from .config import DocTreeConfig
from .convert import parse_literal, to_native
from .document import Document
from .errors import DocTreeError
from .keys import enumerate_keys
from .paths import append, assign, remove, resolve
from .preview import preview
from .search import SearchOptions, search
from .shape import summarize_stats, summarize_structure
from .values import Value, VBool, VDict, VList, VNull, VNumber, VText, _Missing

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# DocTreeRepl class (programmatic use)
# ---------------------------------------------------------------------------

class DocTreeRepl:
    """Stateful session holding the currently open document.

    Usage::

        repl = DocTreeRepl()
        repl.open("config.yaml")
        repl.get("database.port")        # → VNumber(5432.0)
        repl.set("database.port", VNumber(6543))
        repl.save()
    """

    def __init__(self, config: DocTreeConfig | None = None) -> None:
        self.config = config or DocTreeConfig()
        self.doc: Document | None = None
        self.dirty = False

    @property
    def tree(self) -> Value:
        if self.doc is None:
            raise DocTreeError("No document open (use :open FILE or :new FILE)")
        return self.doc.tree

    # -- Session --------------------------------------------------------

    def open(self, path: str, fmt: str | None = None) -> Document:
        self.doc = Document.load(path, fmt, self.config)
        self.dirty = False
        return self.doc

    def new(self, path: str, fmt: str | None = None) -> Document:
        self.doc = Document.create(path, fmt=fmt)
        self.dirty = True
        return self.doc

    def save(self, path: str | None = None) -> str:
        if self.doc is None:
            raise DocTreeError("No document open")
        written = self.doc.save(path, indent=self.config.indent)
        self.dirty = False
        return str(written)

    def dumps(self) -> str:
        if self.doc is None:
            raise DocTreeError("No document open")
        return self.doc.dumps(indent=self.config.indent)

    def reset(self) -> None:
        """Close the current document without saving."""
        self.doc = None
        self.dirty = False

    # -- Engine operations ----------------------------------------------

    def get(self, path: str) -> Value | _Missing:
        return resolve(self.tree, path)

    def set(self, path: str, value: Value) -> None:
        assign(self.tree, path, value)
        self.dirty = True

    def delete(self, path: str) -> None:
        remove(self.tree, path)
        self.dirty = True

    def append(self, path: str, value: Value) -> None:
        append(self.tree, path, value)
        self.dirty = True

    def keys(self, max_depth: int | None = None) -> list[str]:
        depth = self.config.keys_depth if max_depth is None else max_depth
        return enumerate_keys(self.tree, depth)

    def structure(self, max_depth: int | None = None) -> object:
        depth = self.config.structure_depth if max_depth is None else max_depth
        return summarize_structure(self.tree, depth)

    def search(self, keyword: str, **flags: bool) -> list:
        options = SearchOptions(max_results=self.config.max_results,
                                preview_length=self.config.preview_length, **flags)
        return search(self.tree, keyword, options)


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _fmt_inline(value: Value) -> str:
    """Format a single value for compact one-line display."""
    if isinstance(value, VText):
        return json.dumps(preview(value), ensure_ascii=False)
    if isinstance(value, (VNull, VBool, VNumber, VList, VDict)):
        return preview(value)
    return repr(value)


def _fmt_inspect(value: Value | _Missing) -> str:
    """Pretty-print a value for inspect() / i()."""
    if isinstance(value, _Missing):
        return "Missing"

    if isinstance(value, VDict):
        if not value.entries:
            return "VDict {}"
        width = max(len(k) for k in value.entries)
        lines = ["VDict {"]
        for k, v in value.entries.items():
            lines.append(f"  {k:<{width}}: {_fmt_inline(v)}")
        lines.append("}")
        return "\n".join(lines)

    if isinstance(value, VList):
        lines = ["VList ["]
        for i, v in enumerate(value.items):
            lines.append(f"  {i}: {_fmt_inline(v)}")
        lines.append("]")
        return "\n".join(lines)

    return _fmt_inline(value)


def _print_json(data: object, dest: IO[str]) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False), file=dest)


def _show_value(repl: DocTreeRepl, path: str, dest: IO[str]) -> None:
    value = repl.get(path)
    if isinstance(value, _Missing):
        print(f"  (path not found: {path})", file=dest)
        return
    _print_json(to_native(value), dest)


def _search_cmd(repl: DocTreeRepl, args: list[str], dest: IO[str]) -> None:
    """``search [-r] [-c] [-k|-v] KEYWORD``"""
    flags: dict[str, bool] = {}
    words: list[str] = []
    for arg in args:
        if arg == "-r":
            flags["regex"] = True
        elif arg == "-c":
            flags["case_sensitive"] = True
        elif arg == "-k":
            flags["search_values"] = False
        elif arg == "-v":
            flags["search_keys"] = False
        else:
            words.append(arg)
    if not words:
        print("usage: search [-r] [-c] [-k|-v] KEYWORD", file=dest)
        return

    matches = repl.search(" ".join(words), **flags)
    if not matches:
        print("  (no matches)", file=dest)
        return
    for m in matches:
        print(f"  [{m.kind}] {m.path} = {m.preview}", file=dest)


def _run_command(repl: DocTreeRepl, cmd: str, args: list[str], dest: IO[str]) -> None:
    if cmd == ":open" and args:
        doc = repl.open(args[0], args[1] if len(args) > 1 else None)
        print(f"  opened {doc.path} ({doc.format.name})", file=dest)
    elif cmd == ":new" and args:
        doc = repl.new(args[0], args[1] if len(args) > 1 else None)
        print(f"  new {doc.format.name} document {doc.path}", file=dest)
    elif cmd == ":save":
        print(f"  saved {repl.save(args[0] if args else None)}", file=dest)
    elif cmd == ":reset":
        repl.reset()
    elif cmd == "show":
        print(repl.dumps().rstrip("\n"), file=dest)
    elif cmd == "get":
        _show_value(repl, args[0] if args else "", dest)
    elif cmd == "set" and len(args) >= 2:
        repl.set(args[0], parse_literal(" ".join(args[1:])))
    elif cmd in ("del", "delete") and args:
        repl.delete(args[0])
    elif cmd == "append" and len(args) >= 2:
        repl.append(args[0], parse_literal(" ".join(args[1:])))
    elif cmd == "keys":
        for key in repl.keys(int(args[0]) if args else None):
            print(f"  {key}", file=dest)
    elif cmd == "structure":
        _print_json(repl.structure(int(args[0]) if args else None), dest)
    elif cmd == "summary":
        _print_json(asdict(summarize_stats(repl.tree)), dest)
    elif cmd == "search":
        _search_cmd(repl, args, dest)
    else:
        print(f"  unknown command: {cmd} {' '.join(args)}".rstrip(), file=dest)


def _process_line(repl: DocTreeRepl, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    line = line.strip()
    if not line or line.startswith("#"):
        return True

    # ── Exit ──────────────────────────────────────────────────────────────
    if line in (":q", ":quit"):
        if repl.dirty:
            print("  (unsaved changes discarded)", file=dest)
        return False

    # ── inspect() / i() ───────────────────────────────────────────────────
    for prefix in ("inspect(", "i("):
        if line.startswith(prefix) and line.endswith(")"):
            path = line[len(prefix):-1].strip()
            try:
                print(_fmt_inspect(repl.get(path)), file=dest)
            except DocTreeError as exc:
                print(f"Error: {exc}", file=sys.stderr)
            return True

    # ── Batch file ────────────────────────────────────────────────────────
    if line.startswith("?<< "):
        return _run_batch(repl, line[4:].strip(), dest)

    # ── Commands ──────────────────────────────────────────────────────────
    try:
        words = shlex.split(line)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return True

    try:
        _run_command(repl, words[0], words[1:], dest)
    except (DocTreeError, OSError) as exc:
        logger.debug("command failed: %s", line, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
    except ValueError as exc:
        print(f"Error: bad argument: {exc}", file=sys.stderr)
    return True


def _run_batch(repl: DocTreeRepl, filepath: str, dest: IO[str]) -> bool:
    """Run every line of *filepath*; returns False if a line ended the session."""
    try:
        with open(filepath, encoding="utf-8") as fh:
            for file_line in fh:
                if not _process_line(repl, file_line.rstrip("\n"), dest):
                    return False
    except OSError as exc:
        print(f"Error reading '{filepath}': {exc}", file=sys.stderr)
    return True


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def _configure_logging(verbose: bool) -> None:
    level = "DEBUG" if verbose else os.environ.get("DOCTREE_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> None:
    """Interactive document shell (``doctree [-v] [FILE]``)."""
    args = list(sys.argv[1:] if argv is None else argv)
    verbose = False
    for flag in ("-v", "--verbose"):
        while flag in args:
            args.remove(flag)
            verbose = True
    _configure_logging(verbose)

    repl = DocTreeRepl(DocTreeConfig.from_env())
    dest: IO[str] = sys.stdout
    _file: IO[str] | None = None

    if args:
        _process_line(repl, f":open {shlex.quote(args[0])}", dest)

    print("DocTree  (:q to quit  |  :open FILE  :new FILE  :save [FILE]  :reset  |  "
          "get/set/del/append  keys  structure  summary  search  show  i(<path>))")

    while True:
        try:
            line = input("doctree> ").strip()
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        if not line:
            continue

        # ── Output redirect: ?>> filepath  /  ?>> ─────────────────────────
        if line.startswith("?>> "):
            filepath = line[4:].strip()
            if _file:
                _file.close()
                _file = None
            dest = sys.stdout
            try:
                _file = open(filepath, "w", encoding="utf-8")
                dest = _file
            except OSError as exc:
                print(f"Error opening '{filepath}': {exc}", file=sys.stderr)
            continue

        if line == "?>>":
            if _file:
                _file.close()
                _file = None
            dest = sys.stdout
            continue

        if not _process_line(repl, line, dest):
            break

    if _file:
        _file.close()


if __name__ == "__main__":
    main()
