"""Document — a file-backed Value tree bound to one format front-end."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from .config import DocTreeConfig
from .errors import DecodeError, DocumentNotFoundError, DocumentTooLargeError
from .formats import Format, format_for_path, get_format
from .values import Value, VDict

logger = logging.getLogger(__name__)


@dataclass
class Document:
    """Holds a decoded tree together with where it came from."""

    path: Path
    format: Format
    tree: Value = field(default_factory=VDict)

    # -- Construction ---------------------------------------------------

    @classmethod
    def load(cls, path: str | os.PathLike[str], fmt: str | None = None,
             config: DocTreeConfig | None = None) -> "Document":
        """Read and decode *path*, rejecting files above ``config.max_file_size``."""
        config = config or DocTreeConfig()
        p = Path(path)
        front = get_format(fmt) if fmt else format_for_path(p)
        text = _read_text(p, config.max_file_size, front.name)
        tree = front.decode(text)
        logger.debug("loaded %s as %s (%d bytes)", p, front.name, len(text))
        return cls(path=p, format=front, tree=tree)

    @classmethod
    def create(cls, path: str | os.PathLike[str], tree: Value | None = None,
               fmt: str | None = None) -> "Document":
        """A new document that exists only in memory until ``save()``."""
        p = Path(path)
        front = get_format(fmt) if fmt else format_for_path(p)
        return cls(path=p, format=front, tree=tree if tree is not None else VDict())

    # -- Persistence ----------------------------------------------------

    def dumps(self, compact: bool = False, indent: int = 2) -> str:
        return self.format.encode(self.tree, compact=compact, indent=indent)

    def save(self, path: str | os.PathLike[str] | None = None,
             compact: bool = False, indent: int = 2) -> Path:
        """Encode the tree and write it fully; returns the path written.

        Encoding happens before the file is opened, so a tree that cannot
        be encoded leaves the file untouched.
        """
        target = Path(path) if path is not None else self.path
        text = self.dumps(compact=compact, indent=indent)
        target.write_text(text, encoding="utf-8")
        logger.info("wrote %s (%s, %d bytes)", target, self.format.name, len(text))
        return target


def _read_text(path: Path, limit: int, fmt: str) -> str:
    try:
        size = path.stat().st_size
    except FileNotFoundError:
        raise DocumentNotFoundError(f"File not found: {path}") from None
    if size > limit:
        raise DocumentTooLargeError(str(path), size, limit)
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(fmt, f"not valid UTF-8 text ({exc.reason} at byte {exc.start})") from exc


def validate_file(path: str | os.PathLike[str], fmt: str | None = None,
                  config: DocTreeConfig | None = None) -> tuple[bool, str]:
    """Syntax-check a file without keeping its tree."""
    config = config or DocTreeConfig()
    p = Path(path)
    front = get_format(fmt) if fmt else format_for_path(p)
    return front.validate(_read_text(p, config.max_file_size, front.name))
