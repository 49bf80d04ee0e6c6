"""DocTree Core — format-agnostic document tree engine."""

from .config import DocTreeConfig
from .convert import from_native, parse_literal, to_native
from .document import Document
from .errors import (
    DecodeError,
    DocTreeError,
    DocumentNotFoundError,
    DocumentTooLargeError,
    EncodeError,
    InvalidPatternError,
    NotASequenceError,
    PathError,
    UnsupportedFormatError,
)
from .formats import format_for_path, get_format
from .keys import enumerate_keys
from .paths import append, assign, remove, resolve
from .preview import preview, text_of
from .repl import DocTreeRepl
from .search import Match, SearchOptions, search
from .shape import Stats, summarize_stats, summarize_structure
from .values import (
    Missing,
    Value,
    VBool,
    VDict,
    VList,
    VNull,
    VNumber,
    VText,
    _Missing,
)

__all__ = [
    "resolve",
    "assign",
    "remove",
    "append",
    "enumerate_keys",
    "summarize_structure",
    "summarize_stats",
    "search",
    "preview",
    "text_of",
    "from_native",
    "to_native",
    "parse_literal",
    "get_format",
    "format_for_path",
    "Document",
    "DocTreeConfig",
    "DocTreeRepl",
    "Match",
    "SearchOptions",
    "Stats",
    "Missing",
    "Value",
    "VBool",
    "VDict",
    "VList",
    "VNull",
    "VNumber",
    "VText",
    "DocTreeError",
    "PathError",
    "InvalidPatternError",
    "NotASequenceError",
    "DecodeError",
    "EncodeError",
    "UnsupportedFormatError",
    "DocumentNotFoundError",
    "DocumentTooLargeError",
]
