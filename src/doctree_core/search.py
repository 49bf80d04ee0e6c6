"""Keyword search over key names and values."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Union

from .errors import InvalidPatternError
from .preview import PREVIEW_LENGTH, preview, text_of
from .values import Value, VDict, VList

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchOptions:
    search_keys: bool = True
    search_values: bool = True
    case_sensitive: bool = False
    regex: bool = False
    max_results: int = 100
    preview_length: int = PREVIEW_LENGTH


@dataclass
class Match:
    kind: str  # "key" | "value"
    path: str
    key: str | None  # None for sequence elements
    preview: str


# ---------------------------------------------------------------------------
# Matchers
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SubstringMatcher:
    needle: str
    case_sensitive: bool = False

    def __call__(self, text: str) -> bool:
        if self.case_sensitive:
            return self.needle in text
        return self.needle.lower() in text.lower()


@dataclass(frozen=True)
class PatternMatcher:
    pattern: re.Pattern[str]

    def __call__(self, text: str) -> bool:
        return self.pattern.search(text) is not None


Matcher = Union[SubstringMatcher, PatternMatcher]


def build_matcher(keyword: str, options: SearchOptions) -> Matcher:
    """Choose the match mode once per search.

    Raises InvalidPatternError for a malformed regular expression.
    """
    if not options.regex:
        return SubstringMatcher(keyword, options.case_sensitive)
    flags = 0 if options.case_sensitive else re.IGNORECASE
    try:
        return PatternMatcher(re.compile(keyword, flags))
    except re.error as exc:
        raise InvalidPatternError(keyword, str(exc)) from exc


# ---------------------------------------------------------------------------
# Walk
# ---------------------------------------------------------------------------

def search(tree: Value, keyword: str, options: SearchOptions | None = None) -> list[Match]:
    """Depth-first search, returning at most ``options.max_results`` matches.

    For each mapping entry the key is tested, then the value, then its
    children. Sequence elements only have their value tested.
    """
    options = options or SearchOptions()
    matcher = build_matcher(keyword, options)
    results: list[Match] = []
    if options.max_results > 0:
        _Walker(matcher, options, results).visit(tree, "")
    logger.debug("search %r: %d match(es)", keyword, len(results))
    return results


class _Walker:
    def __init__(self, matcher: Matcher, options: SearchOptions, results: list[Match]) -> None:
        self.matcher = matcher
        self.options = options
        self.results = results

    @property
    def full(self) -> bool:
        return len(self.results) >= self.options.max_results

    def visit(self, value: Value, path: str) -> None:
        if isinstance(value, VDict):
            for key, child in value.entries.items():
                if self.full:
                    return
                self.entry(child, f"{path}.{key}" if path else key, key)
        elif isinstance(value, VList):
            for i, child in enumerate(value.items):
                if self.full:
                    return
                self.entry(child, f"{path}[{i}]", None)

    def entry(self, value: Value, path: str, key: str | None) -> None:
        opts = self.options
        if key is not None and opts.search_keys and self.matcher(key):
            self.add("key", path, key, value)
            if self.full:
                return
        if opts.search_values and self.matcher(text_of(value)):
            self.add("value", path, key, value)
            if self.full:
                return
        self.visit(value, path)

    def add(self, kind: str, path: str, key: str | None, value: Value) -> None:
        self.results.append(
            Match(kind=kind, path=path, key=key,
                  preview=preview(value, self.options.preview_length))
        )
