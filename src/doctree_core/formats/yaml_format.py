"""YAML front-end (PyYAML, safe loader and dumper)."""

from __future__ import annotations

import sys

import yaml

from ..convert import from_native, to_native
from ..errors import DecodeError, EncodeError
from ..values import Value
from .base import Format


class YAMLFormat(Format):
    """A stream with several documents decodes to a sequence of them."""

    name = "yaml"
    extensions = (".yaml", ".yml")

    def decode(self, text: str) -> Value:
        try:
            documents = list(yaml.safe_load_all(text))
        except yaml.YAMLError as exc:
            mark = getattr(exc, "problem_mark", None)
            line = mark.line + 1 if mark is not None else None
            column = mark.column + 1 if mark is not None else None
            raise DecodeError(self.name, str(exc), line, column) from exc

        if len(documents) == 1:
            documents = documents[0]
        elif not documents:
            documents = None
        try:
            return from_native(documents)
        except OverflowError as exc:
            raise DecodeError(self.name, f"number out of range: {exc}") from exc

    def encode(self, value: Value, compact: bool = False, indent: int = 2) -> str:
        native = to_native(value)
        try:
            if compact:
                return yaml.safe_dump(
                    native,
                    sort_keys=False,
                    allow_unicode=True,
                    default_flow_style=True,
                    width=sys.maxsize,
                )
            return yaml.safe_dump(
                native,
                sort_keys=False,
                allow_unicode=True,
                default_flow_style=False,
                indent=indent,
            )
        except yaml.YAMLError as exc:
            raise EncodeError(self.name, str(exc)) from exc
