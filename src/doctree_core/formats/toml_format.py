"""TOML front-end (stdlib ``tomllib`` to read, ``tomli_w`` to write)."""

from __future__ import annotations

import tomllib

import tomli_w

from ..convert import from_native, to_native
from ..errors import DecodeError, EncodeError
from ..values import Value, VDict, VList, VNull
from .base import Format


class TOMLFormat(Format):
    """Dates and times decode to ISO-8601 text; null cannot be written."""

    name = "toml"
    extensions = (".toml",)

    def decode(self, text: str) -> Value:
        try:
            return from_native(tomllib.loads(text))
        except tomllib.TOMLDecodeError as exc:
            raise DecodeError(
                self.name,
                str(exc),
                getattr(exc, "lineno", None),
                getattr(exc, "colno", None),
            ) from exc
        except OverflowError as exc:
            raise DecodeError(self.name, f"number out of range: {exc}") from exc

    def encode(self, value: Value, compact: bool = False, indent: int = 2) -> str:
        if not isinstance(value, VDict):
            raise EncodeError(self.name, "the document root must be a mapping")
        null_path = _find_null(value, "")
        if null_path is not None:
            raise EncodeError(self.name, f"null value at {null_path!r}")
        try:
            return tomli_w.dumps(to_native(value), indent=indent if not compact else 0)
        except (TypeError, ValueError) as exc:
            raise EncodeError(self.name, str(exc)) from exc


def _find_null(value: Value, path: str) -> str | None:
    if isinstance(value, VNull):
        return path
    if isinstance(value, VDict):
        for key, child in value.entries.items():
            found = _find_null(child, f"{path}.{key}" if path else key)
            if found is not None:
                return found
    elif isinstance(value, VList):
        for i, child in enumerate(value.items):
            found = _find_null(child, f"{path}[{i}]")
            if found is not None:
                return found
    return None
