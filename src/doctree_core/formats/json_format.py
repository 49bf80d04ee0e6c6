"""JSON front-end (stdlib ``json``)."""

from __future__ import annotations

import json

from ..convert import from_native, to_native
from ..errors import DecodeError, EncodeError
from ..values import Value
from .base import Format


class JSONFormat(Format):
    name = "json"
    extensions = (".json",)

    def decode(self, text: str) -> Value:
        try:
            return from_native(json.loads(text))
        except json.JSONDecodeError as exc:
            raise DecodeError(self.name, exc.msg, exc.lineno, exc.colno) from exc
        except OverflowError as exc:
            raise DecodeError(self.name, f"number out of range: {exc}") from exc

    def encode(self, value: Value, compact: bool = False, indent: int = 2) -> str:
        native = to_native(value)
        try:
            if compact:
                return json.dumps(native, ensure_ascii=False, separators=(",", ":"))
            return json.dumps(native, ensure_ascii=False, indent=indent)
        except (TypeError, ValueError) as exc:
            raise EncodeError(self.name, str(exc)) from exc
