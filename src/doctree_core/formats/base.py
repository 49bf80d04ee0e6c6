"""Common shape of a format front-end."""

from __future__ import annotations

from ..errors import DecodeError
from ..values import Value


class Format:
    """Parses one text format into a Value tree and serializes it back.

    Subclasses set ``name`` and ``extensions`` and implement
    ``decode`` / ``encode``.
    """

    name: str = ""
    extensions: tuple[str, ...] = ()

    def decode(self, text: str) -> Value:
        raise NotImplementedError

    def encode(self, value: Value, compact: bool = False, indent: int = 2) -> str:
        raise NotImplementedError

    def validate(self, text: str) -> tuple[bool, str]:
        """Check *text* for syntax errors without keeping the tree."""
        try:
            self.decode(text)
        except DecodeError as exc:
            return False, str(exc)
        return True, f"{self.name.upper()} is valid"

    def __repr__(self) -> str:
        return f"<Format {self.name}>"
