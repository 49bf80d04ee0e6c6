"""Format front-ends and the registry that picks one by name or extension."""

from __future__ import annotations

from pathlib import PurePath

from ..errors import UnsupportedFormatError
from .base import Format
from .json_format import JSONFormat
from .toml_format import TOMLFormat
from .xml_format import XMLFormat
from .yaml_format import YAMLFormat

FORMATS: dict[str, Format] = {
    fmt.name: fmt for fmt in (JSONFormat(), YAMLFormat(), TOMLFormat(), XMLFormat())
}

_BY_EXTENSION: dict[str, Format] = {
    ext: fmt for fmt in FORMATS.values() for ext in fmt.extensions
}


def get_format(name: str) -> Format:
    """Return the front-end registered as *name* (case-insensitive)."""
    fmt = FORMATS.get(name.lower())
    if fmt is None:
        raise UnsupportedFormatError(
            f"Unknown format {name!r} (expected one of: {', '.join(FORMATS)})"
        )
    return fmt


def format_for_path(path: str | PurePath) -> Format:
    """Return the front-end matching the file extension of *path*."""
    suffix = PurePath(path).suffix.lower()
    fmt = _BY_EXTENSION.get(suffix)
    if fmt is None:
        raise UnsupportedFormatError(f"No format registered for extension {suffix!r}: {path}")
    return fmt


__all__ = [
    "Format",
    "FORMATS",
    "JSONFormat",
    "TOMLFormat",
    "XMLFormat",
    "YAMLFormat",
    "format_for_path",
    "get_format",
]
