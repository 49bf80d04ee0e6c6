"""Per-call configuration for DocTree Core."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields

_ENV_PREFIX = "DOCTREE_"


@dataclass(frozen=True)
class DocTreeConfig:
    """Limits and defaults handed explicitly to documents, tools and the shell."""

    max_file_size: int = 500 * 1024 * 1024
    structure_depth: int = 3
    keys_depth: int = 5
    max_results: int = 100
    preview_length: int = 100
    indent: int = 2

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "DocTreeConfig":
        """Build a config, overriding defaults from ``DOCTREE_<FIELD>`` variables.

        Example: ``DOCTREE_MAX_RESULTS=20`` sets ``max_results``.
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, int] = {}
        for f in fields(cls):
            raw = env.get(_ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            try:
                overrides[f.name] = int(raw)
            except ValueError:
                raise ValueError(
                    f"{_ENV_PREFIX}{f.name.upper()} must be an integer, got {raw!r}"
                ) from None
        return cls(**overrides)
