"""Wildcard path patterns: normalization and glob matching.

Patterns use shell-glob semantics: ``*`` matches any run of characters
including ``/``, ``?`` matches a single character, ``[...]`` is a class.
Paths are normalized before matching so ``admin/*`` matches ``/admin``,
``/admin/`` and ``admin/settings`` alike.
"""

from __future__ import annotations

from collections.abc import Sequence
from fnmatch import fnmatchcase


def normalize_path(path: str) -> str:
    """Strip leading slashes and guarantee a single trailing slash."""
    path = path.lstrip("/")
    if not path.endswith("/"):
        path += "/"
    return path


def match_url(path: str, patterns: Sequence[str]) -> bool:
    """Return True if any pattern glob-matches the normalized *path*.

    A container that is not a proper sequence of patterns (``None``, a bare
    string, a mapping) never matches.
    """
    if isinstance(patterns, (str, bytes)) or not isinstance(patterns, Sequence):
        return False

    candidate = normalize_path(path)
    return any(fnmatchcase(candidate, pattern) for pattern in patterns)
