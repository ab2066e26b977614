from __future__ import annotations
"""Suffix utilities for page-file detection.

Semantics:
    * Tokens WITHOUT a dot are treated as bare extensions and normalized by
      prefixing a dot. Example: "html" -> ".html".
    * Tokens WITH a dot are kept as filename tails. Example: ".htm".
    * Matching is case-insensitive and performed over the basename only,
      so "INDEX.HTML" is a page while "html/readme.txt" is not.

Examples:
    normalize_suffixes(["html"])          -> [".html"]
    normalize_suffixes([".HTM", "html"])  -> [".htm", ".html"]
"""

from typing import FrozenSet, Sequence


def normalize_suffixes(suffixes: Sequence[str] | None) -> list[str]:
    """Normalize raw suffix tokens (dedup, lower-case, leading dot)."""
    if not suffixes:
        return []
    out: list[str] = []
    for raw in suffixes:
        s = (raw or "").strip().lower()
        if not s:
            continue
        token = s if "." in s else f".{s}"
        if token not in out:
            out.append(token)
    return out


def suffix_set(suffixes: Sequence[str] | None) -> FrozenSet[str]:
    return frozenset(normalize_suffixes(suffixes))


def is_page_name(filename: str, suffixes: FrozenSet[str]) -> bool:
    """Return True if *filename* ends with any of the normalized *suffixes*."""
    name = filename.lower()
    return any(name.endswith(s) for s in suffixes)
