# src/sitefavicon/utils/paths.py
"""
paths – Small, centralized path helpers for sitefavicon.

Provides:
  • rebase(path, old_root, new_root)   – isomorphic prefix swap
  • resolve_site_root(base, subpath)   – fixed-location Site Root lookup
"""

from __future__ import annotations

from pathlib import Path


def rebase(path: Path, old_root: Path, new_root: Path) -> Path:
    """Return *path* with its *old_root* prefix replaced by *new_root*.

    Pure string-level mapping: nothing is resolved against the filesystem,
    so it also works for paths that do not exist yet.

    Raises:
        ValueError: *path* is not located under *old_root*.
    """
    rel = Path(path).relative_to(old_root)
    return Path(new_root) / rel


def resolve_site_root(base: Path, subpath: str) -> Path:
    """Resolve the Site Root as a fixed relative location from *base*."""
    return (Path(base) / subpath).resolve()
