from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Protocol, runtime_checkable

from sitefavicon.core.models import DirectoryEntry


@runtime_checkable
class TreeScannerProtocol(Protocol):
    """Enumerates the directories of a site tree and their pages."""

    def iter_directories(self, site_root: Path) -> Iterator[Path]:
        """Yield every directory under *site_root*, the root included."""
        ...

    def classify(self, directory: Path) -> DirectoryEntry:
        """Return the pages directly inside *directory* (non-recursive)."""
        ...

    def scan(self, site_root: Path, *, pages_only: bool = False) -> List[DirectoryEntry]:
        ...
