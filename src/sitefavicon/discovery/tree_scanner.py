from __future__ import annotations

"""Site tree discovery.

Walks an a-priori unknown directory tree and classifies each directory on
its own: a directory "has pages" when at least one page file sits directly
inside it. Subdirectories are never looked at during classification.
"""

import os
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from sitefavicon.constants import PAGE_SUFFIXES
from sitefavicon.core.errors import SiteRootError
from sitefavicon.core.interfaces.scanner import TreeScannerProtocol
from sitefavicon.core.models import DirectoryEntry
from sitefavicon.core.interfaces.logging import LoggerLikeProtocol
from sitefavicon.logging.helpers import get_logger, trace_io
from sitefavicon.utils.suffixes import is_page_name, suffix_set


class TreeScanner(TreeScannerProtocol):
    def __init__(
        self,
        *,
        page_suffixes: Sequence[str] = PAGE_SUFFIXES,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._suffixes = suffix_set(page_suffixes)
        self._log = logger or get_logger('discovery.scanner')

    @staticmethod
    def check_site_root(site_root: Path) -> Path:
        """Return the resolved Site Root or raise SiteRootError."""
        root = Path(site_root)
        if not root.exists():
            raise SiteRootError(f'site root {root} does not exist')
        if not root.is_dir():
            raise SiteRootError(f'site root {root} is not a directory')
        if not os.access(root, os.R_OK | os.X_OK):
            raise SiteRootError(f'site root {root} is not readable')
        return root.resolve()

    def iter_directories(self, site_root: Path) -> Iterator[Path]:
        root = self.check_site_root(site_root)

        def _on_error(exc: OSError) -> None:
            self._log.warning('⚠  cannot read %s (%s) – skipped', exc.filename, exc.strerror)

        for dirpath, dirnames, _ in os.walk(root, onerror=_on_error, followlinks=False):
            dirnames.sort()
            yield Path(dirpath)

    def classify(self, directory: Path) -> DirectoryEntry:
        pages = []
        with os.scandir(directory) as it:
            for de in it:
                if de.is_file() and is_page_name(de.name, self._suffixes):
                    pages.append(Path(de.path))
        pages.sort(key=str)
        return DirectoryEntry(path=Path(directory), pages=tuple(pages))

    def scan(self, site_root: Path, *, pages_only: bool = False) -> List[DirectoryEntry]:
        entries: List[DirectoryEntry] = []
        for directory in self.iter_directories(site_root):
            entry = self.classify(directory)
            trace_io(self._log, 'classified directory', path=str(directory), pages=len(entry.pages))
            if pages_only and not entry.has_pages:
                continue
            entries.append(entry)
        return entries
