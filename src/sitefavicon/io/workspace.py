from __future__ import annotations

"""Scratch workspace: an ephemeral mirror of the site tree.

The workspace is a scoped resource. It is allocated on ``__enter__`` and
removed on ``__exit__`` whatever the exit path, so callers always use it in
a ``with`` block and pass the handle explicitly to the stages that need it.
Several workspaces may coexist in one process.
"""

import os
import shutil
import stat
import tempfile
from pathlib import Path
from typing import List, Optional

from sitefavicon.constants import SCRATCH_PREFIX
from sitefavicon.core.errors import WorkspaceError
from sitefavicon.core.interfaces.workspace import ScratchWorkspaceProtocol
from sitefavicon.core.models import DirectoryEntry
from sitefavicon.core.interfaces.logging import LoggerLikeProtocol
from sitefavicon.logging.helpers import get_logger, trace_io
from sitefavicon.utils.paths import rebase


class ScratchWorkspace(ScratchWorkspaceProtocol):
    def __init__(
        self,
        site_root: Path,
        *,
        prefix: str = SCRATCH_PREFIX,
        parent_dir: Optional[Path] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._site_root = Path(site_root).resolve()
        self._prefix = prefix
        self._parent_dir = parent_dir
        self._root: Optional[Path] = None
        self._log = logger or get_logger('io.workspace')

    # -------- lifecycle --------

    def open(self) -> 'ScratchWorkspace':
        if self._root is not None:
            return self
        try:
            self._root = Path(tempfile.mkdtemp(prefix=self._prefix, dir=self._parent_dir)).resolve()
        except OSError as exc:
            raise WorkspaceError(f'cannot create scratch workspace: {exc}') from exc
        self._log.debug('scratch workspace → %s', self._root)
        return self

    def close(self) -> None:
        root, self._root = self._root, None
        if root is None:
            return
        shutil.rmtree(root, ignore_errors=True)
        if root.exists():
            self._log.warning('⚠  could not fully remove scratch workspace %s', root)
        else:
            self._log.debug('🗑  scratch workspace removed → %s', root)

    def __enter__(self) -> 'ScratchWorkspace':
        return self.open()

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    # -------- mapping --------

    @property
    def root(self) -> Path:
        if self._root is None:
            raise RuntimeError('scratch workspace is not open')
        return self._root

    @property
    def site_root(self) -> Path:
        return self._site_root

    @property
    def is_open(self) -> bool:
        return self._root is not None

    def to_scratch(self, live_path: Path) -> Path:
        """Map a path under the Site Root to the same relative path under the scratch root."""
        return rebase(Path(live_path), self._site_root, self.root)

    def to_live(self, scratch_path: Path) -> Path:
        return rebase(Path(scratch_path), self.root, self._site_root)

    # -------- staging --------

    def stage(self, entry: DirectoryEntry) -> List[Path]:
        """Copy the pages of *entry* into their mapped scratch paths.

        Timestamps are preserved so that a page the injector leaves alone is
        not considered newer than its live original. Staged copies are always
        owner-writable, even when the live page is read-only.
        """
        target_dir = self.to_scratch(entry.path)
        target_dir.mkdir(parents=True, exist_ok=True)
        staged: List[Path] = []
        for page in entry.pages:
            dst = self.to_scratch(page)
            shutil.copy2(page, dst)
            mode = dst.stat().st_mode
            if not mode & stat.S_IWUSR:
                os.chmod(dst, stat.S_IMODE(mode) | stat.S_IWUSR)
            trace_io(self._log, 'staged page', src=str(page), dst=str(dst))
            staged.append(dst)
        return staged
