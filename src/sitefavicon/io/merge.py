from __future__ import annotations

"""Merge engine: promotes injected scratch pages back into the live tree.

Rules, per page:
    * live file missing                       → created
    * scratch bytes identical to live bytes   → unchanged (no write)
    * scratch mtime strictly newer than live  → updated
    * otherwise (live newer or same mtime)    → kept_newer_live

Files only ever travel scratch → live, nothing is deleted, and each write
is an atomic replace so a crash never leaves a truncated page behind.
"""

import hashlib
import os
import shutil
import stat
import tempfile
from pathlib import Path
from typing import List, Optional

from sitefavicon.core.errors import MergeError
from sitefavicon.core.interfaces.merge import MergeEngineProtocol
from sitefavicon.core.interfaces.workspace import ScratchWorkspaceProtocol
from sitefavicon.core.models import DirectoryEntry, MergeAction, MergeOutcome
from sitefavicon.core.interfaces.logging import LoggerLikeProtocol
from sitefavicon.logging.helpers import get_logger, trace_io

_CHUNK = 1 << 16


def file_digest(path: Path) -> str:
    h = hashlib.sha256()
    with open(path, 'rb') as fh:
        for block in iter(lambda: fh.read(_CHUNK), b''):
            h.update(block)
    return h.hexdigest()


def atomic_copy(src: Path, dst: Path) -> None:
    """Copy *src* over *dst* through a sibling temp file and ``os.replace``.

    An existing *dst* keeps its permission bits; only content and mtime
    come from *src*.
    """
    try:
        live_mode: Optional[int] = stat.S_IMODE(dst.stat().st_mode)
    except FileNotFoundError:
        live_mode = None
    fd, tmp = tempfile.mkstemp(dir=str(dst.parent), prefix=f'.{dst.name}.', suffix='.tmp')
    os.close(fd)
    try:
        shutil.copy2(src, tmp)
        if live_mode is not None:
            os.chmod(tmp, live_mode)
        os.replace(tmp, dst)
    except BaseException:
        try:
            os.unlink(tmp)
        except FileNotFoundError:
            pass
        raise


class MergeEngine(MergeEngineProtocol):
    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._log = logger or get_logger('io.merge')

    def decide(self, scratch_path: Path, live_path: Path) -> MergeAction:
        if not live_path.exists():
            return MergeAction.CREATED
        if file_digest(scratch_path) == file_digest(live_path):
            return MergeAction.UNCHANGED
        if scratch_path.stat().st_mtime_ns > live_path.stat().st_mtime_ns:
            return MergeAction.UPDATED
        return MergeAction.KEPT_NEWER_LIVE

    def merge(self, entry: DirectoryEntry, workspace: ScratchWorkspaceProtocol) -> List[MergeOutcome]:
        outcomes: List[MergeOutcome] = []
        for live_path in entry.pages:
            scratch_path = workspace.to_scratch(live_path)
            try:
                if not scratch_path.is_file():
                    raise FileNotFoundError(f'injected copy {scratch_path} is missing')
                action = self.decide(scratch_path, live_path)
                if action in (MergeAction.CREATED, MergeAction.UPDATED):
                    atomic_copy(scratch_path, live_path)
            except OSError as exc:
                raise MergeError(entry.path, f'cannot merge {live_path.name}: {exc}') from exc

            if action is MergeAction.KEPT_NEWER_LIVE:
                self._log.info('↪  %s is newer than its injected copy – kept', live_path)
            trace_io(self._log, 'merge decision', page=str(live_path), action=action.value)
            outcomes.append(MergeOutcome(live_path=live_path, scratch_path=scratch_path, action=action))
        return outcomes
