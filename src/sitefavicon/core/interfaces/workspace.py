from __future__ import annotations

from pathlib import Path
from typing import List, Protocol, runtime_checkable

from sitefavicon.core.models import DirectoryEntry


@runtime_checkable
class ScratchWorkspaceProtocol(Protocol):
    """Scoped mirror of the site tree used for staging."""

    @property
    def root(self) -> Path: ...

    @property
    def site_root(self) -> Path: ...

    def to_scratch(self, live_path: Path) -> Path: ...

    def to_live(self, scratch_path: Path) -> Path: ...

    def stage(self, entry: DirectoryEntry) -> List[Path]: ...

    def close(self) -> None: ...

    def __enter__(self) -> "ScratchWorkspaceProtocol": ...

    def __exit__(self, exc_type, exc, tb) -> bool: ...
