from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from sitefavicon.core.interfaces.workspace import ScratchWorkspaceProtocol
from sitefavicon.core.models import DirectoryEntry, MergeOutcome


@runtime_checkable
class MergeEngineProtocol(Protocol):
    def merge(self, entry: DirectoryEntry, workspace: ScratchWorkspaceProtocol) -> List[MergeOutcome]:
        """Promote injected scratch copies of *entry* back to the live tree."""
        ...
