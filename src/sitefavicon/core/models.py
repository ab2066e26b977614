from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple


@dataclass(frozen=True)
class DirectoryEntry:
    """A directory of the site tree and the pages directly inside it."""
    path: Path
    pages: Tuple[Path, ...] = ()

    @property
    def has_pages(self) -> bool:
        return bool(self.pages)


@dataclass(frozen=True)
class BundleArtifacts:
    """Output of the bundle generator, validated before any injection."""
    metadata_path: Path
    dest_dir: Path


class MergeAction(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    KEPT_NEWER_LIVE = "kept_newer_live"


@dataclass(frozen=True)
class MergeOutcome:
    live_path: Path
    scratch_path: Path
    action: MergeAction

    @property
    def written(self) -> bool:
        return self.action in (MergeAction.CREATED, MergeAction.UPDATED)


@dataclass
class DirectoryResult:
    entry: DirectoryEntry
    outcomes: list[MergeOutcome] = field(default_factory=list)
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None
