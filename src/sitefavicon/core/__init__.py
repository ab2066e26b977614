from __future__ import annotations

"""Public surface for sitefavicon.core.

Protocols, data model and error types are re-exported here so callers have
one stable import location:

    from sitefavicon.core import DirectoryEntry, InjectionError, ...
"""

from sitefavicon.core.errors import (
    DirectoryError,
    GeneratorError,
    InjectionError,
    MergeError,
    MissingMetadataError,
    PipelineFailed,
    SiteFaviconError,
    SiteRootError,
    ToolError,
    WorkspaceError,
)
from sitefavicon.core.models import (
    BundleArtifacts,
    DirectoryEntry,
    DirectoryResult,
    MergeAction,
    MergeOutcome,
)
from sitefavicon.core.report import ExecutionReport, StageTimer

__all__ = [
    # Errors
    "DirectoryError",
    "GeneratorError",
    "InjectionError",
    "MergeError",
    "MissingMetadataError",
    "PipelineFailed",
    "SiteFaviconError",
    "SiteRootError",
    "ToolError",
    "WorkspaceError",
    # Models
    "BundleArtifacts",
    "DirectoryEntry",
    "DirectoryResult",
    "MergeAction",
    "MergeOutcome",
    # Report
    "ExecutionReport",
    "StageTimer",
]
