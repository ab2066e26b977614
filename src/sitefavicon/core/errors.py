from __future__ import annotations

"""Exception taxonomy for the injection pipeline.

Fatal setup errors (SiteRootError, WorkspaceError, GeneratorError and
MissingMetadataError) are raised before the live tree is touched.
Per-directory errors (InjectionError, MergeError) carry the directory that
was being processed so the CLI can report it.
"""

from pathlib import Path
from typing import Optional, Sequence


class SiteFaviconError(Exception):
    """Base class for every error raised by sitefavicon."""


class SiteRootError(SiteFaviconError):
    """Site Root is missing, not a directory or unreadable."""


class WorkspaceError(SiteFaviconError):
    """The scratch workspace could not be allocated."""


class ToolError(SiteFaviconError):
    """An external command exited non-zero or could not be started."""

    def __init__(self, message: str, *, cmd: Sequence[str] = (), returncode: Optional[int] = None) -> None:
        super().__init__(message)
        self.cmd = list(cmd)
        self.returncode = returncode


class GeneratorError(SiteFaviconError):
    """The favicon bundle could not be generated."""


class MissingMetadataError(GeneratorError):
    """The metadata artifact is absent or unreadable after generation."""

    def __init__(self, path: Path, reason: str = "not found") -> None:
        super().__init__(f"metadata artifact {path} {reason}")
        self.path = path


class DirectoryError(SiteFaviconError):
    """Failure bound to one directory of the site tree."""

    def __init__(self, directory: Path, message: str) -> None:
        super().__init__(f"{directory}: {message}")
        self.directory = directory


class InjectionError(DirectoryError):
    """The tag injector failed for a directory."""


class MergeError(DirectoryError):
    """Injected pages could not be promoted back into the live tree."""


class PipelineFailed(SiteFaviconError):
    """Raised at the end of a collect-and-report run with failed directories."""

    def __init__(self, failures: Sequence[DirectoryError]) -> None:
        names = ", ".join(str(f.directory) for f in failures)
        super().__init__(f"{len(failures)} director{'y' if len(failures) == 1 else 'ies'} failed: {names}")
        self.failures = list(failures)
