"""
External tool contracts.

The generator and the injector are black boxes reached through a command
runner; these protocols are the seams tests replace.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol, Sequence, runtime_checkable

from sitefavicon.core.models import BundleArtifacts


@runtime_checkable
class CommandRunnerProtocol(Protocol):
    def run(self, cmd: Sequence[str]) -> None:
        """Run *cmd* synchronously; raise ToolError on failure."""
        ...


@runtime_checkable
class BundleGeneratorProtocol(Protocol):
    def generate(
        self,
        *,
        source_image: Path,
        settings: Path,
        metadata_path: Path,
        dest_dir: Path,
    ) -> BundleArtifacts:
        ...


@runtime_checkable
class TagInjectorProtocol(Protocol):
    def inject(
        self,
        metadata_path: Path,
        pages: Sequence[Path],
        *,
        output_dir: Path,
        directory: Optional[Path] = None,
    ) -> None:
        ...
