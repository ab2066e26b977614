from __future__ import annotations

"""Sequential injection pipeline.

    scan → (scratch workspace) → generate once → for each directory with pages:
        stage → inject → merge

Only the merge step writes page files into the live tree. Under the default
fail-fast policy the first directory failure aborts the sweep; directories
merged before it stay merged. With the keep-going policy failures are
collected and reported together at the end.
"""

from pathlib import Path
from typing import Callable, List, Optional

from sitefavicon.core.errors import DirectoryError, PipelineFailed, SiteFaviconError
from sitefavicon.core.interfaces.merge import MergeEngineProtocol
from sitefavicon.core.interfaces.scanner import TreeScannerProtocol
from sitefavicon.core.interfaces.tools import BundleGeneratorProtocol, TagInjectorProtocol
from sitefavicon.core.interfaces.workspace import ScratchWorkspaceProtocol
from sitefavicon.core.models import BundleArtifacts, DirectoryEntry, DirectoryResult
from sitefavicon.core.report import ExecutionReport, StageTimer
from sitefavicon.core.interfaces.logging import LoggerLikeProtocol
from sitefavicon.logging.helpers import get_logger
from sitefavicon.runtime.config import PipelineConfig

WorkspaceFactory = Callable[[Path], ScratchWorkspaceProtocol]


class InjectionPipeline:
    def __init__(
        self,
        *,
        config: PipelineConfig,
        scanner: TreeScannerProtocol,
        generator: BundleGeneratorProtocol,
        injector: TagInjectorProtocol,
        merger: MergeEngineProtocol,
        workspace_factory: WorkspaceFactory,
        report: Optional[ExecutionReport] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._cfg = config
        self._scanner = scanner
        self._generator = generator
        self._injector = injector
        self._merger = merger
        self._workspace_factory = workspace_factory
        self._report = report or ExecutionReport()
        self._log = logger or get_logger('pipeline')

    @property
    def report(self) -> ExecutionReport:
        return self._report

    @property
    def config(self) -> PipelineConfig:
        return self._cfg

    def _display(self, path: Path) -> str:
        try:
            rel = path.relative_to(self._cfg.site_root)
        except ValueError:
            return str(path)
        return '/' + rel.as_posix() if rel.parts else '/'

    def discover(self) -> List[DirectoryEntry]:
        """Return the directories that contain at least one page."""
        with StageTimer(self._report, 'scan'):
            entries = self._scanner.scan(self._cfg.site_root)
        qualifying = [e for e in entries if e.has_pages]
        self._report.add_scan(scanned=len(entries), with_pages=len(qualifying))
        for entry in entries:
            if not entry.has_pages:
                self._log.debug('no pages in %s – skipped', self._display(entry.path))
        self._log.info(
            'Found %d director%s with pages (%d scanned)',
            len(qualifying), 'y' if len(qualifying) == 1 else 'ies', len(entries),
        )
        return qualifying

    def generate(self) -> BundleArtifacts:
        with StageTimer(self._report, 'generate'):
            artifacts = self._generator.generate(
                source_image=self._cfg.source_image,
                settings=self._cfg.settings,
                metadata_path=self._cfg.metadata_path,
                dest_dir=self._cfg.dest_dir,
            )
        self._report.metadata_path = str(artifacts.metadata_path)
        return artifacts

    def process_directory(
        self,
        entry: DirectoryEntry,
        workspace: ScratchWorkspaceProtocol,
        artifacts: BundleArtifacts,
    ) -> DirectoryResult:
        """Stage, inject and merge one directory. Raises DirectoryError on failure."""
        self._log.info('Processing %s', self._display(entry.path))

        with StageTimer(self._report, 'stage'):
            try:
                staged = workspace.stage(entry)
            except OSError as exc:
                raise DirectoryError(entry.path, f'cannot stage pages: {exc}') from exc
        self._report.pages_staged += len(staged)

        with StageTimer(self._report, 'inject'):
            self._report.injector_calls += 1
            self._injector.inject(
                artifacts.metadata_path,
                staged,
                output_dir=workspace.to_scratch(entry.path),
                directory=entry.path,
            )

        with StageTimer(self._report, 'merge'):
            outcomes = self._merger.merge(entry, workspace)
        self._report.add_merge(outcomes)

        written = sum(1 for o in outcomes if o.written)
        self._log.info('✔ %s: %d/%d page(s) updated', self._display(entry.path), written, len(outcomes))
        return DirectoryResult(entry=entry, outcomes=outcomes)

    def run(self) -> List[DirectoryResult]:
        self._report.site_root = str(self._cfg.site_root)
        try:
            entries = self.discover()
            results: List[DirectoryResult] = []
            failures: List[DirectoryError] = []

            with self._workspace_factory(self._cfg.site_root) as workspace:
                artifacts = self.generate()
                for entry in entries:
                    try:
                        results.append(self.process_directory(entry, workspace, artifacts))
                    except DirectoryError as exc:
                        self._report.add_error(str(exc), directory=entry.path)
                        if not self._cfg.keep_going:
                            raise
                        self._log.error('✘ failed while processing %s: %s', self._display(entry.path), exc)
                        failures.append(exc)
                        results.append(DirectoryResult(entry=entry, error=exc))

            if failures:
                raise PipelineFailed(failures)
            return results
        except SiteFaviconError as exc:
            if not isinstance(exc, (DirectoryError, PipelineFailed)):
                self._report.add_error(str(exc))
            raise
        finally:
            self._report.finish()
