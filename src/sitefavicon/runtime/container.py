from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from sitefavicon.core.interfaces.merge import MergeEngineProtocol
from sitefavicon.core.interfaces.scanner import TreeScannerProtocol
from sitefavicon.core.interfaces.tools import (
    BundleGeneratorProtocol,
    CommandRunnerProtocol,
    TagInjectorProtocol,
)
from sitefavicon.core.interfaces.workspace import ScratchWorkspaceProtocol
from sitefavicon.core.report import ExecutionReport
from sitefavicon.discovery.tree_scanner import TreeScanner
from sitefavicon.io.merge import MergeEngine
from sitefavicon.io.workspace import ScratchWorkspace
from sitefavicon.logging.helpers import get_logger
from sitefavicon.pipeline import InjectionPipeline
from sitefavicon.runtime.config import PipelineConfig
from sitefavicon.tools.command import SubprocessRunner
from sitefavicon.tools.generator import BundleGenerator
from sitefavicon.tools.injector import TagInjector


@dataclass
class PipelineBuilder:
    """Composable builder that wires default collaborators into an InjectionPipeline.

    Every collaborator can be overridden; anything left as None is built
    from the configuration. Tests use the overrides to swap the command
    runner or the workspace factory without touching the pipeline.
    """
    config: PipelineConfig
    logger: Optional[logging.Logger] = None
    report: Optional[ExecutionReport] = None

    runner: Optional[CommandRunnerProtocol] = None
    scanner: Optional[TreeScannerProtocol] = None
    generator: Optional[BundleGeneratorProtocol] = None
    injector: Optional[TagInjectorProtocol] = None
    merger: Optional[MergeEngineProtocol] = None
    workspace_factory: Optional[Callable[[Path], ScratchWorkspaceProtocol]] = None

    def _logger(self, name: str) -> logging.Logger:
        if self.logger is None:
            return get_logger(name)
        return self.logger.getChild(name)

    def _default_workspace_factory(self, site_root: Path) -> ScratchWorkspace:
        return ScratchWorkspace(
            site_root,
            prefix=self.config.scratch_prefix,
            parent_dir=self.config.scratch_parent,
            logger=self._logger('io.workspace'),
        )

    def build(self) -> InjectionPipeline:
        cfg = self.config
        runner = self.runner or SubprocessRunner(quiet=cfg.quiet_tools, logger=self._logger('tools.command'))
        return InjectionPipeline(
            config=cfg,
            scanner=self.scanner or TreeScanner(
                page_suffixes=cfg.page_suffixes, logger=self._logger('discovery.scanner')
            ),
            generator=self.generator or BundleGenerator(
                command=cfg.tool_command, runner=runner, logger=self._logger('tools.generator')
            ),
            injector=self.injector or TagInjector(
                command=cfg.tool_command, runner=runner, logger=self._logger('tools.injector')
            ),
            merger=self.merger or MergeEngine(logger=self._logger('io.merge')),
            workspace_factory=self.workspace_factory or self._default_workspace_factory,
            report=self.report or ExecutionReport(),
            logger=self._logger('pipeline'),
        )


def build_pipeline(config: PipelineConfig, **overrides) -> InjectionPipeline:
    """Shortcut for ``PipelineBuilder(config, **overrides).build()``."""
    return PipelineBuilder(config=config, **overrides).build()
