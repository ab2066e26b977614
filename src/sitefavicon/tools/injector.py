from __future__ import annotations

"""Adapter around the external tag injector.

One call per directory: ``<tool> inject METADATA OUTPUT_DIR PAGE...`` with
every staged page of that directory. OUTPUT_DIR is the scratch directory
holding the staged copies, so the tool rewrites them in place.
"""

from pathlib import Path
from typing import List, Optional, Sequence

from sitefavicon.constants import INJECT_SUBCOMMAND
from sitefavicon.core.errors import InjectionError, ToolError
from sitefavicon.core.interfaces.tools import CommandRunnerProtocol, TagInjectorProtocol
from sitefavicon.core.interfaces.logging import LoggerLikeProtocol
from sitefavicon.logging.helpers import get_logger
from sitefavicon.tools.command import SubprocessRunner, split_command


class TagInjector(TagInjectorProtocol):
    def __init__(
        self,
        *,
        command: str | Sequence[str] | None = None,
        runner: Optional[CommandRunnerProtocol] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._prefix = split_command(command)
        self._runner = runner or SubprocessRunner()
        self._log = logger or get_logger('tools.injector')

    def build_command(self, metadata_path: Path, pages: Sequence[Path], output_dir: Path) -> List[str]:
        return [
            *self._prefix,
            INJECT_SUBCOMMAND,
            str(metadata_path),
            str(output_dir),
            *(str(p) for p in pages),
        ]

    def inject(
        self,
        metadata_path: Path,
        pages: Sequence[Path],
        *,
        output_dir: Path,
        directory: Optional[Path] = None,
    ) -> None:
        """Inject markup into *pages*; *directory* names the live directory in errors."""
        if not pages:
            raise ValueError('inject() needs at least one page')
        self._log.debug('injecting %d page(s) in %s', len(pages), output_dir)
        try:
            self._runner.run(self.build_command(metadata_path, pages, output_dir))
        except ToolError as exc:
            raise InjectionError(Path(directory or output_dir), str(exc)) from exc
