from __future__ import annotations

"""Adapter around the external favicon-bundle generator.

Runs ``<tool> generate SOURCE SETTINGS METADATA DEST`` exactly once and then
checks that the metadata artifact exists and is valid JSON. Any failure is
fatal for the run because every injection depends on that artifact.
"""

import json
from pathlib import Path
from typing import List, Optional, Sequence

from sitefavicon.constants import GENERATE_SUBCOMMAND
from sitefavicon.core.errors import GeneratorError, MissingMetadataError, ToolError
from sitefavicon.core.interfaces.tools import BundleGeneratorProtocol, CommandRunnerProtocol
from sitefavicon.core.models import BundleArtifacts
from sitefavicon.core.interfaces.logging import LoggerLikeProtocol
from sitefavicon.logging.helpers import get_logger
from sitefavicon.tools.command import SubprocessRunner, split_command


def load_metadata(path: Path) -> object:
    """Parse the metadata artifact or raise MissingMetadataError."""
    if not path.is_file():
        raise MissingMetadataError(path)
    try:
        return json.loads(path.read_text(encoding='utf-8'))
    except (OSError, UnicodeDecodeError) as exc:
        raise MissingMetadataError(path, f'is unreadable ({exc})') from exc
    except json.JSONDecodeError as exc:
        raise MissingMetadataError(path, f'is not valid JSON ({exc.msg} at line {exc.lineno})') from exc


class BundleGenerator(BundleGeneratorProtocol):
    def __init__(
        self,
        *,
        command: str | Sequence[str] | None = None,
        runner: Optional[CommandRunnerProtocol] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._prefix = split_command(command)
        self._runner = runner or SubprocessRunner()
        self._log = logger or get_logger('tools.generator')

    def build_command(self, source_image: Path, settings: Path, metadata_path: Path, dest_dir: Path) -> List[str]:
        return [
            *self._prefix,
            GENERATE_SUBCOMMAND,
            str(source_image),
            str(settings),
            str(metadata_path),
            str(dest_dir),
        ]

    def generate(
        self,
        *,
        source_image: Path,
        settings: Path,
        metadata_path: Path,
        dest_dir: Path,
    ) -> BundleArtifacts:
        for label, required in (('source image', source_image), ('settings artifact', settings)):
            if not Path(required).is_file():
                raise GeneratorError(f'{label} {required} not found')

        try:
            Path(dest_dir).mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise GeneratorError(f'cannot create bundle directory {dest_dir}: {exc}') from exc

        self._log.info('Generating favicon bundle → %s', dest_dir)
        try:
            self._runner.run(self.build_command(source_image, settings, metadata_path, dest_dir))
        except ToolError as exc:
            raise GeneratorError(f'favicon generation failed: {exc}') from exc

        load_metadata(Path(metadata_path))
        self._log.info('✔ bundle metadata → %s', metadata_path)
        return BundleArtifacts(metadata_path=Path(metadata_path), dest_dir=Path(dest_dir))
