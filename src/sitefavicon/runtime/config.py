from __future__ import annotations

"""Pipeline configuration.

A single frozen dataclass carries the filesystem layout and the tool
settings. It is built from a base directory (the directory that holds the
favicon sources) and optionally overridden from CLI flags or environment
variables:

    SITEFAVICON_SITE_ROOT   Site Root override.
    SITEFAVICON_TOOL        Command prefix of the favicon tool (default: npx realfavicon).
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

from sitefavicon.constants import (
    DEFAULT_SITE_SUBPATH,
    DEFAULT_TOOL_COMMAND,
    FAVICON_SUBDIR,
    METADATA_FILENAME,
    PAGE_SUFFIXES,
    SCRATCH_PREFIX,
    SETTINGS_NAME,
    SOURCE_IMAGE_NAME,
)
from sitefavicon.utils.paths import resolve_site_root
from sitefavicon.utils.suffixes import normalize_suffixes

FAIL_FAST = 'fail_fast'
KEEP_GOING = 'keep_going'
FAILURE_POLICIES = (FAIL_FAST, KEEP_GOING)


@dataclass(frozen=True)
class PipelineConfig:
    site_root: Path
    source_image: Path
    settings: Path
    tool_command: str = DEFAULT_TOOL_COMMAND
    page_suffixes: Tuple[str, ...] = PAGE_SUFFIXES
    scratch_prefix: str = SCRATCH_PREFIX
    scratch_parent: Optional[Path] = None
    failure_policy: str = FAIL_FAST
    quiet_tools: bool = False

    def __post_init__(self) -> None:
        if self.failure_policy not in FAILURE_POLICIES:
            raise ValueError(f'unknown failure policy {self.failure_policy!r}')
        suffixes = tuple(normalize_suffixes(self.page_suffixes))
        if not suffixes:
            raise ValueError('at least one page suffix is required')
        object.__setattr__(self, 'page_suffixes', suffixes)
        object.__setattr__(self, 'site_root', Path(self.site_root).resolve())

    @property
    def dest_dir(self) -> Path:
        """The bundle always lands in a fixed subdirectory of the Site Root."""
        return self.site_root / FAVICON_SUBDIR

    @property
    def metadata_path(self) -> Path:
        return self.dest_dir / METADATA_FILENAME

    @property
    def keep_going(self) -> bool:
        return self.failure_policy == KEEP_GOING

    @classmethod
    def from_base_dir(
        cls,
        base_dir: Path | str | None = None,
        *,
        env: Optional[Mapping[str, str]] = None,
        **overrides,
    ) -> 'PipelineConfig':
        """Build the default layout rooted at *base_dir* (cwd when omitted).

        Explicit keyword overrides beat environment variables, which beat the
        fixed layout conventions.
        """
        env = os.environ if env is None else env
        base = Path(base_dir or Path.cwd()).resolve()

        site_root = overrides.pop('site_root', None) or env.get('SITEFAVICON_SITE_ROOT')
        tool = overrides.pop('tool_command', None) or env.get('SITEFAVICON_TOOL') or DEFAULT_TOOL_COMMAND

        return cls(
            site_root=Path(site_root).resolve() if site_root else resolve_site_root(base, DEFAULT_SITE_SUBPATH),
            source_image=Path(overrides.pop('source_image', None) or base / SOURCE_IMAGE_NAME),
            settings=Path(overrides.pop('settings', None) or base / SETTINGS_NAME),
            tool_command=tool,
            **overrides,
        )
