from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates the filesystem layout conventions so that the CLI,
the configuration layer and the tests agree on a single source of truth.
"""

# Site Root relative to the base directory that holds the favicon sources.
DEFAULT_SITE_SUBPATH: str = "../_site"

# The bundle always lands in this subdirectory of the Site Root.
FAVICON_SUBDIR: str = "favicon"
METADATA_FILENAME: str = "output-data.json"

SOURCE_IMAGE_NAME: str = "favicon.png"
SETTINGS_NAME: str = "favicon-settings.json"

PAGE_SUFFIXES: tuple[str, ...] = (".html",)

DEFAULT_TOOL_COMMAND: str = "npx realfavicon"
GENERATE_SUBCOMMAND: str = "generate"
INJECT_SUBCOMMAND: str = "inject"

SCRATCH_PREFIX: str = "sitefavicon_"

EXIT_OK: int = 0
EXIT_FAILURE: int = 1
EXIT_INTERRUPTED: int = 130
