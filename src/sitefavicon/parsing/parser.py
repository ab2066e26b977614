# sitefavicon/parsing/parser.py
from __future__ import annotations

import argparse

from sitefavicon.constants import (
    DEFAULT_SITE_SUBPATH,
    DEFAULT_TOOL_COMMAND,
    FAVICON_SUBDIR,
    SETTINGS_NAME,
    SOURCE_IMAGE_NAME,
)


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - With no flags the layout is fully implicit: sources live in the
          current directory and the Site Root is a fixed relative location.
        - Every flag only overrides a piece of that layout or the logging.
    """
    p = argparse.ArgumentParser(
        prog="sitefavicon",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "sitefavicon – generate a favicon bundle once and inject it into\n"
            "every HTML page of a generated static site."
        ),
    )

    g_loc = p.add_argument_group("Layout")
    g_run = p.add_argument_group("Run")
    g_log = p.add_argument_group("Logging")

    g_loc.add_argument(
        "--base-dir",
        metavar="DIR",
        dest="base_dir",
        help=(
            f"Directory holding {SOURCE_IMAGE_NAME} and {SETTINGS_NAME}. "
            "Defaults to the current directory.\n"
            f"The Site Root is BASE/{DEFAULT_SITE_SUBPATH}, so either run from the\n"
            "favicon source directory or pass this flag."
        ),
    )
    g_loc.add_argument(
        "--site-root",
        metavar="DIR",
        dest="site_root",
        help=(
            f"Root of the generated site (default: BASE/{DEFAULT_SITE_SUBPATH}). "
            f"The bundle is written to SITE_ROOT/{FAVICON_SUBDIR}. "
            "Also read from SITEFAVICON_SITE_ROOT."
        ),
    )

    g_run.add_argument(
        "--tool",
        metavar="CMD",
        dest="tool_command",
        help=(
            f"Command prefix of the favicon tool (default: '{DEFAULT_TOOL_COMMAND}'). "
            "Also read from SITEFAVICON_TOOL."
        ),
    )
    g_run.add_argument(
        "--keep-going",
        action="store_true",
        dest="keep_going",
        help=(
            "Keep processing other directories after a directory fails and "
            "report every failure at the end. The exit status is still non-zero."
        ),
    )
    g_run.add_argument(
        "--report",
        metavar="FILE",
        dest="report_path",
        help="Write a JSON execution report to FILE (also on failure).",
    )

    g_log.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit logs as JSON lines. Also enabled by SITEFAVICON_JSON_LOGS=1.",
    )
    g_log.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="Enable debug logging.",
    )
    g_log.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        dest="quiet",
        help="Only log warnings and errors; silence the tool's own output.",
    )
    return p
