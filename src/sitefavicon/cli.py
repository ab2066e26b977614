from __future__ import annotations

import contextlib
import logging
import os
import signal
import sys
from pathlib import Path
from typing import Iterator, List, NoReturn, Optional, Sequence

from sitefavicon.constants import EXIT_FAILURE, EXIT_INTERRUPTED, EXIT_OK
from sitefavicon.core.errors import DirectoryError, SiteFaviconError
from sitefavicon.core.models import DirectoryResult
from sitefavicon.core.report import ExecutionReport
from sitefavicon.logging.factory import DefaultLoggerFactory
from sitefavicon.logging.helpers import get_logger
from sitefavicon.parsing.parser import _build_parser
from sitefavicon.runtime.config import FAIL_FAST, KEEP_GOING, PipelineConfig
from sitefavicon.runtime.container import PipelineBuilder


logger = get_logger('sitefavicon')

_TERMINATING_SIGNALS = tuple(
    getattr(signal, name) for name in ('SIGTERM', 'SIGHUP') if hasattr(signal, name)
)


def _configure_logging(enable_json: bool, level: int = logging.INFO) -> None:
    """Configure process-wide logging once, either JSON or plain text."""
    factory = DefaultLoggerFactory(json_logs=enable_json, level=level)
    global logger
    logger = factory.get_logger('sitefavicon')


def _raise_exit(signum, frame) -> None:
    raise SystemExit(128 + signum)


@contextlib.contextmanager
def _exit_on_signals() -> Iterator[None]:
    """Turn SIGTERM/SIGHUP into SystemExit so scoped resources are released."""
    previous = {}
    for sig in _TERMINATING_SIGNALS:
        try:
            previous[sig] = signal.signal(sig, _raise_exit)
        except ValueError:
            # Not on the main thread; leave handlers alone.
            break
    try:
        yield
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)


def _write_report(report: ExecutionReport, path: Optional[str]) -> None:
    if not path:
        return
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(report.to_json(), encoding='utf-8')
        logger.info('✔ report written → %s', target)
    except OSError as exc:
        logger.warning('⚠  could not write report %s: %s', target, exc)


class SiteFavicon:
    """Top-level façade for command-style execution."""

    @staticmethod
    def build_config(ns) -> PipelineConfig:
        overrides = {}
        if ns.site_root:
            overrides['site_root'] = ns.site_root
        if ns.tool_command:
            overrides['tool_command'] = ns.tool_command
        return PipelineConfig.from_base_dir(
            ns.base_dir,
            failure_policy=KEEP_GOING if ns.keep_going else FAIL_FAST,
            quiet_tools=bool(ns.quiet),
            **overrides,
        )

    @staticmethod
    def run(argv: Sequence[str], *, builder_overrides: Optional[dict] = None) -> List[DirectoryResult]:
        """Run the whole pipeline for argv-like *argv*; errors propagate."""
        ns = _build_parser().parse_args(list(argv))

        json_logs = ns.json_logs or os.getenv('SITEFAVICON_JSON_LOGS') == '1'
        level = logging.DEBUG if ns.verbose else logging.WARNING if ns.quiet else logging.INFO
        _configure_logging(json_logs, level)

        cfg = SiteFavicon.build_config(ns)
        report = ExecutionReport()
        pipeline = PipelineBuilder(config=cfg, report=report, **(builder_overrides or {})).build()
        logger.info('Site root: %s', cfg.site_root)
        implicit_root = not (ns.base_dir or ns.site_root or os.getenv('SITEFAVICON_SITE_ROOT'))
        if implicit_root and not cfg.site_root.is_dir():
            logger.warning(
                '⚠  site root %s not found; it is resolved from the current directory '
                '(%s), run from the favicon source directory or pass --base-dir',
                cfg.site_root, Path.cwd(),
            )
        try:
            with _exit_on_signals():
                return pipeline.run()
        finally:
            _write_report(report, ns.report_path)


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `sitefavicon` script and `python -m sitefavicon`."""
    try:
        SiteFavicon.run(sys.argv[1:] if argv is None else argv)
        raise SystemExit(EXIT_OK)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(EXIT_INTERRUPTED)
    except DirectoryError as exc:
        logger.error('✘ failed while processing %s: %s', exc.directory, exc.__cause__ or exc)
        raise SystemExit(EXIT_FAILURE)
    except SiteFaviconError as exc:
        logger.error('✘ %s', exc)
        raise SystemExit(EXIT_FAILURE)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(EXIT_FAILURE)


if __name__ == '__main__':
    main()
