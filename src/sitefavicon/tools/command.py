from __future__ import annotations

"""Synchronous subprocess seam shared by the generator and injector adapters.

Commands block until the child exits; there is no timeout, so a hung tool
hangs the run. Output is inherited from the parent unless `quiet` is set.
"""

import shlex
import subprocess
from typing import List, Optional, Sequence

from sitefavicon.constants import DEFAULT_TOOL_COMMAND
from sitefavicon.core.errors import ToolError
from sitefavicon.core.interfaces.tools import CommandRunnerProtocol
from sitefavicon.core.interfaces.logging import LoggerLikeProtocol
from sitefavicon.logging.helpers import get_logger


def split_command(command: str | Sequence[str] | None) -> List[str]:
    """Turn a configured command prefix into an argv list.

    Strings are shell-split (``"npx realfavicon"`` -> ``["npx", "realfavicon"]``);
    sequences are copied as-is. Empty values fall back to the default tool.
    """
    if not command:
        return shlex.split(DEFAULT_TOOL_COMMAND)
    if isinstance(command, str):
        argv = shlex.split(command)
        return argv or shlex.split(DEFAULT_TOOL_COMMAND)
    return [str(c) for c in command]


class SubprocessRunner(CommandRunnerProtocol):
    def __init__(self, *, quiet: bool = False, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._quiet = bool(quiet)
        self._log = logger or get_logger('tools.command')

    def run(self, cmd: Sequence[str]) -> None:
        argv = [str(c) for c in cmd]
        self._log.debug('$ %s', shlex.join(argv))
        out = subprocess.DEVNULL if self._quiet else None
        try:
            subprocess.check_call(argv, stdout=out, stderr=out)
        except FileNotFoundError as exc:
            raise ToolError(f'command not found: {argv[0]}', cmd=argv) from exc
        except subprocess.CalledProcessError as exc:
            raise ToolError(
                f'{shlex.join(argv[:2])} exited with status {exc.returncode}',
                cmd=argv,
                returncode=exc.returncode,
            ) from exc
        except OSError as exc:
            raise ToolError(f'could not start {argv[0]}: {exc}', cmd=argv) from exc
