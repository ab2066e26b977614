from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """Logging calls made by the scanner, workspace, tool adapters, merge engine and pipeline.

    A ``logging.Logger`` satisfies it, and so does any recorder a caller
    hands to a component in its ``logger=`` argument.
    """

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def info(self, msg: str, *args, **kwargs) -> None: ...

    def warning(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Source of component loggers under the ``sitefavicon`` namespace."""

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        """Return the logger for component *name* (``sitefavicon.<name>``)."""
        ...
