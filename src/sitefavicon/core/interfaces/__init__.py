from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .merge import MergeEngineProtocol
from .scanner import TreeScannerProtocol
from .tools import BundleGeneratorProtocol, CommandRunnerProtocol, TagInjectorProtocol
from .workspace import ScratchWorkspaceProtocol

__all__ = [
    'BundleGeneratorProtocol',
    'CommandRunnerProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'MergeEngineProtocol',
    'ScratchWorkspaceProtocol',
    'TagInjectorProtocol',
    'TreeScannerProtocol',
]
