import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import sitefavicon.core.interfaces as I

    assert hasattr(I, "BundleGeneratorProtocol")
    assert hasattr(I, "CommandRunnerProtocol")
    assert hasattr(I, "LoggerFactoryProtocol")
    assert hasattr(I, "LoggerLikeProtocol")
    assert hasattr(I, "MergeEngineProtocol")
    assert hasattr(I, "ScratchWorkspaceProtocol")
    assert hasattr(I, "TagInjectorProtocol")
    assert hasattr(I, "TreeScannerProtocol")


def test_default_implementations_satisfy_protocols():
    import sitefavicon.core.interfaces as I
    from sitefavicon.discovery.tree_scanner import TreeScanner
    from sitefavicon.io.merge import MergeEngine
    from sitefavicon.io.workspace import ScratchWorkspace
    from sitefavicon.logging.factory import DefaultLoggerFactory
    from sitefavicon.tools import BundleGenerator, SubprocessRunner, TagInjector

    assert isinstance(TreeScanner(), I.TreeScannerProtocol)
    assert isinstance(MergeEngine(), I.MergeEngineProtocol)
    with ScratchWorkspace(Path(".")) as ws:
        assert isinstance(ws, I.ScratchWorkspaceProtocol)
    assert isinstance(SubprocessRunner(), I.CommandRunnerProtocol)
    assert isinstance(BundleGenerator(), I.BundleGeneratorProtocol)
    assert isinstance(TagInjector(), I.TagInjectorProtocol)
    assert isinstance(DefaultLoggerFactory(), I.LoggerFactoryProtocol)


def test_package_surface():
    import sitefavicon

    assert sitefavicon.__version__
    for name in sitefavicon.__all__:
        assert hasattr(sitefavicon, name), name
