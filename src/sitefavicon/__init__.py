from __future__ import annotations

from sitefavicon.cli import SiteFavicon, main
from sitefavicon.core.errors import (
    GeneratorError,
    InjectionError,
    MergeError,
    MissingMetadataError,
    PipelineFailed,
    SiteFaviconError,
)
from sitefavicon.core.models import DirectoryEntry, MergeAction
from sitefavicon.discovery.tree_scanner import TreeScanner
from sitefavicon.io.merge import MergeEngine
from sitefavicon.io.workspace import ScratchWorkspace
from sitefavicon.pipeline import InjectionPipeline
from sitefavicon.runtime.config import PipelineConfig
from sitefavicon.runtime.container import PipelineBuilder, build_pipeline
from sitefavicon.tools.generator import BundleGenerator
from sitefavicon.tools.injector import TagInjector

__version__ = '0.3.0'

__all__ = [
    'BundleGenerator',
    'DirectoryEntry',
    'GeneratorError',
    'InjectionError',
    'InjectionPipeline',
    'MergeAction',
    'MergeEngine',
    'MergeError',
    'MissingMetadataError',
    'PipelineBuilder',
    'PipelineConfig',
    'PipelineFailed',
    'ScratchWorkspace',
    'SiteFavicon',
    'SiteFaviconError',
    'TagInjector',
    'TreeScanner',
    'build_pipeline',
    'main',
]
