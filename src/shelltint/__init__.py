"""shelltint - live highlighting for command-line input."""

from loguru import logger

from .editor import EditorSnapshot, PathConventions, RegionType
from .paths import PathArgHighlighter, PathClassifier, PathSegmentStyle
from .system import DispatchMode, SystemHighlighter, command_index

__version__ = "0.1.0"

logger.disable("shelltint")

__all__ = [
    "DispatchMode",
    "EditorSnapshot",
    "PathArgHighlighter",
    "PathClassifier",
    "PathConventions",
    "PathSegmentStyle",
    "RegionType",
    "SystemHighlighter",
    "command_index",
]
