# detection package

"""
Build tool detection from marker files at a project root.
"""

from .build_tool import (
    BuildTool,
    Icon,
    BUILD_TOOL_ATTRIBUTES,
    GRADLE_BUILD_FILE_NAME,
    MAVEN_BUILD_FILE_NAME
)
from .detector import detect, MissingBasePathError

__all__ = [
    'BuildTool',
    'Icon',
    'BUILD_TOOL_ATTRIBUTES',
    'GRADLE_BUILD_FILE_NAME',
    'MAVEN_BUILD_FILE_NAME',
    'detect',
    'MissingBasePathError'
]
