import logging
from pathlib import Path
from typing import Optional, Union

from .build_tool import BuildTool, GRADLE_BUILD_FILE_NAME, MAVEN_BUILD_FILE_NAME

logger = logging.getLogger(__name__)

class MissingBasePathError(ValueError):
    """Raised when a project has no base path to inspect."""

def _is_regular_file(path: Path) -> bool:
    """Check that path is a regular file, counting access errors as absent."""
    try:
        return path.is_file()
    except OSError as e:
        logger.warning(f"Could not check {path}: {e}")
        return False

def detect(project_root: Optional[Union[str, Path]]) -> BuildTool:
    """
    Classify a project root by the build files present in it.
    
    Only the root directory itself is inspected, and only for the exact
    names build.gradle and pom.xml. File contents are never read.
    
    Args:
        project_root: Path to the project root
        
    Returns:
        MAVEN_OR_GRADLE if both files exist, GRADLE or MAVEN if only one
        does, UNKNOWN otherwise (including when the root is missing)
        
    Raises:
        MissingBasePathError: If no project root was given
    """
    if project_root is None or not str(project_root).strip():
        raise MissingBasePathError("Project has no base path")
    
    root = Path(project_root)
    gradle_build_file_exists = _is_regular_file(root / GRADLE_BUILD_FILE_NAME)
    maven_build_file_exists = _is_regular_file(root / MAVEN_BUILD_FILE_NAME)
    
    if gradle_build_file_exists and maven_build_file_exists:
        build_tool = BuildTool.MAVEN_OR_GRADLE
    elif gradle_build_file_exists:
        build_tool = BuildTool.GRADLE
    elif maven_build_file_exists:
        build_tool = BuildTool.MAVEN
    else:
        build_tool = BuildTool.UNKNOWN
    
    logger.info(f"Detected build tool {build_tool.name} in {root}")
    return build_tool
