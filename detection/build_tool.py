from enum import Enum
from typing import Dict, NamedTuple, Tuple

GRADLE_BUILD_FILE_NAME = "build.gradle"
MAVEN_BUILD_FILE_NAME = "pom.xml"

class Icon(Enum):
    """Notification icons, valued by their image resource path."""
    MAVEN = "icons/maven.png"
    GRADLE = "icons/gradle.png"
    UNKNOWN = "icons/unknown.png"

    @property
    def resource_path(self) -> str:
        return self.value

class BuildTool(Enum):
    """Build tool a project root was classified as."""
    MAVEN = "maven"
    GRADLE = "gradle"
    MAVEN_OR_GRADLE = "maven_or_gradle"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        return BUILD_TOOL_ATTRIBUTES[self].label

    @property
    def icon(self) -> Icon:
        return BUILD_TOOL_ATTRIBUTES[self].icon

    @property
    def build_files(self) -> Tuple[str, ...]:
        return BUILD_TOOL_ATTRIBUTES[self].build_files

class BuildToolAttributes(NamedTuple):
    label: str
    icon: Icon
    build_files: Tuple[str, ...]

# Marker files are listed Gradle first, then Maven
BUILD_TOOL_ATTRIBUTES: Dict[BuildTool, BuildToolAttributes] = {
    BuildTool.MAVEN: BuildToolAttributes(
        "This is Maven project", Icon.MAVEN, (MAVEN_BUILD_FILE_NAME,)),
    BuildTool.GRADLE: BuildToolAttributes(
        "This is Gradle project", Icon.GRADLE, (GRADLE_BUILD_FILE_NAME,)),
    BuildTool.MAVEN_OR_GRADLE: BuildToolAttributes(
        "This is Maven or Gradle project", Icon.UNKNOWN,
        (GRADLE_BUILD_FILE_NAME, MAVEN_BUILD_FILE_NAME)),
    BuildTool.UNKNOWN: BuildToolAttributes(
        "This is unknown project", Icon.UNKNOWN, ()),
}
