import logging
from pathlib import Path
from typing import Dict, Union

from pydantic import BaseModel, ConfigDict, Field

from config import notifier_config
from detection import BuildTool, Icon

logger = logging.getLogger(__name__)

class UnknownLinkError(KeyError):
    """Raised when an activated link is not one of the notification's links."""

    def __str__(self) -> str:
        return f"Unknown link identifier: {self.args[0]!r}"

class NotificationPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    group_id: str = Field(..., description="Notification group the banner belongs to")
    notification_type: str = Field("information", description="Severity shown by the host")
    title: str = Field(..., description="Banner title, e.g. 'Project Build Tool'")
    icon: Icon = Field(..., description="Icon of the detected build tool")
    build_tool: BuildTool = Field(..., description="Detected build tool")
    body: str = Field(..., description="Label followed by <a href> anchors, one per build file")
    links: Dict[str, Path] = Field(default_factory=dict, description="Link identifier to absolute path of the build file")

def _anchor(file_name: str) -> str:
    return f'<a href="{file_name}">{file_name}</a>'

def build_notification(root: Union[str, Path], tool: BuildTool) -> NotificationPayload:
    """
    Build the notification describing a detected build tool.
    
    Args:
        root: Path to the project root
        tool: Build tool previously returned by detect()
        
    Returns:
        NotificationPayload whose links map each build file name to its
        absolute path under root, Gradle first
    """
    root = Path(root).absolute()
    content = tool.label
    links = {}
    
    for i, file_name in enumerate(tool.build_files):
        content += ("<br>" if i == 0 else "\t") + _anchor(file_name)
        links[file_name] = root / file_name
    
    logger.debug(f"Built notification for {tool.name} with {len(links)} link(s)")
    return NotificationPayload(
        group_id=notifier_config.get_group_id(),
        title=notifier_config.get_title(),
        icon=tool.icon,
        build_tool=tool,
        body=content,
        links=links
    )

def resolve_link(payload: NotificationPayload, identifier: str) -> Path:
    """
    Resolve an activated link back to the build file it points to.
    
    Args:
        payload: Notification the link was activated in
        identifier: The href of the activated anchor
        
    Returns:
        Absolute path of the build file
        
    Raises:
        UnknownLinkError: If identifier is not one of the payload's links
    """
    try:
        return payload.links[identifier]
    except KeyError:
        raise UnknownLinkError(identifier) from None
