"""
Notifier configuration module for settings shared by the host collaborators.
"""

from typing import Optional

DEFAULT_GROUP_ID = "ProjectOpenNotification"
DEFAULT_TITLE = "Project Build Tool"

class NotifierConfig:
    """Configuration class for notifier settings."""
    
    def __init__(self):
        self.editor = None
        self.group_id = DEFAULT_GROUP_ID
        self.title = DEFAULT_TITLE
    
    def set_editor(self, editor: Optional[str]):
        """Set the editor command used to open build files."""
        self.editor = editor
    
    def get_editor(self) -> Optional[str]:
        """Get the configured editor command, if any."""
        return self.editor
    
    def set_group_id(self, group_id: str):
        """Set the notification group identifier."""
        self.group_id = group_id
    
    def get_group_id(self) -> str:
        """Get the notification group identifier."""
        return self.group_id
    
    def set_title(self, title: str):
        """Set the notification title."""
        self.title = title
    
    def get_title(self) -> str:
        """Get the notification title."""
        return self.title
    
    def reset(self):
        """Restore the default settings."""
        self.__init__()

# Create a singleton instance
_config = NotifierConfig()

# Export all methods from the singleton instance
set_editor = _config.set_editor
get_editor = _config.get_editor
set_group_id = _config.set_group_id
get_group_id = _config.get_group_id
set_title = _config.set_title
get_title = _config.get_title
reset = _config.reset
