import logging
import os
import shlex
import subprocess
import webbrowser
from pathlib import Path
from typing import Optional

from config import notifier_config

logger = logging.getLogger(__name__)

def _resolve_editor(editor: Optional[str]) -> Optional[str]:
    """Pick the editor command: explicit, configured, $VISUAL, then $EDITOR."""
    return (
        editor
        or notifier_config.get_editor()
        or os.environ.get("VISUAL")
        or os.environ.get("EDITOR")
    )

def open_in_editor(path: Path, editor: Optional[str] = None) -> None:
    """
    Open a build file in the user's editor, at the top of the file.
    
    Args:
        path: Absolute path of the file to open
        editor: Editor command overriding the configured one
        
    Raises:
        FileNotFoundError: If the file no longer exists
        RuntimeError: If the editor command fails
    """
    if not path.is_file():
        raise FileNotFoundError(f"Build file not found: {path}")
    
    command = _resolve_editor(editor)
    if not command:
        logger.info(f"No editor configured, opening {path} with the system handler")
        webbrowser.open(path.as_uri())
        return
    
    logger.info(f"Opening {path} with '{command}'")
    try:
        subprocess.run([*shlex.split(command), str(path)], check=True)
    except (subprocess.CalledProcessError, OSError) as e:
        raise RuntimeError(f"Failed to open {path} with '{command}': {e}") from e
