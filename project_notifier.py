#!/usr/bin/env python3

import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional, Union

from cli.arguments import parse_args
from config import notifier_config
from detection import detect, MissingBasePathError
from notification import (
    NotificationPayload,
    UnknownLinkError,
    build_notification,
    resolve_link,
    render,
    choose_link,
    open_in_editor
)
from utils.colors import error, success
from utils.logging import setup_logging

logger = logging.getLogger(__name__)

class ProjectNotifier:
    """Shows the build tool notification when a project is opened."""
    
    def __init__(self,
                 display: Callable[[str], None] = print,
                 opener: Callable[[Path], None] = open_in_editor):
        """
        Initialize the notifier with its host collaborators.
        
        Args:
            display: Called with the rendered notification
            opener: Called with the path of a build file to open
        """
        self.display = display
        self.opener = opener
    
    def on_project_opened(self, project_root: Optional[Union[str, Path]]) -> NotificationPayload:
        """Detect the project's build tool and show the notification."""
        build_tool = detect(project_root)
        payload = build_notification(project_root, build_tool)
        self.display(render(payload))
        return payload
    
    def on_link_activated(self, payload: NotificationPayload, identifier: str) -> Path:
        """Open the build file behind an activated link."""
        path = resolve_link(payload, identifier)
        logger.info(f"Link {identifier} activated, opening {path}")
        self.opener(path)
        return path

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    setup_logging(args.log_dir, args.log_level)
    
    if args.editor:
        notifier_config.set_editor(args.editor)
    notifier_config.set_group_id(args.group_id)
    
    notifier = ProjectNotifier()
    try:
        payload = notifier.on_project_opened(args.project_path)
        
        identifier = args.open
        if identifier is None and not args.no_interactive:
            identifier = choose_link(payload)
        
        if identifier is not None:
            path = notifier.on_link_activated(payload, identifier)
            print(success(f"Opened {path}"))
    except (MissingBasePathError, UnknownLinkError, OSError, RuntimeError) as e:
        logger.error(str(e))
        print(error(str(e)))
        return 1
    
    return 0

if __name__ == "__main__":
    sys.exit(main())
