import argparse
import logging
from pathlib import Path
from typing import List, Optional

from config.notifier_config import DEFAULT_GROUP_ID
from detection import GRADLE_BUILD_FILE_NAME, MAVEN_BUILD_FILE_NAME

logger = logging.getLogger(__name__)

def validate_link_args(args: argparse.Namespace) -> Optional[str]:
    """
    Validate link-related arguments.
    
    Args:
        args: Parsed command line arguments
        
    Returns:
        The link to open, if any
        
    Raises:
        ValueError: If arguments are invalid
    """
    if args.open and args.open not in (GRADLE_BUILD_FILE_NAME, MAVEN_BUILD_FILE_NAME):
        raise ValueError(f"--open must be {GRADLE_BUILD_FILE_NAME} or {MAVEN_BUILD_FILE_NAME}")
    if args.editor is not None and not args.editor.strip():
        raise ValueError("--editor cannot be empty")
        
    return args.open

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.
    
    Args:
        argv: Arguments to parse, defaults to sys.argv[1:]
        
    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description='Show which build tool a project uses and open its build file',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    
    parser.add_argument(
        'project_path',
        nargs='?',
        default='.',
        help='Root directory of the project that was opened'
    )
    
    # Link activation arguments
    parser.add_argument(
        '--open',
        type=str,
        metavar='LINK',
        help=f'Open a build file without prompting ({GRADLE_BUILD_FILE_NAME} or {MAVEN_BUILD_FILE_NAME})'
    )
    parser.add_argument(
        '--no-interactive',
        action='store_true',
        default=False,
        help='Only show the notification, never prompt for a link'
    )
    parser.add_argument(
        '--editor',
        type=str,
        help='Editor command used to open build files (defaults to $VISUAL or $EDITOR)'
    )
    parser.add_argument(
        '--group-id',
        type=str,
        default=DEFAULT_GROUP_ID,
        help='Notification group the banner is posted to'
    )
    
    # Logging arguments
    parser.add_argument(
        '--log-dir',
        type=str,
        default='logs',
        help='Directory to store log files'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        default='INFO',
        help='Set the console logging level'
    )
    
    args = parser.parse_args(argv)
    
    validate_link_args(args)
    
    # project_path stays a string, detect() rejects it when empty
    args.log_dir = Path(args.log_dir)
    
    return args
